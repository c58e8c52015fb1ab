"""Site coupling for the Lodestone character profile page.

Every CSS class the extractors depend on lives here, along with the
declarative tables that say which element feeds which record field.
When the Lodestone markup changes, this is the file to update.
"""
from universal.utils import get_text, element_text, own_text_nodes
from census.errors import SchemaDriftError

LAYOUT_FRAME_CHARA_WORLD = "frame__chara__world"
LAYOUT_CHARACTER_BLOCK_NAME = "character-block__name"
LAYOUT_CHARACTER_BLOCK_BOX = "character-block__box"
LAYOUT_CHARACTER_FREECOMPANY_NAME = "character__freecompany__name"
LAYOUT_CHARACTER_CONTENT = "character__content"
LAYOUT_CHARACTER_JOB_LEVEL = "character__job__level"
LAYOUT_CHARACTER_MINION = "character__minion"
LAYOUT_CHARACTER_MOUNTS = "character__mounts"
LAYOUT_CHARACTER_DETAIL_IMAGE = "character__detail__image"
LAYOUT_DATA_TOOLTIP = "data-tooltip"

# The class/job tab is the third content block on the profile
JOB_CONTENT_INDEX = 2

NO_AFFILIATION = "none"

GENDER_SYMBOLS = {
    "♂": "male",
    "♀": "female",
}


def select_required(soup, selector, character_id):
    element = soup.select_one(selector)
    if element is None:
        raise SchemaDriftError(
            character_id, "expected element '%s' not found on page" % selector)
    return element


def name_rule(element):
    parts = get_text(element).split("|")
    return parts[0].strip()


def realm_rule(element):
    return element_text(element).replace("(", "").replace(")", "")


def race_rule(element):
    # The block also holds clan and gender, only the first text node is race
    nodes = [n.strip() for n in own_text_nodes(element) if n.strip()]
    if not nodes:
        return None
    return nodes[0]


def gender_rule(element):
    parts = element_text(element).split("/")
    if len(parts) < 2:
        return None
    return GENDER_SYMBOLS.get(parts[1].strip())


FIELD_EXTRACTORS = [
    ("name", "title", name_rule),
    ("realm", "." + LAYOUT_FRAME_CHARA_WORLD, realm_rule),
    ("race", "." + LAYOUT_CHARACTER_BLOCK_NAME, race_rule),
    ("gender", "." + LAYOUT_CHARACTER_BLOCK_NAME, gender_rule),
]

# Profiles omit or localize the gender symbol
NULLABLE_FIELDS = set(["gender"])


def field_pass(struct, soup):
    for field, selector, rule in FIELD_EXTRACTORS:
        element = select_required(soup, selector, struct['id'])
        value = rule(element)
        if value is None and field not in NULLABLE_FIELDS:
            raise SchemaDriftError(
                struct['id'], "could not read %s from '%s'" % (field, selector))
        struct[field] = value


def is_free_company_box(box):
    return box.find(class_=LAYOUT_CHARACTER_FREECOMPANY_NAME) is not None


def grand_company_at(index):
    def _grand_company(boxes, character_id):
        name = select_required(
            boxes[index], "." + LAYOUT_CHARACTER_BLOCK_NAME, character_id)
        return element_text(name).split("/")[0].strip()
    return _grand_company


def free_company_at(index):
    def _free_company(boxes, character_id):
        fc = select_required(
            boxes[index], "." + LAYOUT_CHARACTER_FREECOMPANY_NAME, character_id)
        return " ".join(element_text(a) for a in fc.find_all("a"))
    return _free_company


def no_affiliation(boxes, character_id):
    return NO_AFFILIATION


# layout -> (grand company rule, free company rule)
AFFILIATION_LAYOUTS = {
    "gc_and_fc": (grand_company_at(3), free_company_at(4)),
    "fc_only": (no_affiliation, free_company_at(3)),
    "gc_only": (grand_company_at(3), no_affiliation),
    "neither": (no_affiliation, no_affiliation),
}


def affiliation_layout(boxes):
    if len(boxes) == 5:
        return "gc_and_fc"
    if len(boxes) == 4:
        if is_free_company_box(boxes[3]):
            return "fc_only"
        return "gc_only"
    return "neither"


def affiliation_pass(struct, soup):
    boxes = soup.find_all(class_=LAYOUT_CHARACTER_BLOCK_BOX)
    gc_rule, fc_rule = AFFILIATION_LAYOUTS[affiliation_layout(boxes)]
    struct['grand_company'] = gc_rule(boxes, struct['id'])
    struct['free_company'] = fc_rule(boxes, struct['id'])


def portrait_url(soup, character_id):
    img = select_required(
        soup, "." + LAYOUT_CHARACTER_DETAIL_IMAGE + " a img", character_id)
    if not img.get("src"):
        raise SchemaDriftError(character_id, "portrait image has no src")
    return img["src"]
