from census.errors import SchemaDriftError
from census.layout import LAYOUT_CHARACTER_CONTENT, LAYOUT_CHARACTER_JOB_LEVEL
from census.layout import JOB_CONTENT_INDEX
from universal.utils import element_text

# Order the class/job tab is rendered in on the Lodestone (as of 4.5)
JOB_SLOTS = [
    "gladiator", "marauder", "darkknight",
    "pugilist", "lancer", "rogue",
    "samurai",
    "conjurer", "scholar", "astrologian",
    "archer", "machinist",
    "thaumaturge", "arcanist", "redmage",
    "bluemage",
    "carpenter", "blacksmith", "armorer", "goldsmith",
    "leatherworker", "weaver", "alchemist", "culinarian",
    "miner", "botanist", "fisher",
    # Elemental level is an optional block at the end of the tab
    "eureka",
]

REQUIRED_SLOTS = 27

NOT_UNLOCKED = "-"


def level_from_token(token, character_id):
    token = token.strip()
    if token == NOT_UNLOCKED:
        return 0
    if not token.isdecimal():
        raise SchemaDriftError(
            character_id, "unexpected job level value '%s'" % token)
    return int(token)


def map_levels(tokens, character_id):
    """Pin an ordered sequence of level tokens to the job slots.

    More tokens than JOB_SLOTS means the game has added jobs the table
    does not know about yet, and fewer than REQUIRED_SLOTS means the tab
    is not the one we expect.  Both are fatal.
    """
    if len(tokens) > len(JOB_SLOTS):
        raise SchemaDriftError(
            character_id,
            "More class levels found (%s) than anticipated (%s). "
            "The class definitions need to be updated." % (
                len(tokens), len(JOB_SLOTS)))
    if len(tokens) < REQUIRED_SLOTS:
        raise SchemaDriftError(
            character_id,
            "Fewer class levels found (%s) than anticipated (%s)." % (
                len(tokens), REQUIRED_SLOTS))
    levels = {}
    for slot, token in zip(JOB_SLOTS, tokens):
        levels[slot] = level_from_token(token, character_id)
    return levels


def level_tokens(soup, character_id):
    contents = soup.find_all(class_=LAYOUT_CHARACTER_CONTENT)
    if len(contents) <= JOB_CONTENT_INDEX:
        raise SchemaDriftError(
            character_id,
            "class/job tab not found (%s content blocks)" % len(contents))
    job_tab = contents[JOB_CONTENT_INDEX]
    return [
        element_text(level)
        for level in job_tab.find_all(class_=LAYOUT_CHARACTER_JOB_LEVEL)]


def level_pass(struct, soup):
    tokens = level_tokens(soup, struct['id'])
    struct['job_levels'] = map_levels(tokens, struct['id'])
