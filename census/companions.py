from census.layout import LAYOUT_CHARACTER_MINION, LAYOUT_CHARACTER_MOUNTS
from census.layout import LAYOUT_DATA_TOOLTIP


def collection_names(soup, cssclass):
    # Some profiles leave the whole section out, which means nothing owned
    box = soup.find(class_=cssclass)
    if box is None:
        return []
    names = set()
    for li in box.find_all("li"):
        div = li.find("div", attrs={LAYOUT_DATA_TOOLTIP: True})
        if div is not None:
            names.add(div[LAYOUT_DATA_TOOLTIP])
    return sorted(names)


def collection_pass(struct, soup):
    struct['minions'] = collection_names(soup, LAYOUT_CHARACTER_MINION)
    struct['mounts'] = collection_names(soup, LAYOUT_CHARACTER_MOUNTS)
