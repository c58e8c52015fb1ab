from bs4 import BeautifulSoup

from census.companions import collection_names, collection_pass


def _collection(cssclass, names):
    items = "".join(
        '<li><div class="character__item_icon" data-tooltip="%s"><img src="x.png"></div></li>' % n
        for n in names)
    return '<div class="%s"><ul>%s</ul></div>' % (cssclass, items)


class TestCollectionNames:
    def test_reads_tooltips(self):
        soup = BeautifulSoup(
            _collection("character__minion", ["Wind-up Cursor", "Namingway"]), "html.parser")
        assert collection_names(soup, "character__minion") == ["Namingway", "Wind-up Cursor"]

    def test_missing_section_is_empty(self):
        soup = BeautifulSoup("<div></div>", "html.parser")
        assert collection_names(soup, "character__minion") == []

    def test_duplicates_collapse(self):
        soup = BeautifulSoup(
            _collection("character__mounts", ["Coeurl", "Coeurl"]), "html.parser")
        assert collection_names(soup, "character__mounts") == ["Coeurl"]

    def test_items_without_tooltip_are_skipped(self):
        soup = BeautifulSoup(
            '<div class="character__mounts"><ul><li><div></div></li></ul></div>', "html.parser")
        assert collection_names(soup, "character__mounts") == []


class TestCollectionPass:
    def test_minions_and_mounts_kept_apart(self):
        soup = BeautifulSoup(
            _collection("character__minion", ["Midgardsormr"])
            + _collection("character__mounts", ["Legacy Chocobo"]),
            "html.parser")
        struct = {}
        collection_pass(struct, soup)
        assert struct == {"minions": ["Midgardsormr"], "mounts": ["Legacy Chocobo"]}

    def test_absent_mounts(self):
        soup = BeautifulSoup(_collection("character__minion", ["Beady Eye"]), "html.parser")
        struct = {}
        collection_pass(struct, soup)
        assert struct["mounts"] == []
