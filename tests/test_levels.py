import pytest
from bs4 import BeautifulSoup

from census.errors import SchemaDriftError
from census.levels import JOB_SLOTS, REQUIRED_SLOTS
from census.levels import level_from_token, level_pass, level_tokens, map_levels


def _tokens(count, token="50"):
    return [token] * count


def _job_page(tokens, content_blocks=3):
    levels = "".join(
        '<li><div class="character__job__level">%s</div></li>' % t for t in tokens)
    blocks = ['<div class="character__content"></div>'] * (content_blocks - 1)
    blocks.append(
        '<div class="character__content"><ul class="character__job">%s</ul></div>' % levels)
    return BeautifulSoup("<body>%s</body>" % "".join(blocks), "html.parser")


class TestJobSlots:
    def test_roster_size(self):
        assert len(JOB_SLOTS) == 28
        assert REQUIRED_SLOTS == 27

    def test_elemental_level_is_last(self):
        assert JOB_SLOTS[-1] == "eureka"

    def test_slots_are_unique(self):
        assert len(set(JOB_SLOTS)) == len(JOB_SLOTS)


class TestLevelFromToken:
    def test_dash_is_not_unlocked(self):
        assert level_from_token("-", 1) == 0

    def test_number(self):
        assert level_from_token(" 70 ", 1) == 70

    def test_negative_is_fatal(self):
        with pytest.raises(SchemaDriftError):
            level_from_token("-5", 1)

    def test_text_is_fatal(self):
        with pytest.raises(SchemaDriftError) as excinfo:
            level_from_token("Lv. 70", 31337)
        assert "31337" in str(excinfo.value)


class TestMapLevels:
    def test_27_levels_has_no_elemental_slot(self):
        levels = map_levels(_tokens(27), 1)
        assert len(levels) == 27
        assert "eureka" not in levels
        assert levels["fisher"] == 50

    def test_28_levels_fills_elemental_slot(self):
        tokens = _tokens(27) + ["42"]
        levels = map_levels(tokens, 1)
        assert len(levels) == 28
        assert levels["eureka"] == 42

    def test_slot_order_follows_display_order(self):
        tokens = [str(i + 1) for i in range(28)]
        levels = map_levels(tokens, 1)
        assert list(levels) == JOB_SLOTS
        assert levels["gladiator"] == 1
        assert levels["darkknight"] == 3
        assert levels["bluemage"] == 16
        assert levels["carpenter"] == 17

    def test_dash_maps_to_zero(self):
        tokens = ["-"] + _tokens(26)
        assert map_levels(tokens, 1)["gladiator"] == 0

    def test_too_many_levels_names_counts(self):
        with pytest.raises(SchemaDriftError) as excinfo:
            map_levels(_tokens(29), 2256025)
        message = str(excinfo.value)
        assert "2256025" in message
        assert "(29)" in message
        assert "(28)" in message

    def test_too_few_levels_is_fatal(self):
        with pytest.raises(SchemaDriftError) as excinfo:
            map_levels(_tokens(26), 1)
        assert "(26)" in str(excinfo.value)


class TestLevelTokens:
    def test_reads_third_content_block(self):
        soup = _job_page(["70", "-", "1"])
        assert level_tokens(soup, 1) == ["70", "-", "1"]

    def test_missing_job_tab_is_fatal(self):
        soup = _job_page(["70"], content_blocks=2)
        with pytest.raises(SchemaDriftError):
            level_tokens(soup, 1)

    def test_level_pass(self):
        struct = {"id": 1}
        level_pass(struct, _job_page(_tokens(28, "-")))
        assert struct["job_levels"] == dict((slot, 0) for slot in JOB_SLOTS)
