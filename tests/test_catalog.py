"""Tests for layout and strategy descriptions."""

import pytest

from seat_planner import catalog
from seat_planner.models import LayoutKind, StrategyKind
from seat_planner.translations import available_languages, get_language, set_language, tr


@pytest.mark.parametrize("layout", list(LayoutKind))
def test_every_layout_is_described(layout):
    assert catalog.layout_name(layout)
    assert catalog.layout_description(layout)
    assert catalog.layout_purpose(layout)


@pytest.mark.parametrize("strategy", list(StrategyKind))
def test_every_strategy_is_described(strategy):
    assert catalog.strategy_name(strategy)
    assert catalog.strategy_description(strategy)
    assert catalog.strategy_research(strategy)


def test_unknown_names_use_defaults():
    assert catalog.layout_name("spiral") == "Traditional Rows"
    assert catalog.strategy_name("lottery") == "Random Assignment"


def test_german_names():
    set_language("de")
    try:
        assert get_language() == "de"
        assert catalog.layout_name("groups") == "Gruppentische"
        assert catalog.strategy_name("mixed-ability") == "Gemischte Leistungsniveaus"
        assert tr("untranslated text") == "untranslated text"
    finally:
        set_language("en")


def test_available_languages():
    assert ("de", "Deutsch") in available_languages()


def test_roster_summary(classroom):
    summary = catalog.roster_summary(classroom)
    assert summary["students"] == 10
    assert summary["languages"] == 4  # English, Spanish, German, Polish
    assert summary["constraints"] == 6
    assert summary["skill_levels"] == {"beginner": 3, "intermediate": 3, "advanced": 4}


def test_roster_summary_empty():
    assert catalog.roster_summary([])["skill_levels"] == {
        "beginner": 0, "intermediate": 0, "advanced": 0,
    }
