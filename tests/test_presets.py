"""Tests for the preset table and RulesetRegistry."""

import logging

import pytest

from poker_solver.engine.hand_types import HandType
from poker_solver.engine.rules import Ruleset, WheelPolicy, WildPolicy
from poker_solver.presets import (
    DEFAULT_REGISTRY,
    PRESETS,
    RulesetRegistry,
    get_preset,
    get_preset_info,
    list_presets,
)

ALL_GAMES = [
    "standard", "boss", "jacksbetter", "joker", "deuceswild", "threecard",
    "fourcard", "fourcardbonus", "paigowpokerfull", "paigowpokeralt",
    "paigowpokersf6", "paigowpokersf7", "paigowpokerhi", "paigowpokerlo",
]


def test_list_presets():
    assert list_presets() == ALL_GAMES


def test_registry_keys_match_names():
    for key, ruleset in PRESETS.items():
        assert key == ruleset.name


@pytest.mark.parametrize("name", ["nope", "", None, "   "])
def test_unknown_names_fall_back_to_standard(name):
    assert get_preset(name).name == "standard"


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="poker_solver.presets"):
        get_preset("holdem-ish")
    assert "Unknown game" in caplog.text


def test_lookup_ignores_case():
    assert get_preset("BOSS").name == "boss"
    assert "Joker" in DEFAULT_REGISTRY


def test_preset_info():
    info = get_preset_info("threecard")
    assert info["cards_per_hand"] == 3
    assert info["lowest_qualifying"] == ["Qh", "3s", "2c"]
    assert get_preset_info("nope") is None


def test_only_standard_forbids_duplicates():
    assert [name for name, r in PRESETS.items() if r.forbid_duplicates] == ["standard"]


def test_only_bonus_games_lack_high_card():
    missing = [name for name, r in PRESETS.items() if HandType.HIGH_CARD not in r.hand_types]
    assert missing == ["paigowpokersf6", "paigowpokersf7"]


def test_pai_gow_joker_rules():
    for name in ALL_GAMES:
        if name.startswith("paigow"):
            ruleset = PRESETS[name]
            assert ruleset.wild_face == "O"
            assert ruleset.wild_policy == WildPolicy.FIXED
            assert ruleset.wheel_policy == WheelPolicy.SECOND_HIGHEST


class TestRulesetRegistry:
    """A registry can be built from custom rulesets."""

    def make_custom(self):
        return Ruleset(name="twocard", cards_per_hand=2, hand_types=(HandType.PAIR, HandType.HIGH_CARD))

    def test_custom_registry(self):
        registry = RulesetRegistry([self.make_custom()], default="twocard")
        assert registry.names() == ["twocard"]
        assert registry.get("anything").name == "twocard"
        assert len(registry) == 1

    def test_default_must_be_registered(self):
        with pytest.raises(KeyError, match="not registered"):
            RulesetRegistry([self.make_custom()])

    def test_register_does_not_touch_default_registry(self):
        registry = RulesetRegistry()
        registry.register(self.make_custom())
        assert "twocard" in registry
        assert "twocard" not in DEFAULT_REGISTRY
