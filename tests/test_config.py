from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tests.helpers.game_asserts import make_game
from treasurehunt.config import ConfigValidationError, GameRules, get_default_rules_path, load_rules, save_rules
from treasurehunt.config import rules as rules_module
from treasurehunt.services import Ok


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_rules(tmp_path / "absent.json") == GameRules()


def test_invalid_json_returns_defaults_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "rules.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="treasurehunt.config.rules"):
        rules = load_rules(path)

    assert rules == GameRules()
    assert "Falling back to default rules" in caplog.text


def test_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_rules(path) == GameRules()


def test_overrides_are_applied(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps({"registration_fee": 5, "claim_experience": 500, "tier_rewards": {"1": 10, "2": 20}, "extra": 1}),
        encoding="utf-8",
    )

    rules = load_rules(path)

    assert rules.registration_fee == 5
    assert rules.claim_experience == 500
    assert rules.tier_rewards == {1: 10, 2: 20}
    assert rules.starting_energy == 100


@pytest.mark.parametrize("value", [0, -3, "10", True, 1.5])
def test_bad_values_raise(tmp_path: Path, value: object) -> None:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"exploration_energy_cost": value}), encoding="utf-8")

    with pytest.raises(ConfigValidationError):
        load_rules(path)


def test_bad_tier_key_raises(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"tier_rewards": {"gold": 5}}), encoding="utf-8")

    with pytest.raises(ConfigValidationError):
        load_rules(path)


def test_save_then_load_preserves_rules(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "rules.json"
    rules = GameRules(registration_fee=42, tier_rewards={1: 7, 3: 9})

    save_rules(rules, path)

    assert load_rules(path) == rules
    assert json.loads(path.read_text(encoding="utf-8"))["tier_rewards"] == {"1": 7, "3": 9}


def test_env_var_overrides_default_path(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv(rules_module.CONFIG_ENV_VAR, str(target))

    assert get_default_rules_path() == target


def test_default_path_under_user_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(rules_module.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(rules_module.Path, "home", lambda: tmp_path)

    assert get_default_rules_path() == tmp_path / ".config" / "treasure_hunt" / "rules.json"


def test_custom_rules_drive_game_arithmetic() -> None:
    rules = GameRules(
        registration_fee=10,
        exploration_energy_cost=25,
        exploration_experience=100,
        claim_experience=300,
        experience_per_level=200,
        tier_rewards={1: 5},
    )
    game = make_game(rules)
    game.register_player("Alice", "alice")
    location_id = game.create_location("Woods", "Trees", 1, 0, 0, 5, 1, 1, 0).value
    treasure_id = game.create_treasure("Coin", "Coin", 1, location_id, 0, 0, 3, 1).value

    game.explore_location(location_id, 0, 0, "alice")
    claim = game.claim_treasure(treasure_id, "alice")

    player = game.get_player_info("alice")
    assert claim == Ok(15)
    assert game.state.prize_pool == 10
    assert player.energy == 75
    assert player.experience == 400
    assert player.level == 3


def test_undecodable_file_returns_defaults_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "rules.json"
    path.write_bytes(b'{"registration_fee": \xff\xfe}')

    with caplog.at_level(logging.WARNING, logger="treasurehunt.config.rules"):
        rules = load_rules(path)

    assert rules == GameRules()
    assert "not valid UTF-8" in caplog.text


@pytest.mark.parametrize(
    "overrides",
    [
        {"tier_rewards": {}},
        {"tier_rewards": {1: 0}},
        {"registration_fee": 0},
        {"experience_per_level": -1},
    ],
)
def test_rules_built_in_code_are_validated(overrides: dict) -> None:
    with pytest.raises(ConfigValidationError):
        GameRules(**overrides)
