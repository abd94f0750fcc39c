from __future__ import annotations

from tests.helpers.game_asserts import START_TIME, assert_levels_consistent, make_game, snapshot
from treasurehunt.domain.entities import LocationType
from treasurehunt.services import Err, ErrorCode, Ok
from treasurehunt.services.exploration_service import EXPLORE_SUCCESS_MESSAGE


def _create_location(game, *, entry_requirement: int = 1) -> int:
    result = game.create_location(
        "Easy Woods", "Simple forest", LocationType.FOREST, 25, 25, 15, 1, entry_requirement, 50_000
    )
    assert isinstance(result, Ok)
    return result.value


def test_create_location_allocates_sequential_ids() -> None:
    game = make_game()

    first = game.create_location("Test Forest", "A mysterious forest", 1, 50, 50, 20, 3, 1, 100_000)
    second = game.create_location("Dragon Lair", "Dangerous cave", 3, 100, 100, 10, 10, 5, 200_000)

    assert first == Ok(1)
    assert second == Ok(2)
    location = game.get_location_info(1)
    assert location is not None
    assert location.name == "Test Forest"
    assert location.difficulty_level == 3
    assert location.coordinates.radius == 20
    assert location.treasure_count == 0
    assert not location.is_hidden
    assert location.discovered_by == []


def test_explore_updates_player() -> None:
    game = make_game()
    game.register_player("Explorer", "explorer123")
    location_id = _create_location(game)
    game.clock.advance(5_000)

    result = game.explore_location(location_id, 25, 25, "explorer123")

    assert result == Ok(EXPLORE_SUCCESS_MESSAGE)
    player = game.get_player_info("explorer123")
    assert player.current_location == location_id
    assert player.energy == 90
    assert player.experience == 50
    assert player.last_exploration == START_TIME + 5_000


def test_explore_records_discovery_once() -> None:
    game = make_game()
    game.register_player("Explorer", "explorer123")
    location_id = _create_location(game)

    game.explore_location(location_id, 25, 25, "explorer123")
    game.explore_location(location_id, 25, 25, "explorer123")

    assert game.get_location_info(location_id).discovered_by == ["explorer123"]


def test_explore_ignores_player_coordinates() -> None:
    game = make_game()
    game.register_player("Explorer", "explorer123")
    location_id = _create_location(game)

    result = game.explore_location(location_id, -9_999, 9_999, "explorer123")

    assert isinstance(result, Ok)


def test_explore_guard_codes() -> None:
    game = make_game()
    game.register_player("Newbie", "newbie123")
    lair = _create_location(game, entry_requirement=5)
    before = snapshot(game)

    unregistered = game.explore_location(lair, 0, 0, "ghost")
    missing = game.explore_location(999, 0, 0, "newbie123")
    under_level = game.explore_location(lair, 0, 0, "newbie123")

    assert isinstance(unregistered, Err) and unregistered.code is ErrorCode.PLAYER_NOT_REGISTERED
    assert isinstance(missing, Err) and missing.code is ErrorCode.INVALID_LOCATION
    assert isinstance(under_level, Err) and under_level.code is ErrorCode.NOT_AUTHORIZED
    assert game.state == before


def test_unregistered_check_precedes_location_check() -> None:
    game = make_game()

    result = game.explore_location(42, 0, 0, "ghost")

    assert isinstance(result, Err)
    assert result.code is ErrorCode.PLAYER_NOT_REGISTERED


def test_energy_drains_to_zero_then_cooldown() -> None:
    game = make_game()
    game.register_player("Energetic", "energetic123")
    location_id = _create_location(game)

    results = [game.explore_location(location_id, 95, 95, "energetic123") for _ in range(10)]

    assert all(isinstance(result, Ok) for result in results)
    assert game.get_player_info("energetic123").energy == 0
    before = snapshot(game)

    eleventh = game.explore_location(location_id, 95, 95, "energetic123")

    assert isinstance(eleventh, Err)
    assert eleventh.code is ErrorCode.COOLDOWN_ACTIVE
    assert eleventh.value == 108
    assert game.state == before
    assert_levels_consistent(game)


def test_unknown_location_lookup_returns_none() -> None:
    game = make_game()

    assert game.get_location_info(999_999) is None
