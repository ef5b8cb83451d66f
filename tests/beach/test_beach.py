"""Tests for Beach population, breeding, and clan competition.

Critical Invariants:
- Insertion order is index order; bred crabs are appended
- Out-of-bounds index access raises IndexError
- Clan competition errors only when a clan has no member on the beach
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from crabworld import Beach, Color, Crab, Diet, InvalidClanError, WorldSettings


def _beach_with_speeds(make_crab, beach, speeds):
    for i, speed in enumerate(speeds):
        beach.add_crab(make_crab(f"crab-{i}", speed))
    return beach


# Population


@given(st.lists(st.integers(min_value=0, max_value=100), max_size=20))
def test_size_tracks_add_crab(speeds):
    """Property: size() equals add_crab calls; last index is the newest crab."""
    beach = Beach(settings=WorldSettings(_env_file=None))
    last = None
    for i, speed in enumerate(speeds):
        last = Crab(f"crab-{i}", speed, Color.green(), Diet.PLANTS)
        beach.add_crab(last)

    assert beach.size() == len(speeds)
    assert len(beach) == len(speeds)
    if speeds:
        assert beach.get_crab(beach.size() - 1) is last


def test_same_crab_cannot_be_added_twice(beach, make_crab):
    crab = make_crab("Pinchy")
    beach.add_crab(crab)

    with pytest.raises(ValueError, match="already on a beach"):
        beach.add_crab(crab)

    assert beach.size() == 1


def test_crab_cannot_live_on_two_beaches(settings, make_crab):
    first = Beach(settings=settings)
    second = Beach(settings=settings)
    crab = make_crab("Pinchy", 4)
    first.add_crab(crab)

    with pytest.raises(ValueError, match="'Pinchy' is already on a beach"):
        second.add_crab(crab)

    assert second.size() == 0
    assert first.get_crab(0) is crab


def test_bred_crab_belongs_to_its_beach(settings, make_crab):
    home = Beach(settings=settings)
    _beach_with_speeds(make_crab, home, [1, 2])
    child = home.breed_crabs(0, 1, "Junior")

    with pytest.raises(ValueError, match="already on a beach"):
        Beach(settings=settings).add_crab(child)


def test_equal_attributes_are_still_distinct_crabs(beach, make_crab):
    beach.add_crab(make_crab("Pinchy", 3))
    beach.add_crab(make_crab("Pinchy", 3))

    assert beach.size() == 2


@pytest.mark.parametrize("index", [2, 5, -1])
def test_get_crab_out_of_bounds(beach, make_crab, index):
    _beach_with_speeds(make_crab, beach, [1, 2])

    with pytest.raises(IndexError, match="out of range"):
        beach.get_crab(index)


def test_crabs_iteration_is_restartable(beach, make_crab):
    _beach_with_speeds(make_crab, beach, [4, 5, 6])

    first = [crab.speed for crab in beach.crabs()]
    second = [crab.speed for crab in beach.crabs()]

    assert first == second == [4, 5, 6]


# Queries


def test_fastest_crab_empty_beach(beach):
    assert beach.get_fastest_crab() is None


def test_fastest_crab_tie_returns_first(beach, make_crab):
    _beach_with_speeds(make_crab, beach, [3, 7, 7, 2])

    fastest = beach.get_fastest_crab()

    assert fastest is beach.get_crab(1)


def test_find_crabs_by_name_keeps_order(beach, make_crab):
    first = make_crab("Pinchy", 1)
    second = make_crab("Pinchy", 2)
    beach.add_crab(first)
    beach.add_crab(make_crab("Bob"))
    beach.add_crab(second)

    found = beach.find_crabs_by_name("Pinchy")

    assert len(found) == 2
    assert found[0] is first
    assert found[1] is second
    assert beach.find_crabs_by_name("Nobody") == []


# Breeding


def test_breed_crabs_appends_child(beach):
    beach.add_crab(Crab("Mom", 9, Color(100, 0, 50), Diet.FISH))
    beach.add_crab(Crab("Dad", 4, Color(0, 200, 51), Diet.PLANTS))

    child = beach.breed_crabs(0, 1, "Junior")

    assert beach.size() == 3
    assert beach.get_crab(2) is child
    assert child.name == "Junior"
    assert child.speed == 1
    assert child.color == Color(50, 100, 50)
    assert isinstance(child.diet, Diet)
    assert beach.get_crab(0).name == "Mom"
    assert beach.get_crab(1).name == "Dad"


def test_breed_crabs_out_of_bounds(beach, make_crab):
    _beach_with_speeds(make_crab, beach, [1, 2])

    with pytest.raises(IndexError):
        beach.breed_crabs(0, 5, "Ghost")

    assert beach.size() == 2


def test_breed_speed_follows_settings(make_crab):
    beach = Beach(settings=WorldSettings(_env_file=None, bred_crab_speed=4))
    _beach_with_speeds(make_crab, beach, [1, 2])

    assert beach.breed_crabs(0, 1, "Quick").speed == 4


# Clans


def test_clan_membership_is_not_checked_against_crabs(beach):
    beach.add_member_to_clan("A", "Nobody")

    assert beach.get_clan_system().get_clan_member_names("A") == ["Nobody"]


def test_winner_tie_returns_none(beach, make_crab):
    for name, speed in [("a1", 8), ("a2", 12), ("b1", 10)]:
        beach.add_crab(make_crab(name, speed))
    beach.add_member_to_clan("A", "a1")
    beach.add_member_to_clan("A", "a2")
    beach.add_member_to_clan("B", "b1")

    assert beach.get_winner_clan("A", "B") is None


def test_winner_higher_average_wins(beach, make_crab):
    beach.add_crab(make_crab("a1", 12))
    beach.add_crab(make_crab("b1", 8))
    beach.add_member_to_clan("A", "a1")
    beach.add_member_to_clan("B", "b1")

    assert beach.get_winner_clan("A", "B") == "A"
    assert beach.get_winner_clan("B", "A") == "A"


def test_winner_unresolvable_clan_is_error(beach, make_crab):
    beach.add_crab(make_crab("b1", 8))
    beach.add_member_to_clan("A", "ghost")
    beach.add_member_to_clan("B", "b1")

    with pytest.raises(InvalidClanError, match="Invalid clan IDs"):
        beach.get_winner_clan("A", "B")


def test_winner_unknown_clan_is_error(beach, make_crab):
    beach.add_crab(make_crab("b1", 8))
    beach.add_member_to_clan("B", "b1")

    with pytest.raises(InvalidClanError):
        beach.get_winner_clan("B", "missing")


def test_unresolved_members_excluded_from_average(beach, make_crab):
    beach.add_crab(make_crab("a1", 6))
    beach.add_crab(make_crab("b1", 5))
    beach.add_member_to_clan("A", "a1")
    beach.add_member_to_clan("A", "ghost")
    beach.add_member_to_clan("B", "b1")

    assert beach.get_clan_average_speed("A") == 6.0
    assert beach.get_winner_clan("A", "B") == "A"


def test_duplicate_crab_names_resolve_to_first(beach, make_crab):
    beach.add_crab(make_crab("twin", 2))
    beach.add_crab(make_crab("twin", 20))
    beach.add_member_to_clan("A", "twin")

    assert beach.get_clan_average_speed("A") == 2.0


def test_clan_average_unknown_clan_is_none(beach):
    assert beach.get_clan_average_speed("nobody") is None


def test_single_clan_setting_reaches_clan_system():
    beach = Beach(settings=WorldSettings(_env_file=None, enforce_single_clan=True))

    assert beach.get_clan_system().enforce_single_clan
