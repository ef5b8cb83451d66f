"""Basic crabworld usage example.

Demonstrates:
- Populating a beach and breeding crabs
- Clan membership and clan competition
- Generating a shared reef and hunting through it
"""

import logging

from crabworld import Beach, Color, Crab, Diet, InvalidClanError, Ocean


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    beach = Beach()
    beach.add_crab(Crab("Pinchy", 12, Color.red(), Diet.SHELLFISH))
    beach.add_crab(Crab("Snappy", 6, Color.red(), Diet.FISH))
    beach.add_crab(Crab("Bob", 8, Color.blue(), Diet.PLANTS))
    child = beach.breed_crabs(0, 2, "Junior")
    print(f"Bred {child.name} with color {child.color} and diet {child.diet.name}")

    beach.add_member_to_clan("reds", "Pinchy")
    beach.add_member_to_clan("reds", "Snappy")
    beach.add_member_to_clan("blues", "Bob")
    beach.add_member_to_clan("ghosts", "Casper")

    print(f"Largest clan: {beach.get_clan_system().get_largest_clan_id()}")
    print(f"reds vs blues: {beach.get_winner_clan('reds', 'blues')}")
    try:
        beach.get_winner_clan("reds", "ghosts")
    except InvalidClanError as e:
        print(f"reds vs ghosts: {e}")

    ocean = Ocean()
    ocean.add_beach(beach)
    reef = ocean.generate_reef(n_minnows=2, n_shrimp=1, n_clams=1, n_algae=3)
    for crab in beach.crabs():
        crab.discover_reef(reef.clone())

    meals = sum(crab.hunt() for crab in beach.crabs())
    for handle in ocean.reefs():
        with handle.borrow() as tracked:
            print(f"{meals} prey eaten, {tracked.population()} left on the reef")


if __name__ == "__main__":
    main()
