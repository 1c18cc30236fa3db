"""Demo driver: introduce a fixed set of people, then celebrate their birthdays."""

import logging
import sys
from typing import Iterable

from models.person import Person
from core.roster import Roster

# Configure logging
LOG_LEVEL = logging.INFO
logger = logging.getLogger(__name__)

INTRODUCTIONS_HEADER = "Introductions:"
BIRTHDAYS_HEADER = "Celebrating birthdays:"

# Initial people, in display order
INITIAL_PEOPLE = [
    ("Alice", 25),
    ("Bob", 30),
    ("Charlie", 22),
]


def run(people: Iterable[Person]) -> Roster:
    """
    Print introductions for every person, then give each a birthday.
    
    Args:
        people: People to show, in display order
        
    Returns:
        The roster after all birthdays
    """
    roster = Roster(people)
    
    print(INTRODUCTIONS_HEADER)
    roster.introduce_all()
    
    print(f"\n{BIRTHDAYS_HEADER}")
    roster.celebrate_birthdays()
    
    return roster


def main() -> int:
    """Run the demo with the initial people and return the exit status."""
    logging.basicConfig(level=LOG_LEVEL)
    
    roster = run(Person(name, age) for name, age in INITIAL_PEOPLE)
    logger.info(f"Finished demo for {len(roster)} people")
    return 0


if __name__ == "__main__":
    sys.exit(main())
