"""Roster for holding people in display order."""

import logging
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Any

from models.person import Person

logger = logging.getLogger(__name__)


class Roster:
    """
    Ordered, append-only collection of people.
    
    Insertion order is display order. The roster keeps its own copy of
    every person it is given, so callers' objects are never changed.
    """
    
    def __init__(self, people: Iterable[Person] = ()):
        """
        Initialize roster with initial people.
        
        Args:
            people: People to add, in display order
        """
        self.people: List[Person] = []
        
        for person in people:
            self.add(person)
    
    def add(self, person: Person) -> None:
        """
        Append a copy of a person to the end of the roster.
        
        Args:
            person: Person to copy onto the roster
        """
        self.people.append(replace(person))
        logger.debug(f"Added {person!r} at position {len(self.people)}")
    
    def __iter__(self) -> Iterator[Person]:
        return iter(self.people)
    
    def __len__(self) -> int:
        return len(self.people)
    
    def __getitem__(self, index: int) -> Person:
        return self.people[index]
    
    def names(self) -> List[str]:
        """Get all names in display order."""
        return [person.name for person in self.people]
    
    def introduce_all(self) -> List[str]:
        """Have every person introduce themselves, in order."""
        return [person.introduce() for person in self.people]
    
    def celebrate_birthdays(self) -> List[str]:
        """Give every person a birthday, in order."""
        lines = [person.have_birthday() for person in self.people]
        logger.debug(f"Celebrated {len(lines)} birthdays")
        return lines
    
    def to_list(self) -> List[Dict[str, Any]]:
        """Snapshot of every person as a dictionary."""
        return [person.to_dict() for person in self.people]
    
    def __repr__(self) -> str:
        return f"Roster(people={self.people!r})"
