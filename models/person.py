"""Person model for the people demo."""

import logging
from dataclasses import dataclass
from typing import Dict, Any

from core.exceptions import InvalidPersonError

logger = logging.getLogger(__name__)


@dataclass
class Person:
    """Represents a person with a name and an age.

    The name is never changed after construction; the age only moves
    forward through have_birthday().
    """
    
    name: str
    age: int
    
    def introduce(self) -> str:
        """Print and return this person's introduction line."""
        line = f"Hello, my name is {self.name} and I'm {self.age} years old."
        print(line)
        return line
    
    def have_birthday(self) -> str:
        """Increment age by one, then print and return the new age line."""
        self.age += 1
        logger.debug(f"{self.name} aged to {self.age}")
        line = f"{self.name} is now {self.age} years old."
        print(line)
        return line
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary representation."""
        return {
            'name': self.name,
            'age': self.age
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Person':
        """
        Create Person instance from dictionary.
        
        Unlike Person(...), which stores its arguments verbatim, this loader
        checks field types and rejects a negative age.
        
        Args:
            data: Mapping with 'name' and 'age' entries
            
        Returns:
            New Person built from the mapping
            
        Raises:
            InvalidPersonError: If a field is missing or has the wrong type
        """
        try:
            name = data['name']
            age = data['age']
        except KeyError as e:
            raise InvalidPersonError(f"Missing person field: {e.args[0]}") from e
        
        if not isinstance(name, str):
            raise InvalidPersonError(f"Person name must be a string, got {name!r}")
        # bool is an int subclass
        if isinstance(age, bool) or not isinstance(age, int) or age < 0:
            raise InvalidPersonError(f"Person age must be a non-negative integer, got {age!r}")
        
        return cls(name=name, age=age)
    
    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age!r})"
