"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from edutrack.domain import Person, Tag


def PREDICATE_SHOW_ALL_PERSONS(person: Person) -> bool:
    return True


class Model(Protocol):
    """In-memory address book plus the currently displayed (filtered) person list."""

    def get_address_book(self):
        """Return the owned address book."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Return the displayed persons in order. Indices resolve against this list."""
        ...

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        """Replace the display filter."""
        ...

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity is stored."""
        ...

    def add_person(self, person: Person) -> None:
        """Store a person. Caller checks has_person first."""
        ...

    def delete_person(self, target: Person) -> None:
        """Remove a stored person."""
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited in place."""
        ...

    def has_tag(self, tag: Tag) -> bool:
        """Return True if a tag with the same key (case-insensitive) is registered."""
        ...

    def add_tag(self, tag: Tag) -> None:
        """Register a tag. Caller checks has_tag first."""
        ...

    def find_tag(self, tag: Tag) -> Tag | None:
        """Return the canonical registered tag matching tag's key, or None."""
        ...

    def delete_tag(self, tag: Tag) -> None:
        """Unregister a tag and remove it from every person."""
        ...

    def get_tag_list(self) -> list[Tag]:
        """Return registered tags in registration order."""
        ...
