"""In-memory implementation of the Model port (no persistence)."""

import logging
from collections.abc import Callable, Iterable

from edutrack.application.ports import PREDICATE_SHOW_ALL_PERSONS
from edutrack.domain import Person, Tag

logger = logging.getLogger(__name__)


class AddressBook:
    """Owns the person list and the registered tags. Order preserved by insertion."""

    def __init__(
        self,
        persons: Iterable[Person] = (),
        tags: Iterable[Tag] = (),
    ) -> None:
        self._persons: list[Person] = []
        self._tags: list[Tag] = []
        for tag in tags:
            self.add_tag(tag)
        for person in persons:
            self.add_person(person)

    def copy(self) -> "AddressBook":
        return AddressBook(persons=self._persons, tags=self._tags)

    def reset(self) -> None:
        self._persons.clear()
        self._tags.clear()

    # persons

    @property
    def persons(self) -> list[Person]:
        return list(self._persons)

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def _require_registered_tags(self, person: Person) -> None:
        for tag in person.tags:
            if self.find_tag(tag) != tag:
                raise ValueError(f"Tag not registered: {tag}")

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise ValueError(f"Person already exists: {person.name}")
        self._require_registered_tags(person)
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited, keeping its position."""
        try:
            pos = self._persons.index(target)
        except ValueError:
            raise ValueError(f"Person not found: {target.name}") from None
        if not target.is_same_person(edited) and self.has_person(edited):
            raise ValueError(f"Person already exists: {edited.name}")
        self._require_registered_tags(edited)
        self._persons[pos] = edited

    def remove_person(self, target: Person) -> None:
        try:
            self._persons.remove(target)
        except ValueError:
            raise ValueError(f"Person not found: {target.name}") from None

    # tags

    @property
    def tags(self) -> list[Tag]:
        return list(self._tags)

    def find_tag(self, tag: Tag) -> Tag | None:
        """Return the registered tag with the same key as tag, or None."""
        for known in self._tags:
            if known.key == tag.key:
                return known
        return None

    def has_tag(self, tag: Tag) -> bool:
        return self.find_tag(tag) is not None

    def add_tag(self, tag: Tag) -> None:
        if self.has_tag(tag):
            raise ValueError(f"Tag already exists: {tag}")
        self._tags.append(tag)

    def remove_tag(self, tag: Tag) -> None:
        """Unregister tag and strip it from every person that holds it."""
        canonical = self.find_tag(tag)
        if canonical is None:
            raise ValueError(f"Tag not found: {tag}")
        self._tags.remove(canonical)
        self._persons = [
            Person(
                name=p.name,
                phone=p.phone,
                email=p.email,
                address=p.address,
                tags=p.tags - {canonical},
                groups=p.groups,
                remark=p.remark,
            )
            if canonical in p.tags
            else p
            for p in self._persons
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._tags == other._tags

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self._persons)}, tags={len(self._tags)})"


class ModelManager:
    """The in-memory model: an AddressBook plus the predicate for the displayed list."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._book = address_book.copy() if address_book is not None else AddressBook()
        self._predicate: Callable[[Person], bool] = PREDICATE_SHOW_ALL_PERSONS
        logger.debug("Initializing model with %r", self._book)

    def get_address_book(self) -> AddressBook:
        return self._book

    def get_filtered_person_list(self) -> list[Person]:
        return [p for p in self._book.persons if self._predicate(p)]

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._predicate = predicate

    def has_person(self, person: Person) -> bool:
        return self._book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.debug("Added person %s", person.name)

    def delete_person(self, target: Person) -> None:
        self._book.remove_person(target)
        logger.debug("Deleted person %s", target.name)

    def set_person(self, target: Person, edited: Person) -> None:
        self._book.set_person(target, edited)
        logger.debug("Replaced person %s", target.name)

    def has_tag(self, tag: Tag) -> bool:
        return self._book.has_tag(tag)

    def add_tag(self, tag: Tag) -> None:
        self._book.add_tag(tag)
        logger.debug("Registered tag %s", tag)

    def find_tag(self, tag: Tag) -> Tag | None:
        return self._book.find_tag(tag)

    def delete_tag(self, tag: Tag) -> None:
        self._book.remove_tag(tag)
        logger.debug("Deleted tag %s", tag)

    def get_tag_list(self) -> list[Tag]:
        return self._book.tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._book == other._book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
        )
