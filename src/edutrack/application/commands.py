"""Executable commands. Each one performs a single mutation or query on the model.

Commands never raise for user errors: they return CommandFailure and leave the
model untouched, or CommandResult after the whole change has been applied.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from edutrack.application.dto import CommandFailure, CommandResult
from edutrack.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    MESSAGE_TAG_NOT_FOUND,
)
from edutrack.application.ports import PREDICATE_SHOW_ALL_PERSONS, Model
from edutrack.domain import (
    Address,
    Email,
    Group,
    Index,
    Name,
    Person,
    Phone,
    Remark,
    Tag,
)

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"


def _person_at(model: Model, index: Index) -> Person | None:
    """Return the displayed person at index, or None if out of bounds."""
    shown = model.get_filtered_person_list()
    if index.zero_based >= len(shown):
        return None
    return shown[index.zero_based]


def _canonical_tags(model: Model, tags: Iterable[Tag]) -> tuple[frozenset[Tag], list[Tag]]:
    """Map tags to their registered form. Returns (canonical set, tags still to register)."""
    tags = list(tags)
    known = {t.key: t for t in model.get_tag_list()}
    new: list[Tag] = []
    for tag in sorted(tags, key=lambda t: t.name):
        if tag.key not in known:
            known[tag.key] = tag
            new.append(tag)
    return frozenset(known[t.key] for t in tags), new


@dataclass(frozen=True)
class AddCommand:
    person: Person

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]... [g/GROUP]... [r/REMARK]\n"
        "Example: add n/John Doe p/+6598765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/Physics g/CS2103T-T10"
    )
    MESSAGE_SUCCESS = "New person added: {}"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        if model.has_person(self.person):
            return CommandFailure(MESSAGE_DUPLICATE_PERSON)
        tags, new_tags = _canonical_tags(model, self.person.tags)
        for tag in new_tags:
            model.add_tag(tag)
        person = replace(self.person, tags=tags)
        model.add_person(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(person))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person. None means keep the current value."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: frozenset[Tag] | None = None
    groups: frozenset[Group] | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (self.name, self.phone, self.email, self.address, self.tags, self.groups)
        )

    def apply_to(self, person: Person) -> Person:
        return Person(
            name=self.name or person.name,
            phone=self.phone or person.phone,
            email=self.email or person.email,
            address=self.address or person.address,
            tags=person.tags if self.tags is None else self.tags,
            groups=person.groups if self.groups is None else self.groups,
            remark=person.remark,
        )


@dataclass(frozen=True)
class EditCommand:
    index: Index
    descriptor: EditPersonDescriptor

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [t/TAG]... [g/GROUP]...\n"
        "Example: edit 1 p/+6591234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited Person: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        target = _person_at(model, self.index)
        if target is None:
            return CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        edited = self.descriptor.apply_to(target)
        if not target.is_same_person(edited) and model.has_person(edited):
            return CommandFailure(MESSAGE_DUPLICATE_PERSON)
        tags, new_tags = _canonical_tags(model, edited.tags)
        for tag in new_tags:
            model.add_tag(tag)
        edited = replace(edited, tags=tags)
        model.set_person(target, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class DeleteCommand:
    index: Index

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed "
        "person list.\nParameters: INDEX (must be a positive integer)\nExample: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        target = _person_at(model, self.index)
        if target is None:
            return CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        model.delete_person(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD = "clear"
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        book = model.get_address_book()
        book.reset()
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.casefold() for w in person.name.value.split()}
        return any(k.casefold() in words for k in self.keywords)


@dataclass(frozen=True)
class FindCommand:
    predicate: NameContainsKeywordsPredicate

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\nExample: find alice bob charlie"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        count = len(model.get_filtered_person_list())
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class RemarkCommand:
    """Sets or clears the remark of the person at index."""

    index: Index
    remark: Remark

    COMMAND_WORD = "remark"
    MESSAGE_USAGE = (
        "remark: Edits the remark of the person identified by the index number used in the "
        "displayed person list. Existing remark will be overwritten by the input.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: remark 1 r/Likes to swim."
    )
    MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Person: {}; Remark: {}"
    MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Person: {}"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        target = _person_at(model, self.index)
        if target is None:
            return CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        edited = replace(target, remark=self.remark)
        model.set_person(target, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        if self.remark.is_empty():
            return CommandResult(self.MESSAGE_DELETE_REMARK_SUCCESS.format(edited.name))
        return CommandResult(self.MESSAGE_ADD_REMARK_SUCCESS.format(edited.name, self.remark))


@dataclass(frozen=True)
class TagCreateCommand:
    tag: Tag

    COMMAND_WORD = "tagcreate"
    MESSAGE_USAGE = (
        "tagcreate: Registers a new tag.\nParameters: t/TAG\nExample: tagcreate t/Physics"
    )
    MESSAGE_SUCCESS = "New tag created: {}"
    MESSAGE_DUPLICATE_TAG = "This tag already exists"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        if model.has_tag(self.tag):
            return CommandFailure(self.MESSAGE_DUPLICATE_TAG)
        model.add_tag(self.tag)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.tag))


@dataclass(frozen=True)
class TagDeleteCommand:
    tag: Tag

    COMMAND_WORD = "tagdelete"
    MESSAGE_USAGE = (
        "tagdelete: Deletes a tag and removes it from every person.\n"
        "Parameters: t/TAG\nExample: tagdelete t/Physics"
    )
    MESSAGE_SUCCESS = "Deleted tag: {}"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        canonical = model.find_tag(self.tag)
        if canonical is None:
            return CommandFailure(MESSAGE_TAG_NOT_FOUND)
        model.delete_tag(canonical)
        return CommandResult(self.MESSAGE_SUCCESS.format(canonical))


@dataclass(frozen=True)
class TagAssignCommand:
    """
    Assigns a registered tag to the person at index.
    The tag stored on the person is always the model's registered tag, whatever
    casing the user typed.
    """

    index: Index
    tag: Tag

    COMMAND_WORD = "tagassign"
    MESSAGE_USAGE = (
        "tagassign: Assigns an existing tag to the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) t/TAG\n"
        "Example: tagassign 1 t/Physics"
    )
    MESSAGE_SUCCESS = "Assigned tag {tag} to {name}"
    MESSAGE_TAG_NOT_FOUND = MESSAGE_TAG_NOT_FOUND
    MESSAGE_DUPLICATE_TAG = "This tag has already been assigned to this person"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        target = _person_at(model, self.index)
        if target is None:
            return CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        canonical = model.find_tag(self.tag)
        if canonical is None:
            return CommandFailure(self.MESSAGE_TAG_NOT_FOUND)
        if canonical in target.tags:
            return CommandFailure(self.MESSAGE_DUPLICATE_TAG)

        edited = replace(target, tags=target.tags | {canonical})
        model.set_person(target, edited)
        logger.debug("Tag %s assigned to %s", canonical, edited.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(tag=canonical, name=edited.name))


@dataclass(frozen=True)
class TagUnassignCommand:
    index: Index
    tag: Tag

    COMMAND_WORD = "tagunassign"
    MESSAGE_USAGE = (
        "tagunassign: Removes a tag from the person identified by the index number used in "
        "the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) t/TAG\n"
        "Example: tagunassign 1 t/Physics"
    )
    MESSAGE_SUCCESS = "Removed tag {tag} from {name}"
    MESSAGE_TAG_NOT_ASSIGNED = "This person does not have this tag"

    def execute(self, model: Model) -> CommandResult | CommandFailure:
        target = _person_at(model, self.index)
        if target is None:
            return CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        canonical = model.find_tag(self.tag)
        if canonical is None:
            return CommandFailure(MESSAGE_TAG_NOT_FOUND)
        if canonical not in target.tags:
            return CommandFailure(self.MESSAGE_TAG_NOT_ASSIGNED)

        edited = replace(target, tags=target.tags - {canonical})
        model.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(tag=canonical, name=edited.name))


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(usage_overview(), show_help=True)


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD = "exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting EduTrack as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


ALL_COMMANDS = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    ClearCommand,
    FindCommand,
    ListCommand,
    RemarkCommand,
    TagCreateCommand,
    TagDeleteCommand,
    TagAssignCommand,
    TagUnassignCommand,
    HelpCommand,
    ExitCommand,
)


def usage_overview() -> str:
    """Command words, for help output."""
    return "Commands: " + ", ".join(c.COMMAND_WORD for c in ALL_COMMANDS)
