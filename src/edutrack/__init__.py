"""
EduTrack core: clean-architecture layout.

- domain: value objects and Person. No outer dependencies.
- application: commands, parsers, the Model port and result types.
- infrastructure: adapters (ModelManager, AddressBook, phone normalization).
"""

from edutrack.application import (
    AddressBookParser,
    CommandFailure,
    CommandResult,
    Logic,
    Model,
    ParseError,
)
from edutrack.domain import Index, Person, Remark, Tag
from edutrack.infrastructure import AddressBook, ModelManager

__all__ = [
    "AddressBook",
    "AddressBookParser",
    "CommandFailure",
    "CommandResult",
    "Index",
    "Logic",
    "Model",
    "ModelManager",
    "ParseError",
    "Person",
    "Remark",
    "Tag",
]
