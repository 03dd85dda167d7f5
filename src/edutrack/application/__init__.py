"""Application layer: commands, parsing, the Model port and result DTOs."""

from edutrack.application.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    RemarkCommand,
    TagAssignCommand,
    TagCreateCommand,
    TagDeleteCommand,
    TagUnassignCommand,
)
from edutrack.application.dto import CommandFailure, CommandResult
from edutrack.application.logic import Logic
from edutrack.application.parser import AddressBookParser, ParseError
from edutrack.application.ports import PREDICATE_SHOW_ALL_PERSONS, Model

__all__ = [
    "AddCommand",
    "AddressBookParser",
    "ClearCommand",
    "CommandFailure",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "Logic",
    "Model",
    "NameContainsKeywordsPredicate",
    "PREDICATE_SHOW_ALL_PERSONS",
    "ParseError",
    "RemarkCommand",
    "TagAssignCommand",
    "TagCreateCommand",
    "TagDeleteCommand",
    "TagUnassignCommand",
]
