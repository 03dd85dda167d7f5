"""Top-level parser: picks the command word and hands the rest to its parser."""

import logging
import re

from edutrack.application.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
    TagAssignCommand,
    TagCreateCommand,
    TagDeleteCommand,
    TagUnassignCommand,
)
from edutrack.application.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from edutrack.application.parser import parsers
from edutrack.application.parser.errors import ParseError

logger = logging.getLogger(__name__)

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


class AddressBookParser:
    """Parses `<commandWord> <arguments>` into an executable command."""

    def __init__(self, default_region: str | None = None) -> None:
        self._default_region = default_region
        self._parsers = {
            AddCommand.COMMAND_WORD: lambda a: parsers.parse_add(a, self._default_region),
            EditCommand.COMMAND_WORD: lambda a: parsers.parse_edit(a, self._default_region),
            DeleteCommand.COMMAND_WORD: parsers.parse_delete,
            ClearCommand.COMMAND_WORD: lambda a: ClearCommand(),
            FindCommand.COMMAND_WORD: parsers.parse_find,
            ListCommand.COMMAND_WORD: lambda a: ListCommand(),
            RemarkCommand.COMMAND_WORD: parsers.parse_remark,
            TagCreateCommand.COMMAND_WORD: parsers.parse_tag_create,
            TagDeleteCommand.COMMAND_WORD: parsers.parse_tag_delete,
            TagAssignCommand.COMMAND_WORD: parsers.parse_tag_assign,
            TagUnassignCommand.COMMAND_WORD: parsers.parse_tag_unassign,
            HelpCommand.COMMAND_WORD: lambda a: HelpCommand(),
            ExitCommand.COMMAND_WORD: lambda a: ExitCommand(),
        }

    def parse_command(self, user_input: str):
        """Return the command for user_input. Raises ParseError on bad input."""
        match = _COMMAND_FORMAT.fullmatch((user_input or "").strip())
        if not match:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        word = match.group("word")
        arguments = match.group("arguments")
        logger.debug("Command word: %s; Arguments: %s", word, arguments)

        parse = self._parsers.get(word)
        if parse is None:
            logger.debug("Unknown command word: %s", word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parse(arguments)
