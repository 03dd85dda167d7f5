"""Execution boundary: text in, result out. Parse errors become CommandFailure."""

import logging

from edutrack.application.dto import CommandFailure, CommandResult
from edutrack.application.parser import AddressBookParser, ParseError
from edutrack.application.ports import Model

logger = logging.getLogger(__name__)


class Logic:
    """Parses one command and runs it against the model before accepting the next."""

    def __init__(self, model: Model, parser: AddressBookParser | None = None) -> None:
        self._model = model
        self._parser = parser or AddressBookParser()

    @property
    def model(self) -> Model:
        return self._model

    def execute(self, command_text: str) -> CommandResult | CommandFailure:
        logger.info("User command: %s", command_text)
        try:
            command = self._parser.parse_command(command_text)
        except ParseError as e:
            logger.info("Rejected command: %s", e)
            return CommandFailure(str(e))

        result = command.execute(self._model)
        if isinstance(result, CommandFailure):
            logger.info("Command failed: %s", result.message)
        return result
