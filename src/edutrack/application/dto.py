"""Result types returned by commands and the logic boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Command ran and changed (or queried) the model."""

    feedback: str
    show_help: bool = False
    exit: bool = False


@dataclass(frozen=True)
class CommandFailure:
    """Command was rejected; the model is unchanged."""

    message: str
