"""User-facing messages shared across commands and parsers."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_TAG_NOT_FOUND = "Tag not found"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def duplicate_prefixes(prefixes) -> str:
    return MESSAGE_DUPLICATE_FIELDS + " ".join(sorted({str(p) for p in prefixes}))
