"""Parser errors."""


class ParseError(ValueError):
    """User input does not conform to the expected format."""
