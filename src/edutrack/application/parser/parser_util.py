"""Convert raw argument strings into domain values, raising ParseError on bad input."""

from collections.abc import Iterable

from edutrack.application.parser.errors import ParseError
from edutrack.domain import Address, Email, Group, Index, Name, Phone, Tag
from edutrack.domain.entities import PHONE_CONSTRAINTS
from edutrack.infrastructure.phone import normalize_phone

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


def parse_index(raw: str) -> Index:
    """Parse a 1-based index. Leading and trailing whitespace is ignored."""
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()) or int(value) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(value))


def _build(factory, raw: str):
    try:
        return factory((raw or "").strip())
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_name(raw: str) -> Name:
    return _build(Name, raw)


def parse_phone(raw: str, default_region: str | None = None) -> Phone:
    """Normalize to E.164. Numbers without a country code use default_region."""
    normalized = normalize_phone(raw, default_region=default_region)
    if normalized is None:
        raise ParseError(PHONE_CONSTRAINTS)
    return _build(Phone, normalized)


def parse_email(raw: str) -> Email:
    return _build(Email, raw)


def parse_address(raw: str) -> Address:
    return _build(Address, raw)


def parse_tag(raw: str) -> Tag:
    return _build(Tag, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(raw) for raw in raws)


def parse_group(raw: str) -> Group:
    return _build(Group, raw)


def parse_groups(raws: Iterable[str]) -> frozenset[Group]:
    return frozenset(parse_group(raw) for raw in raws)
