"""Per-command argument parsers. Each returns a command or raises ParseError."""

from edutrack.application.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    FindCommand,
    NameContainsKeywordsPredicate,
    RemarkCommand,
    TagAssignCommand,
    TagCreateCommand,
    TagDeleteCommand,
    TagUnassignCommand,
)
from edutrack.application.messages import invalid_format
from edutrack.application.parser import parser_util
from edutrack.application.parser.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GROUP,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_TAG,
)
from edutrack.application.parser.errors import ParseError
from edutrack.application.parser.tokenizer import ArgumentMultimap, Prefix, tokenize
from edutrack.domain import Group, Index, Person, Remark, Tag

_PERSON_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_GROUP,
    PREFIX_REMARK,
)


def _all_present(argmap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(argmap.get_value(p) is not None for p in prefixes)


def _index_or_usage(argmap: ArgumentMultimap, usage: str) -> Index:
    try:
        return parser_util.parse_index(argmap.get_preamble())
    except ParseError as e:
        raise ParseError(invalid_format(usage)) from e


def parse_add(args: str, default_region: str | None = None) -> AddCommand:
    argmap = tokenize(args, *_PERSON_PREFIXES)
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if not _all_present(argmap, *required) or argmap.get_preamble():
        raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))
    argmap.verify_no_duplicate_prefixes_for(*required, PREFIX_REMARK)

    person = Person(
        name=parser_util.parse_name(argmap.get_value(PREFIX_NAME)),
        phone=parser_util.parse_phone(argmap.get_value(PREFIX_PHONE), default_region),
        email=parser_util.parse_email(argmap.get_value(PREFIX_EMAIL)),
        address=parser_util.parse_address(argmap.get_value(PREFIX_ADDRESS)),
        tags=parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG)),
        groups=parser_util.parse_groups(argmap.get_all_values(PREFIX_GROUP)),
        remark=Remark(argmap.get_value(PREFIX_REMARK) or ""),
    )
    return AddCommand(person)


def _tags_for_edit(values: list[str]) -> frozenset[Tag] | None:
    # A lone empty `t/` clears all tags.
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parser_util.parse_tags(values)


def _groups_for_edit(values: list[str]) -> frozenset[Group] | None:
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parser_util.parse_groups(values)


def parse_edit(args: str, default_region: str | None = None) -> EditCommand:
    argmap = tokenize(
        args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG, PREFIX_GROUP
    )
    index = _index_or_usage(argmap, EditCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)

    name = argmap.get_value(PREFIX_NAME)
    phone = argmap.get_value(PREFIX_PHONE)
    email = argmap.get_value(PREFIX_EMAIL)
    address = argmap.get_value(PREFIX_ADDRESS)
    descriptor = EditPersonDescriptor(
        name=parser_util.parse_name(name) if name is not None else None,
        phone=parser_util.parse_phone(phone, default_region) if phone is not None else None,
        email=parser_util.parse_email(email) if email is not None else None,
        address=parser_util.parse_address(address) if address is not None else None,
        tags=_tags_for_edit(argmap.get_all_values(PREFIX_TAG)),
        groups=_groups_for_edit(argmap.get_all_values(PREFIX_GROUP)),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(parser_util.parse_index(args))
    except ParseError as e:
        raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e


def parse_find(args: str) -> FindCommand:
    keywords = (args or "").split()
    if not keywords:
        raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def parse_remark(args: str) -> RemarkCommand:
    """
    `remark INDEX [r/REMARK]`. Without r/ the remark is empty, which clears any
    existing remark on the person.
    """
    argmap = tokenize(args, PREFIX_REMARK)
    index = _index_or_usage(argmap, RemarkCommand.MESSAGE_USAGE)
    value = argmap.get_value(PREFIX_REMARK) or ""
    return RemarkCommand(index, Remark(value))


def _single_tag(argmap: ArgumentMultimap, usage: str) -> Tag:
    if not argmap.get_value(PREFIX_TAG):
        raise ParseError(invalid_format(usage))
    argmap.verify_no_duplicate_prefixes_for(PREFIX_TAG)
    return parser_util.parse_tag(argmap.get_value(PREFIX_TAG))


def parse_tag_create(args: str) -> TagCreateCommand:
    argmap = tokenize(args, PREFIX_TAG)
    if argmap.get_preamble():
        raise ParseError(invalid_format(TagCreateCommand.MESSAGE_USAGE))
    return TagCreateCommand(_single_tag(argmap, TagCreateCommand.MESSAGE_USAGE))


def parse_tag_delete(args: str) -> TagDeleteCommand:
    argmap = tokenize(args, PREFIX_TAG)
    if argmap.get_preamble():
        raise ParseError(invalid_format(TagDeleteCommand.MESSAGE_USAGE))
    return TagDeleteCommand(_single_tag(argmap, TagDeleteCommand.MESSAGE_USAGE))


def _index_and_tag(args: str, usage: str) -> tuple[Index, Tag]:
    argmap = tokenize(args, PREFIX_TAG)
    index = _index_or_usage(argmap, usage)
    values = argmap.get_all_values(PREFIX_TAG)
    if len(values) != 1:
        raise ParseError(invalid_format(usage))
    try:
        tag = parser_util.parse_tag(values[0])
    except ParseError as e:
        raise ParseError(invalid_format(usage)) from e
    return index, tag


def parse_tag_assign(args: str) -> TagAssignCommand:
    return TagAssignCommand(*_index_and_tag(args, TagAssignCommand.MESSAGE_USAGE))


def parse_tag_unassign(args: str) -> TagUnassignCommand:
    return TagUnassignCommand(*_index_and_tag(args, TagUnassignCommand.MESSAGE_USAGE))
