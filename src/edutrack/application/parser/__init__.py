"""Command parsing: tokenizer, field parsers, per-command parsers and the dispatcher."""

from edutrack.application.parser.address_book_parser import AddressBookParser
from edutrack.application.parser.errors import ParseError
from edutrack.application.parser.tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = [
    "AddressBookParser",
    "ArgumentMultimap",
    "ParseError",
    "Prefix",
    "tokenize",
]
