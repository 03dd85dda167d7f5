"""Command prefixes."""

from edutrack.application.parser.tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_GROUP = Prefix("g/")
PREFIX_REMARK = Prefix("r/")
