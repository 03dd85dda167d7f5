"""Tests for the Logic execution boundary: text in, result out."""

import logging

from edutrack.application import AddressBookParser, CommandFailure, CommandResult, Logic
from edutrack.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
)
from edutrack.domain import Phone, Remark, Tag
from edutrack.infrastructure import ModelManager

from typical_persons import typical_address_book


def _logic(region: str | None = None) -> Logic:
    return Logic(ModelManager(typical_address_book()), AddressBookParser(default_region=region))


def test_parse_errors_are_returned_not_raised() -> None:
    logic = _logic()
    assert logic.execute("frobnicate 1") == CommandFailure(MESSAGE_UNKNOWN_COMMAND)
    result = logic.execute("remark x r/hello")
    assert isinstance(result, CommandFailure)
    assert result.message.startswith("Invalid command format!")


def test_non_ascii_digit_index_is_a_format_error() -> None:
    logic = _logic()
    before = ModelManager(logic.model.get_address_book())
    for command in ("remark \u00b2 r/x", "tagassign \u00b2 t/Physics", "delete \u00b2"):
        result = logic.execute(command)
        assert isinstance(result, CommandFailure)
        assert result.message.startswith("Invalid command format!")
    assert logic.model == before


def test_command_failures_are_returned() -> None:
    logic = _logic()
    assert logic.execute("delete 10") == CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_full_session() -> None:
    logic = _logic(region="US")
    model = logic.model

    added = logic.execute("add n/Elle Meyer p/202 555 1234 e/elle@example.com a/Michegan Ave t/Maths")
    assert isinstance(added, CommandResult)
    elle = model.get_filtered_person_list()[-1]
    assert elle.phone == Phone("+12025551234")
    assert Tag("Maths") in model.get_tag_list()

    assert isinstance(logic.execute("tagcreate t/Biology"), CommandResult)
    assert isinstance(logic.execute("find elle"), CommandResult)
    assert isinstance(logic.execute("tagassign 1 t/biology"), CommandResult)
    assert isinstance(logic.execute("remark 1 r/Needs help with labs"), CommandResult)

    # remark resets the display filter
    elle = model.get_filtered_person_list()[-1]
    assert elle.tags == frozenset({Tag("Maths"), Tag("Biology")})
    assert elle.remark == Remark("Needs help with labs")

    assert isinstance(logic.execute("list"), CommandResult)
    assert len(model.get_filtered_person_list()) == 5

    exit_result = logic.execute("exit")
    assert isinstance(exit_result, CommandResult)
    assert exit_result.exit


def test_failures_are_logged(caplog) -> None:
    logic = _logic()
    with caplog.at_level(logging.INFO, logger="edutrack.application.logic"):
        logic.execute("tagassign 1 t/Unknown")
    assert "Tag not found" in caplog.text
