"""Unit tests for domain value objects and Person."""

import pytest

from edutrack.domain import Address, Email, Group, Index, Name, Phone, Remark, Tag

from typical_persons import ALICE, BENSON, make_person


def test_name_valid_and_invalid() -> None:
    assert Name("peter jack").value == "peter jack"
    assert Name("Capital Tan").value == "Capital Tan"
    assert Name("David Roger Jackson Ray Jr 2nd").value == "David Roger Jackson Ray Jr 2nd"
    for bad in ("", " ", "^", "peter*", " leading space", "Zo\u00eb", "\u00b2nd"):
        with pytest.raises(ValueError):
            Name(bad)


def test_phone_requires_e164() -> None:
    assert Phone("+12025551234").value == "+12025551234"
    for bad in ("", "12025551234", "+1", "+1 202 555 1234", "phone"):
        with pytest.raises(ValueError):
            Phone(bad)


def test_email_valid() -> None:
    for good in (
        "alice@example.com",
        "a@bc",
        "PeterJack_1190@example.com",
        "a1+be.d@example1.com",
        "peter_jack@very-very-very-long-example.com",
        "e1234567@u.nus.edu",
    ):
        assert Email(good).value == good


def test_email_invalid() -> None:
    for bad in (
        "",
        "@example.com",
        "peterjackexample.com",
        "peterjack@",
        "-peterjack@example.com",
        "peterjack-@example.com",
        "peterjack@example.c",
        "peterjack@-example.com",
        "peterjack@example.com-",
        "peter jack@example.com",
        "a..b@example.com",
        "a.-b@example.com",
        "a_@example.com",
    ):
        with pytest.raises(ValueError):
            Email(bad)


def test_address_not_blank() -> None:
    assert Address("Blk 456, Den Road, #01-355").value == "Blk 456, Den Road, #01-355"
    for bad in ("", " "):
        with pytest.raises(ValueError):
            Address(bad)


def test_tag_alphanumeric() -> None:
    assert Tag("Physics").name == "Physics"
    for bad in ("", "two words", "#friend", "tag/", "caf\u00e9", "Stra\u00dfe", "\u00b2"):
        with pytest.raises(ValueError):
            Tag(bad)


def test_tag_equality_is_exact_but_key_ignores_case() -> None:
    assert Tag("example") == Tag("example")
    assert Tag("example") != Tag("exAmple")
    assert Tag("example").key == Tag("exAmple").key == "example"
    assert Tag("PhYsics").key == "physics"


def test_group_allows_hyphens() -> None:
    assert Group("CS2103T-T10").name == "CS2103T-T10"
    for bad in ("", "-T10", "T10-", "a b", "a--b"):
        with pytest.raises(ValueError):
            Group(bad)


def test_remark_accepts_anything() -> None:
    assert Remark("").is_empty()
    assert not Remark("Likes tea").is_empty()
    assert str(Remark("  spaces kept ")) == "  spaces kept "
    assert Remark() == Remark("")
    with pytest.raises(ValueError):
        Remark(None)


def test_index_conversions() -> None:
    index = Index.from_one_based(1)
    assert index.zero_based == 0
    assert index.one_based == 1
    assert Index.from_zero_based(4).one_based == 5
    assert Index.from_one_based(3) == Index.from_zero_based(2)
    with pytest.raises(ValueError):
        Index.from_one_based(0)
    with pytest.raises(ValueError):
        Index.from_zero_based(-1)


def test_person_value_equality() -> None:
    copy = make_person(
        "Alice Pauline",
        phone="+12025551111",
        email="alice@example.com",
        tags=("Physics",),
        groups=("CS2103T-T10",),
    )
    assert copy == ALICE
    assert copy is not ALICE
    assert ALICE != BENSON


def test_person_collections_are_frozen() -> None:
    person = make_person("Eve", tags=["Physics", "Physics"])
    assert isinstance(person.tags, frozenset)
    assert len(person.tags) == 1


def test_is_same_person_ignores_case_and_other_fields() -> None:
    other = make_person("alice pauline", phone="+12025559999")
    assert ALICE.is_same_person(other)
    assert not ALICE.is_same_person(BENSON)
    assert not ALICE.is_same_person(None)
