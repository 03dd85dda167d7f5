"""Domain value objects and the Person entity."""

import re
from dataclasses import dataclass, field

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should be valid numbers, optionally starting with a + and country code"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain. The local-part may contain "
    "alphanumerics and the special characters +_.- but may not start or end with them. "
    "The domain is made of labels separated by periods; each label is alphanumeric, may "
    "contain hyphens inside, and the last label is at least 2 characters long."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tag names should be alphanumeric"
GROUP_CONSTRAINTS = "Group names should be alphanumeric and may contain hyphens"

_E164 = re.compile(r"\+\d{6,15}")
_EMAIL = re.compile(
    r"[^\W_]+(?:[+_.\-][^\W_]+)*"
    r"@"
    r"(?:[^\W_](?:[^\W_]|-(?=[^\W_]))*\.)*"
    r"[^\W_](?:[^\W_]|-(?=[^\W_]))+"
)
_NAME = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_TAG = re.compile(r"[A-Za-z0-9]+")
_GROUP = re.compile(r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*")


@dataclass(frozen=True)
class Name:
    value: str

    def __post_init__(self):
        if not self.value or not _NAME.fullmatch(self.value):
            raise ValueError(NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number in E.164 form. Normalize user input before constructing."""

    value: str

    def __post_init__(self):
        if not self.value or not _E164.fullmatch(self.value):
            raise ValueError(PHONE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        if not self.value or not _EMAIL.fullmatch(self.value):
            raise ValueError(EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self):
        if not self.value or self.value[0].isspace():
            raise ValueError(ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """
    A label that can be attached to persons.
    Equality is by exact name; `key` is the case-insensitive identity used to
    resolve user input to the canonical registered tag.
    """

    name: str

    def __post_init__(self):
        if not self.name or not _TAG.fullmatch(self.name):
            raise ValueError(TAG_CONSTRAINTS)

    @property
    def key(self) -> str:
        return self.name.strip().lower()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Group:
    name: str

    def __post_init__(self):
        if not self.name or not _GROUP.fullmatch(self.name):
            raise ValueError(GROUP_CONSTRAINTS)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Remark:
    """Free-text remark on a person. Any string is valid; empty means no remark."""

    value: str = ""

    def __post_init__(self):
        if self.value is None:
            raise ValueError("Remark value must not be None.")

    def is_empty(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Person:
    """
    A student or contact tracked in the address book.
    Immutable: edits build a new Person and replace the old record.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)
    groups: frozenset[Group] = field(default_factory=frozenset)
    remark: Remark = field(default_factory=Remark)

    def __post_init__(self):
        # Accept any iterable for the collection fields.
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "groups", frozenset(self.groups))

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of identity used for duplicate detection: same name, any case."""
        if other is None:
            return False
        return other.name.value.lower() == self.name.value.lower()

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda t: t.key)

    def __str__(self) -> str:
        parts = [
            f"{self.name}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
        ]
        if self.tags:
            parts.append("Tags: " + ", ".join(t.name for t in self.sorted_tags()))
        if self.groups:
            parts.append("Groups: " + ", ".join(sorted(g.name for g in self.groups)))
        if not self.remark.is_empty():
            parts.append(f"Remark: {self.remark}")
        return "; ".join(parts)
