"""Domain layer: value objects and entities. No dependencies on outer layers."""

from edutrack.domain.entities import (
    Address,
    Email,
    Group,
    Name,
    Person,
    Phone,
    Remark,
    Tag,
)
from edutrack.domain.index import Index

__all__ = [
    "Address",
    "Email",
    "Group",
    "Index",
    "Name",
    "Person",
    "Phone",
    "Remark",
    "Tag",
]
