"""Infrastructure layer: concrete implementations of application ports."""

from edutrack.infrastructure.memory_model import AddressBook, ModelManager
from edutrack.infrastructure.phone import format_phone, normalize_phone

__all__ = [
    "AddressBook",
    "ModelManager",
    "format_phone",
    "normalize_phone",
]
