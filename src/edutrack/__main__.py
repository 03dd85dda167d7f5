"""
Interactive shell: reads commands from stdin and prints the result.
Run: python -m edutrack (with .env or env vars set).
"""

import logging
import sys

from edutrack.application import AddressBookParser, CommandFailure, Logic
from edutrack.config import Settings, load_env
from edutrack.domain import Person
from edutrack.infrastructure import ModelManager, format_phone

logger = logging.getLogger(__name__)

PROMPT = "> "
LISTING_COMMANDS = ("list", "find")


def _format_person_card(position: int, person: Person) -> str:
    """Format one displayed person: index, name, then one detail per line."""
    lines = [f"{position}. {person.name}", f"   Phone: {format_phone(person.phone.value)}"]
    lines.append(f"   Email: {person.email}")
    lines.append(f"   Address: {person.address}")
    if person.tags:
        lines.append("   Tags: " + ", ".join(t.name for t in person.sorted_tags()))
    if person.groups:
        lines.append("   Groups: " + ", ".join(sorted(g.name for g in person.groups)))
    if not person.remark.is_empty():
        lines.append(f"   Remark: {person.remark}")
    return "\n".join(lines)


def _render_list(persons: list[Person]) -> str:
    if not persons:
        return "No persons to show."
    return "\n".join(_format_person_card(i, p) for i, p in enumerate(persons, start=1))


def main() -> None:
    load_env()
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )
    model = ModelManager()
    logic = Logic(model, AddressBookParser(default_region=settings.default_region))
    logger.info("EduTrack started (default phone region %s)", settings.default_region)

    while True:
        try:
            text = input(PROMPT if sys.stdin.isatty() else "").strip()
        except EOFError:
            break
        if not text:
            continue
        result = logic.execute(text)
        if isinstance(result, CommandFailure):
            print(result.message)
            continue
        print(result.feedback)
        if text.split()[0] in LISTING_COMMANDS:
            print(_render_list(model.get_filtered_person_list()))
        if result.exit:
            break
    logger.info("EduTrack stopped")


if __name__ == "__main__":
    main()
