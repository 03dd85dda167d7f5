"""Split command arguments into a preamble and prefix-keyed values.

Given `" 1 t/Physics r/Likes tea"` and prefixes `t/`, `r/`, the preamble is
`"1"`, `t/` maps to `["Physics"]` and `r/` to `["Likes tea"]`. A prefix only
counts at the start of the string or after whitespace, so `http://x` inside a
value is left alone. Values are not validated here.
"""

from dataclasses import dataclass, field

from edutrack.application.messages import duplicate_prefixes
from edutrack.application.parser.errors import ParseError


@dataclass(frozen=True)
class Prefix:
    """Marker that introduces an argument value, e.g. `t/`."""

    token: str

    def __str__(self) -> str:
        return self.token


@dataclass
class ArgumentMultimap:
    """Preamble plus every value seen for each prefix, in input order."""

    preamble: str = ""
    values: dict[Prefix, list[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        self.values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value for prefix, or None if absent."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self.values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.preamble

    def has(self, prefix: Prefix) -> bool:
        return prefix in self.values

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        repeated = [p for p in prefixes if len(self.values.get(p, [])) > 1]
        if repeated:
            raise ParseError(duplicate_prefixes(repeated))


def _find_positions(args: str, prefix: Prefix) -> list[int]:
    positions = []
    start = args.find(prefix.token)
    while start != -1:
        if start == 0 or args[start - 1].isspace():
            positions.append(start)
        start = args.find(prefix.token, start + 1)
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split args on the given prefixes. Preamble and values are stripped."""
    if args is None:
        raise ParseError("Arguments must not be None.")
    marks: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        for pos in _find_positions(args, prefix):
            marks.append((pos, prefix))
    marks.sort(key=lambda m: m[0])

    first = marks[0][0] if marks else len(args)
    multimap = ArgumentMultimap(preamble=args[:first].strip())
    for i, (pos, prefix) in enumerate(marks):
        end = marks[i + 1][0] if i + 1 < len(marks) else len(args)
        multimap.put(prefix, args[pos + len(prefix.token):end].strip())
    return multimap
