from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterator, Mapping, Tuple

from .errors import InvalidOption


class ColorMode(str, Enum):
    """When the console reporter may emit ANSI colors."""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class LineSet:
    """
    The normalized form of one input source.

    Attributes:
        lines (Tuple[str, ...]): Unique, non-blank, non-comment lines in
            ascending byte order.
        label (str): Name of the source, used in headers and reports.
    """
    lines: Tuple[str, ...] = ()
    label: str = ""

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __contains__(self, line: object) -> bool:
        return line in self.lines


@dataclass(frozen=True)
class DiffResult:
    """
    Set difference between two LineSets.

    Attributes:
        added (Tuple[str, ...]): Lines only in the new set, in byte order.
        removed (Tuple[str, ...]): Lines only in the old set, in byte order.
        old (LineSet): The normalized old source.
        new (LineSet): The normalized new source.
    """
    added: Tuple[str, ...]
    removed: Tuple[str, ...]
    old: LineSet = field(default_factory=LineSet)
    new: LineSet = field(default_factory=LineSet)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


@dataclass(frozen=True)
class Options:
    show_added: bool = True
    show_removed: bool = True
    print_sorted: bool = False
    color: ColorMode = ColorMode.AUTO
    interleave: bool = False

    @classmethod
    def from_flags(cls, added: bool = False, removed: bool = False,
                   print_sorted: bool = False, **presentation: Any) -> "Options":
        """
        Builds options from the command-line show flags.

        Giving neither or both of ``added`` and ``removed`` shows both
        categories; giving one of them shows only that one.
        """
        if added == removed:
            show_added = show_removed = True
        else:
            show_added, show_removed = added, removed
        return cls(show_added=show_added, show_removed=show_removed,
                   print_sorted=print_sorted, **presentation)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Options":
        """
        Builds options from a plain dict, rejecting keys that are not fields.

        Raises:
            InvalidOption: On an unknown key or an unknown color mode.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in mapping.items():
            if key not in known:
                raise InvalidOption(key)
            if key == "color":
                try:
                    value = ColorMode(value)
                except ValueError:
                    raise InvalidOption(f"color={value}") from None
            values[key] = value
        return cls(**values)


DEFAULT_OPTIONS = Options()
