from typing import Any, List, Mapping, Optional, Tuple, Union

from .input_controller import InputController, Source
from .models import DEFAULT_OPTIONS, DiffResult, LineSet, Options
from .utils import LineNormalizer

REMOVED = "-"
ADDED = "+"


class SetDiffEngine:
    """
    Compares two normalized LineSets as sets.
    """

    def __init__(self, old_set: LineSet, new_set: LineSet):
        self.old_set = old_set
        self.new_set = new_set

    def run(self) -> DiffResult:
        """
        Computes both set differences.

        Returns:
            DiffResult: ``removed`` is old minus new and ``added`` is new
            minus old, each in byte order.
        """
        old_lines = set(self.old_set.lines)
        new_lines = set(self.new_set.lines)

        # Iterating the sorted tuples keeps byte order without a second sort.
        removed = tuple(line for line in self.old_set if line not in new_lines)
        added = tuple(line for line in self.new_set if line not in old_lines)
        return DiffResult(added=added, removed=removed,
                          old=self.old_set, new=self.new_set)


def marked_lines(result: DiffResult, options: Options = DEFAULT_OPTIONS) -> List[Tuple[str, str]]:
    """
    Orders the diff lines for emission.

    Removed lines come first, then added lines, unless ``options.interleave``
    asks for one combined byte-ordered stream. Categories switched off in
    ``options`` are left out.

    Returns:
        List[Tuple[str, str]]: (marker, line) pairs, marker being '-' or '+'.
    """
    entries = []
    if options.show_removed:
        entries.extend((REMOVED, line) for line in result.removed)
    if options.show_added:
        entries.extend((ADDED, line) for line in result.added)

    if options.interleave:
        # A line is never in both categories, so the line alone orders them.
        entries.sort(key=lambda entry: LineNormalizer.byte_order_key(entry[1]))
    return entries


def validate_options(options: Union[Options, Mapping[str, Any], None]) -> None:
    """Raises InvalidOption if a dict of options names an unknown field."""
    if options is None or isinstance(options, Options):
        return
    Options.from_mapping(options)


def diff(old_source: Source, new_source: Source,
         options: Union[Options, Mapping[str, Any], None] = None,
         controller: Optional[InputController] = None) -> DiffResult:
    """
    Reads, normalizes and compares two line-oriented sources.

    Args:
        old_source: Path, '-' or open stream for the old side.
        new_source: Path, '-' or open stream for the new side.
        options: Options, or a dict of option fields. Options only shape
            the output; the result always holds both categories.
        controller: Input controller to use (a default one if omitted).

    Returns:
        DiffResult: The added and removed lines plus both normalized sets.

    Raises:
        InvalidOption: If ``options`` names an unknown field.
        InputUnavailable: If either source cannot be read.
    """
    validate_options(options)
    controller = controller or InputController()
    old_set, new_set = controller.load(old_source, new_source)
    return SetDiffEngine(old_set, new_set).run()
