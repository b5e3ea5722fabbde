import sys
from typing import IO, Optional

from .engine import ADDED, marked_lines
from .models import DEFAULT_OPTIONS, ColorMode, DiffResult, LineSet, Options


class ConsoleReporter:
    """
    Writes sorted dumps and +/- diff lines to a text stream.
    """

    # ANSI Color Codes
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    ENDC = '\033[0m'

    def __init__(self, stream: Optional[IO[str]] = None, color: ColorMode = ColorMode.AUTO):
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = self._wants_color(color)

    def _wants_color(self, color: ColorMode) -> bool:
        if color == ColorMode.ALWAYS:
            return True
        if color == ColorMode.NEVER:
            return False
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _paint(self, text: str, *codes: str) -> str:
        if not self.use_color:
            return text
        return "".join(codes) + text + self.ENDC

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")

    def report(self, result: DiffResult, options: Options = DEFAULT_OPTIONS) -> None:
        """
        Emits the sections requested by ``options``.

        Sorted dumps (old, then new) come before the diff lines.
        """
        if options.print_sorted:
            self.print_sorted(result.old)
            self.print_sorted(result.new)

        for marker, line in marked_lines(result, options):
            code = self.GREEN if marker == ADDED else self.RED
            self._write(self._paint(marker + line, code))

    def print_sorted(self, line_set: LineSet) -> None:
        self._write(self._paint(f"=== sorted: {line_set.label} ===", self.BOLD))
        for line in line_set:
            self._write(line)
