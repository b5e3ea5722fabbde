from typing import Iterable, List

from .models import LineSet

ENCODING = "utf-8"
ERRORS = "surrogateescape"
COMMENT_PREFIX = "#"


class LineNormalizer:
    """
    Static utility class for the filter -> dedupe -> sort pipeline.
    """

    @staticmethod
    def byte_order_key(line: str) -> bytes:
        """
        Sort key giving C-locale (ordinal byte) order for any decoded line.
        """
        return line.encode(ENCODING, ERRORS)

    @staticmethod
    def filter_lines(lines: Iterable[str]) -> List[str]:
        """Drops empty lines and lines starting with '#'."""
        return [line for line in lines
                if line and not line.startswith(COMMENT_PREFIX)]

    @staticmethod
    def dedupe_lines(lines: Iterable[str]) -> List[str]:
        """Collapses exact duplicates, keeping first-seen order."""
        return list(dict.fromkeys(lines))

    @staticmethod
    def sort_lines(lines: Iterable[str]) -> List[str]:
        return sorted(lines, key=LineNormalizer.byte_order_key)

    @staticmethod
    def normalize(lines: Iterable[str]) -> List[str]:
        filtered = LineNormalizer.filter_lines(lines)
        unique = LineNormalizer.dedupe_lines(filtered)
        return LineNormalizer.sort_lines(unique)


def normalize(lines: Iterable[str], label: str = "") -> LineSet:
    """
    Normalizes raw lines into a LineSet.

    Args:
        lines (Iterable[str]): Lines without their trailing newline.
        label (str): Name of the source the lines came from.

    Returns:
        LineSet: The unique, non-comment lines in byte order.
    """
    return LineSet(tuple(LineNormalizer.normalize(lines)), label)


def split_lines(data: bytes) -> List[str]:
    """
    Decodes raw bytes and splits them on '\\n' only.

    A trailing newline does not produce an extra empty line; other control
    characters such as '\\r' are kept as part of the line.
    """
    text = data.decode(ENCODING, ERRORS)
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
