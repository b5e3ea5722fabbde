import os
import sys
from abc import ABC, abstractmethod
from typing import IO, List, Tuple, Union

from .errors import InputUnavailable, UsageError
from .models import LineSet
from .utils import ENCODING, ERRORS, normalize, split_lines

STDIN_SOURCE = "-"

Source = Union[str, "os.PathLike[str]", IO]


class InputReader(ABC):
    """Abstract base class for source readers."""

    @abstractmethod
    def read(self, source: Source) -> List[str]:
        """
        Reads a source into raw lines.

        Args:
            source: The path, '-' or open stream to read.

        Returns:
            List[str]: Lines without their trailing newline.

        Raises:
            InputUnavailable: If the source cannot be opened or read.
        """

    @abstractmethod
    def label(self, source: Source) -> str:
        """Human-readable name for the source."""


class PathReader(InputReader):
    """Reads a named file, including /dev/fd/N process-substitution paths."""

    def read(self, source: Source) -> List[str]:
        path = os.fspath(source)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise InputUnavailable(path, e.strerror or str(e)) from e
        return split_lines(data)

    def label(self, source: Source) -> str:
        return os.fspath(source)


class StreamReader(InputReader):
    """Reads standard input ('-') or an already-open text or binary stream."""

    def read(self, source: Source) -> List[str]:
        stream = self._resolve(source)
        try:
            data = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailable(self.label(source), getattr(e, "strerror", None) or str(e)) from e
        if isinstance(data, str):
            data = data.encode(ENCODING, ERRORS)
        return split_lines(data)

    def label(self, source: Source) -> str:
        if source == STDIN_SOURCE:
            return "<stdin>"
        return str(getattr(source, "name", "<stream>"))

    def _resolve(self, source: Source):
        if source == STDIN_SOURCE:
            if sys.stdin is None:
                raise InputUnavailable("<stdin>", "standard input is closed")
            return getattr(sys.stdin, "buffer", sys.stdin)
        return source


class InputController:
    """
    Loads both sources and normalizes them into LineSets.
    """

    def load(self, old_source: Source, new_source: Source) -> Tuple[LineSet, LineSet]:
        """
        Reads both sources completely before returning.

        Args:
            old_source: Path, '-' or open stream for the old side.
            new_source: Path, '-' or open stream for the new side.

        Returns:
            Tuple[LineSet, LineSet]: Normalized old and new sets.

        Raises:
            UsageError: If both sources are standard input.
            InputUnavailable: If either source cannot be read.
        """
        if old_source == STDIN_SOURCE and new_source == STDIN_SOURCE:
            raise UsageError("standard input can only be used for one source")

        old_set = self._load_one(old_source)
        new_set = self._load_one(new_source)
        return old_set, new_set

    def _load_one(self, source: Source) -> LineSet:
        reader = self._get_reader(source)
        return normalize(reader.read(source), reader.label(source))

    def _get_reader(self, source: Source) -> InputReader:
        if source == STDIN_SOURCE or hasattr(source, "read"):
            return StreamReader()
        return PathReader()
