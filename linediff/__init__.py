"""
linediff Package
================

This package compares two line-oriented lists as sets. Each input is
normalized (comments and blank lines dropped, duplicates collapsed, lines
sorted in byte order) and the lines only in the old list (removed) and only
in the new list (added) are reported.

Modules:
    - engine: Set comparison and the public ``diff`` operation.
    - input_controller: Reads paths, stdin and open streams.
    - models: Data structures (LineSet, DiffResult, Options).
    - reporter: Colored +/- console output.
    - utils: The filter -> dedupe -> sort normalization pipeline.
    - visualizer: HTML report.
"""
from .engine import SetDiffEngine, diff
from .errors import InputUnavailable, InvalidOption, LineDiffError, ReportUnwritable, UsageError
from .models import ColorMode, DiffResult, LineSet, Options
from .utils import LineNormalizer, normalize

__all__ = [
    "ColorMode", "DiffResult", "InputUnavailable", "InvalidOption", "LineDiffError",
    "LineNormalizer", "LineSet", "Options", "ReportUnwritable", "SetDiffEngine",
    "UsageError", "diff", "normalize",
]
