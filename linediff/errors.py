class LineDiffError(Exception):
    """Base class for failures that abort a linediff run."""
    exit_code = 1


class InputUnavailable(LineDiffError):
    """A source could not be opened or read."""

    def __init__(self, source: str, reason: str = "cannot be read"):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class InvalidOption(LineDiffError):
    """An unrecognized flag or option key was supplied."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"unrecognized option: {option}")


class UsageError(LineDiffError):
    """The positional arguments do not name exactly two sources."""


class ReportUnwritable(LineDiffError):
    """The HTML report could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write report {path}: {reason}")
