class MinCutError(Exception):
    """Base class for every error raised by the mincut package."""


class InputNotFound(MinCutError, FileNotFoundError):
    """The graph instance file is missing or cannot be read."""


class MalformedInput(MinCutError, ValueError):
    """A line of a graph instance file does not parse."""

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class PreconditionViolation(MinCutError, ValueError):
    """A caller broke the contract of a core operation."""
