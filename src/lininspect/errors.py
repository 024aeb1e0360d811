"""Errors raised by the lininspect readers."""


class InspectError(Exception):
    """Base class for telemetry read failures."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class SourceUnavailable(InspectError):
    """The kernel resource could not be opened or queried."""


class MalformedRecord(InspectError):
    """A fixed-layout record had missing or invalid fields."""

    def __init__(self, message: str, source: str | None = None, line: str = "") -> None:
        super().__init__(message, source)
        self.line = line


class CounterNotFound(InspectError):
    """No line carried the requested label."""

    def __init__(self, label: str, source: str | None = None) -> None:
        super().__init__(f"No '{label}' line found in {source}", source)
        self.label = label


class QueryFailed(InspectError):
    """A system call returned an error."""
