from __future__ import annotations


class M3UError(ValueError):
    """Base error for m3uconv parsing."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class FormatError(M3UError):
    """An #EXTINF line does not have the `duration [attributes],title` shape."""


class NumberFormatError(M3UError):
    """The duration field of an #EXTINF line is not a float literal."""

    def __init__(self, message: str, line: str = "", value: str = ""):
        super().__init__(message, line)
        self.value = value


class AttributeFormatError(M3UError):
    """An attribute token does not look like key="value"."""

    def __init__(self, message: str, line: str = "", token: str = ""):
        super().__init__(message, line)
        self.token = token


class UnknownDirectiveError(M3UError):
    """A `#` line that is neither the header nor #EXTINF."""
