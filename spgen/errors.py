"""
Exceptions raised by the password engine.

All of them are recoverable at the caller's boundary: show the message,
let the user correct the input, try again.
"""


class SpgenError(Exception):
    """Generic password engine error."""


class EmptyCharsetError(SpgenError):
    """No usable characters remain after class selection and exclusions."""


class InvalidBatchSizeError(SpgenError):
    """Batch count outside the accepted range."""


class InvalidLengthError(SpgenError):
    """Requested password length is not a positive integer."""


class RandomSourceUnavailableError(SpgenError):
    """The secure random source is missing or failed."""


class UnknownPresetError(SpgenError, KeyError):
    """No preset with the requested name."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


class ExportError(SpgenError):
    """The CSV export could not be written."""
