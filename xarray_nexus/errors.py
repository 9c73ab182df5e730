"""Error codes and exception classes for Nexus plot decoding."""

from __future__ import annotations

NEX_ERROR_READ_ERROR = 1
NEX_ERROR_BAD_HEADER = 2
NEX_ERROR_UNRECOGNIZED_UNIT_SYSTEM = 3
NEX_ERROR_UNEXPECTED_EOF = 4
NEX_ERROR_INCONSISTENT_TIME_AXIS = 5
NEX_ERROR_UNKNOWN_VARIABLE = 6

_MESSAGES = {
    NEX_ERROR_READ_ERROR: "Could not open plot file.",
    NEX_ERROR_BAD_HEADER: "Invalid or corrupted plot file.",
    NEX_ERROR_UNRECOGNIZED_UNIT_SYSTEM: "Unrecognized unit system.",
    NEX_ERROR_UNEXPECTED_EOF: "Unexpected end of file.",
    NEX_ERROR_INCONSISTENT_TIME_AXIS: "Inconsistent time axis.",
    NEX_ERROR_UNKNOWN_VARIABLE: "Unknown variable code.",
}


class NexusError(Exception):
    """Base class for every decode/convert failure.

    ``value`` is one of the ``NEX_ERROR_*`` codes, ``mesg`` an optional
    detail appended to the generic description.
    """

    value = 0

    def __init__(self, mesg: str | None = None, offset: int | None = None):
        super().__init__(mesg)
        self.mesg = mesg
        self.offset = offset

    def __str__(self):
        mesg = _MESSAGES.get(self.value, f"Undefined error. ({self.value})")
        if self.mesg:
            mesg = " ".join((mesg, self.mesg))
        if self.offset is not None:
            mesg = f"{mesg} (offset {self.offset})"
        return mesg


class ReadError(NexusError, OSError):
    value = NEX_ERROR_READ_ERROR


class BadHeader(NexusError, ValueError):
    value = NEX_ERROR_BAD_HEADER


class UnrecognizedUnitSystem(NexusError, ValueError):
    value = NEX_ERROR_UNRECOGNIZED_UNIT_SYSTEM


class UnexpectedEndOfFile(NexusError, ValueError):
    value = NEX_ERROR_UNEXPECTED_EOF


class InconsistentTimeAxis(NexusError, ValueError):
    value = NEX_ERROR_INCONSISTENT_TIME_AXIS


class UnknownVariable(NexusError, ValueError):
    value = NEX_ERROR_UNKNOWN_VARIABLE
