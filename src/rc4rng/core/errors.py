from __future__ import annotations

from typing import Literal

StateRejectReason = Literal[
    "i_out_of_range",
    "j_out_of_range",
    "wrong_length",
    "value_out_of_range",
    "value_duplicated",
    "malformed",
]


class RC4Error(Exception):
    """
    Base class for every error raised by the engine.

    Each concrete error also derives from the builtin that matches its kind
    (TypeError / ValueError), so callers can catch either.
    """


class InvalidKeyError(RC4Error, TypeError):
    pass


class EmptyKeyError(RC4Error, ValueError):
    pass


class InvalidArgumentsError(RC4Error, TypeError):
    pass


class EmptyRangeError(RC4Error, ValueError):
    pass


class InvalidStateError(RC4Error, ValueError):
    """
    Imported state rejected.

    reason is a machine-friendly code; the message is for humans.
    """

    def __init__(self, message: str, *, reason: StateRejectReason) -> None:
        super().__init__(message)
        self.reason: StateRejectReason = reason


class InvalidStateStringError(RC4Error, TypeError):
    pass


class StateEncodingError(RC4Error, ValueError):
    pass
