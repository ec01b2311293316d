from __future__ import annotations

import re

from rc4rng.core.engine.state import EngineState
from rc4rng.core.errors import InvalidStateStringError, StateEncodingError

# 16-entry states only: one hex digit per value
TEXT_STATE_SIZE = 16

_STATE_TEXT_RE = re.compile(r"^[0-9a-f]{18}$")
_HEX_DIGITS = "0123456789abcdef"


def encode_state(state: EngineState) -> str:
    """
    Encode a 16-entry state as 18 lowercase hex characters:
    i, j, then s[0..15].
    """
    if state.size != TEXT_STATE_SIZE:
        raise StateEncodingError(
            f"text state encoding needs a {TEXT_STATE_SIZE}-entry permutation, got {state.size}"
        )
    values = (state.i, state.j, *state.s)
    if not all(0 <= v < TEXT_STATE_SIZE for v in values):
        raise StateEncodingError("state values must be in [0, 15] to encode as hex digits")
    return "".join(_HEX_DIGITS[v] for v in values)


def decode_state(text: str) -> EngineState:
    """
    Parse an 18 character state string.

    Only the shape is checked here; permutation checks happen when the
    result is imported into an engine.
    """
    if not isinstance(text, str) or _STATE_TEXT_RE.fullmatch(text) is None:
        raise InvalidStateStringError("state string should be 18 lowercase hex characters")

    digits = [int(c, 16) for c in text]
    return EngineState(i=digits[0], j=digits[1], s=digits[2:])
