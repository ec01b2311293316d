"""Deterministic RC4-based random number engine (not for cryptographic use)."""

import logging

from rc4rng.core.codec.state_text import decode_state, encode_state
from rc4rng.core.engine.engine import RC4
from rc4rng.core.engine.factory import create_engine, rc4, rc4_small
from rc4rng.core.engine.key_schedule import RandomSource
from rc4rng.core.engine.profile import RC4_PROFILE, RC4SMALL_PROFILE, EngineProfile
from rc4rng.core.engine.snapshot import EngineSnapshot
from rc4rng.core.engine.state import EngineState
from rc4rng.core.errors import (
    EmptyKeyError,
    EmptyRangeError,
    InvalidArgumentsError,
    InvalidKeyError,
    InvalidStateError,
    InvalidStateStringError,
    RC4Error,
    StateEncodingError,
)

__all__ = [
    "RC4",
    "RC4_PROFILE",
    "RC4SMALL_PROFILE",
    "EmptyKeyError",
    "EmptyRangeError",
    "EngineProfile",
    "EngineSnapshot",
    "EngineState",
    "InvalidArgumentsError",
    "InvalidKeyError",
    "InvalidStateError",
    "InvalidStateStringError",
    "RC4Error",
    "RandomSource",
    "StateEncodingError",
    "create_engine",
    "decode_state",
    "encode_state",
    "rc4",
    "rc4_small",
]

# silent until the application calls configure_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())
