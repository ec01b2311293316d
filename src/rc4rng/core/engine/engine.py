from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional

from rc4rng.core.codec.state_text import decode_state, encode_state
from rc4rng.core.engine.key_schedule import Key, RandomSource, seed
from rc4rng.core.engine.profile import EngineProfile, profile_for
from rc4rng.core.engine.state import EngineState, is_int, validate_state
from rc4rng.core.errors import EmptyRangeError, InvalidArgumentsError, InvalidStateError
from rc4rng.core.logging.setup import get_logger

log = get_logger(__name__)

DEFAULT_SIZE = 256

# one byte-level value must fit in 8 bits for uint32 / float packing
_BYTE_SPAN = 256
_UINT32_SPAN = 0x100000000

_INT_TEXT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


class RC4:
    """
    Deterministic RC4-based random number engine.

    One engine type covers both configurations:
      - size=256, units_per_byte=1: classic RC4 keystream bytes
      - size=16,  units_per_byte=2: two nibble steps combined per byte

    size ** units_per_byte may not exceed 256, so next_byte() stays a byte.

    Not a cryptographic generator. Instances are not thread-safe; callers
    sharing one across threads must serialize access.
    """

    def __init__(
        self,
        key: Optional[Key] = None,
        size: int = DEFAULT_SIZE,
        *,
        units_per_byte: int = 1,
        source: Optional[RandomSource] = None,
    ) -> None:
        if not is_int(size) or size <= 0:
            raise ValueError("size must be a positive integer")
        if not is_int(units_per_byte) or units_per_byte <= 0:
            raise ValueError("units_per_byte must be a positive integer")
        if size ** units_per_byte > _BYTE_SPAN:
            raise ValueError(
                f"size ** units_per_byte must be <= {_BYTE_SPAN}, got {size}**{units_per_byte}"
            )

        self._size = size
        self._units_per_byte = units_per_byte
        self._state = EngineState(i=0, j=0, s=seed(key, size=size, source=source))

        log.debug(
            "engine.seeded",
            size=size,
            units_per_byte=units_per_byte,
            key_kind="random" if key is None else type(key).__name__,
            key_len=None if key is None else len(key),
        )

    # ---- Configuration ----------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def units_per_byte(self) -> int:
        return self._units_per_byte

    @property
    def profile(self) -> EngineProfile | None:
        """Named profile of this engine, or None for a custom size."""
        return profile_for(size=self._size, units_per_byte=self._units_per_byte)

    # ---- Output -----------------------------------------------------

    def next_native(self) -> int:
        """Advance one RC4 step and return a unit in [0, size)."""
        st = self._state
        n = self._size
        s = st.s

        st.i = (st.i + 1) % n
        st.j = (st.j + s[st.i]) % n
        s[st.i], s[st.j] = s[st.j], s[st.i]

        return s[(s[st.i] + s[st.j]) % n]

    def next_byte(self) -> int:
        if self._units_per_byte == 1:
            return self.next_native()

        # earlier units are more significant: nibbles give a*16 + b
        value = 0
        for _ in range(self._units_per_byte):
            value = value * self._size + self.next_native()
        return value

    def next_uint32(self) -> int:
        # consumption order a, b, c, d is part of the output contract
        a = self.next_byte()
        b = self.next_byte()
        c = self.next_byte()
        d = self.next_byte()

        return ((a * 256 + b) * 256 + c) * 256 + d

    def next_float(self) -> float:
        """Float in [0, 1) with 32 bits of resolution."""
        return self.next_uint32() / _UINT32_SPAN

    def next_ranged(self, *args: int | str) -> int:
        """
        Integer in an inclusive range.

            next_ranged(b)      -> [0, b]
            next_ranged(a, b)   -> [a, b]

        Bounds may be ints or base-10 integer strings. Note the one-argument
        form includes `b` itself.
        """
        if len(args) == 1:
            lo, hi = 0, args[0]
        elif len(args) == 2:
            lo, hi = args
        else:
            raise InvalidArgumentsError("next_ranged takes one or two integer arguments")

        lo = _parse_bound(lo)
        hi = _parse_bound(hi)

        if hi < lo:
            raise EmptyRangeError(f"empty range: max {hi} < min {lo}")

        return lo + self.next_uint32() % (hi - lo + 1)

    # ---- State ------------------------------------------------------

    def export_state(self) -> EngineState:
        return self._state.copy()

    def import_state(self, state: EngineState | Mapping[str, Any]) -> None:
        """
        Install a state after full validation.

        Nothing is modified unless every check passes; the permutation is
        copied so the caller's list stays detached from the engine.
        """
        try:
            valid = validate_state(state, size=self._size)
        except InvalidStateError as exc:
            log.debug("engine.state_rejected", size=self._size, reason=exc.reason)
            raise

        self._state = valid

        log.debug("engine.state_imported", size=self._size, i=valid.i, j=valid.j)

    def export_state_text(self) -> str:
        """18-character hex form of the state (16-entry engines only)."""
        return encode_state(self.export_state())

    def import_state_text(self, text: str) -> None:
        self.import_state(decode_state(text))


def _parse_bound(value: Any) -> int:
    if isinstance(value, str):
        if _INT_TEXT_RE.fullmatch(value) is None:
            raise InvalidArgumentsError(
                f"next_ranged takes one or two integer arguments, got {value!r}"
            )
        return int(value, 10)

    if not is_int(value):
        raise InvalidArgumentsError(
            f"next_ranged takes one or two integer arguments, got {type(value).__name__}"
        )
    return value
