from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from rc4rng.core.errors import InvalidStateError


@dataclass(slots=True)
class EngineState:
    """
    RC4 permutation state.

    - i, j: cursors in [0, N)
    - s: permutation of 0..N-1

    Instances handed out by the engine are copies; mutating one never
    reaches back into a live engine.
    """

    i: int = 0
    j: int = 0
    s: list[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.s)

    def copy(self) -> EngineState:
        return EngineState(i=self.i, j=self.j, s=list(self.s))

    def as_dict(self) -> dict[str, Any]:
        return {"i": self.i, "j": self.j, "s": list(self.s)}


def is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid cursor / key element
    return isinstance(value, int) and not isinstance(value, bool)


def validate_state(candidate: EngineState | Mapping[str, Any], *, size: int) -> EngineState:
    """
    Validate a candidate state against permutation size `size`.

    Checks run in a fixed order and stop at the first failure:
      1. i is an integer in [0, size)
      2. j is an integer in [0, size)
      3. s is a sequence of exactly `size` items
      4. every item of s is in [0, size) and appears once

    Returns a fresh EngineState owning its own copy of s.
    """
    if isinstance(candidate, EngineState):
        i, j, s = candidate.i, candidate.j, candidate.s
    elif isinstance(candidate, Mapping):
        i, j, s = candidate.get("i"), candidate.get("j"), candidate.get("s")
    else:
        raise InvalidStateError(
            f"state should be EngineState or mapping with i, j, s; got {type(candidate).__name__}",
            reason="malformed",
        )

    hi = size - 1

    if not (is_int(i) and 0 <= i < size):
        raise InvalidStateError(f"state.i should be integer [0, {hi}]", reason="i_out_of_range")

    if not (is_int(j) and 0 <= j < size):
        raise InvalidStateError(f"state.j should be integer [0, {hi}]", reason="j_out_of_range")

    if not isinstance(s, Sequence) or isinstance(s, (str, bytes)) or len(s) != size:
        raise InvalidStateError(f"state should be array of length {size}", reason="wrong_length")

    seen = [False] * size
    for pos, v in enumerate(s):
        if not (is_int(v) and 0 <= v < size):
            raise InvalidStateError(
                f"state should be permutation of 0..{hi}: s[{pos}]={v!r} is out of range",
                reason="value_out_of_range",
            )
        if seen[v]:
            raise InvalidStateError(
                f"state should be permutation of 0..{hi}: {v} is duplicated",
                reason="value_duplicated",
            )
        seen[v] = True

    return EngineState(i=i, j=j, s=list(s))
