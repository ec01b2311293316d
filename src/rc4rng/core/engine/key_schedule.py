from __future__ import annotations

import secrets
from collections.abc import Sequence
from typing import Optional, Protocol, Union

from rc4rng.core.engine.state import is_int
from rc4rng.core.errors import EmptyKeyError, InvalidKeyError

Key = Union[str, Sequence[int]]


class RandomSource(Protocol):
    """
    Uniform integer source used to seed unkeyed engines.

    random.Random and secrets.SystemRandom both satisfy this.
    """

    def randrange(self, stop: int) -> int: ...


# Platform entropy for unkeyed engines
system_source: RandomSource = secrets.SystemRandom()


def key_material(key: Optional[Key], *, size: int, source: Optional[RandomSource] = None) -> list[int]:
    """
    Normalize a caller key into a list of integers.

    Accepts:
      - None        -> `size` uniform draws in [0, size) from `source`
      - str         -> code point of each character, mod size
      - int sequence (list / tuple / bytes / ...) -> copied as-is
    """
    if key is None:
        src = source if source is not None else system_source
        return [src.randrange(size) for _ in range(size)]

    if isinstance(key, str):
        material = [ord(c) % size for c in key]
    elif isinstance(key, Sequence):
        if not all(is_int(v) for v in key):
            raise InvalidKeyError("invalid seed key specified: not array of integers")
        material = list(key)
    else:
        raise InvalidKeyError(f"invalid seed key specified: {type(key).__name__}")

    if not material:
        raise EmptyKeyError("seed key must not be empty")
    return material


def schedule(key: Sequence[int], *, size: int) -> list[int]:
    """
    RC4 key-scheduling algorithm.

    Starts from the identity permutation and swaps once per position; the key
    is cycled when shorter than `size`.
    """
    keylen = len(key)
    if keylen == 0:
        raise EmptyKeyError("seed key must not be empty")

    s = list(range(size))
    j = 0
    for i in range(size):
        j = (j + s[i] + key[i % keylen]) % size
        s[i], s[j] = s[j], s[i]
    return s


def seed(key: Optional[Key], *, size: int, source: Optional[RandomSource] = None) -> list[int]:
    return schedule(key_material(key, size=size, source=source), size=size)
