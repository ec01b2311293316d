from __future__ import annotations

from dataclasses import dataclass

from rc4rng.core.config.settings import ProfileName


@dataclass(frozen=True, slots=True)
class EngineProfile:
    """
    Engine configuration.

    - size: permutation size N (output units are in [0, size))
    - units_per_byte: output steps combined into one byte-level value
      (1 for plain RC4, 2 nibbles for the 16-entry variant)
    """
    name: ProfileName
    size: int
    units_per_byte: int


RC4_PROFILE = EngineProfile(name="rc4", size=256, units_per_byte=1)
RC4SMALL_PROFILE = EngineProfile(name="rc4small", size=16, units_per_byte=2)

_PROFILES: dict[str, EngineProfile] = {
    RC4_PROFILE.name: RC4_PROFILE,
    RC4SMALL_PROFILE.name: RC4SMALL_PROFILE,
}


def profile_by_name(name: str) -> EngineProfile:
    try:
        return _PROFILES[name]
    except KeyError:
        raise ValueError(f"unknown engine profile: {name!r}") from None


def profile_for(*, size: int, units_per_byte: int) -> EngineProfile | None:
    """Return the named profile matching this configuration, if any."""
    for p in _PROFILES.values():
        if p.size == size and p.units_per_byte == units_per_byte:
            return p
    return None
