from __future__ import annotations

from typing import Optional

from rc4rng.core.config.settings import AppSettings, settings as default_settings
from rc4rng.core.engine.engine import RC4
from rc4rng.core.engine.key_schedule import Key, RandomSource
from rc4rng.core.engine.profile import (
    RC4_PROFILE,
    RC4SMALL_PROFILE,
    EngineProfile,
    profile_by_name,
)


def build(profile: EngineProfile, key: Optional[Key] = None, *, source: Optional[RandomSource] = None) -> RC4:
    return RC4(key, profile.size, units_per_byte=profile.units_per_byte, source=source)


def rc4(key: Optional[Key] = None, *, source: Optional[RandomSource] = None) -> RC4:
    """Classic 256-entry engine."""
    return build(RC4_PROFILE, key, source=source)


def rc4_small(key: Optional[Key] = None, *, source: Optional[RandomSource] = None) -> RC4:
    """16-entry engine emitting bytes built from two nibble steps."""
    return build(RC4SMALL_PROFILE, key, source=source)


def create_engine(
    key: Optional[Key] = None,
    *,
    profile: EngineProfile | str | None = None,
    source: Optional[RandomSource] = None,
    settings: Optional[AppSettings] = None,
) -> RC4:
    """
    Build an engine, filling gaps from settings.

    - profile: explicit profile / name, else settings.profile
    - key: explicit key, else settings.default_key, else ambient randomness
    """
    cfg = settings if settings is not None else default_settings

    if profile is None:
        profile = cfg.profile
    if isinstance(profile, str):
        profile = profile_by_name(profile)

    if key is None:
        key = cfg.default_key

    return build(profile, key, source=source)
