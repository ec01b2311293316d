from __future__ import annotations

import hashlib
from typing import Optional

import orjson
from pydantic import BaseModel, Field, model_validator

from rc4rng.core.config.settings import ProfileName
from rc4rng.core.engine.engine import RC4
from rc4rng.core.engine.profile import profile_by_name


class EngineSnapshot(BaseModel):
    """
    Portable record of an engine position.

    Carries the configuration next to the cursors and permutation so a saved
    document restores into an engine of the right shape. Permutation
    validity is not checked here; restore() runs the engine's own import
    validation.
    """
    schema_version: int = Field(default=1, description="Snapshot schema version")

    profile: Optional[ProfileName] = Field(default=None, description="Named profile, None for custom sizes")
    size: int = Field(..., gt=0, description="Permutation size N")
    units_per_byte: int = Field(default=1, gt=0, description="Output steps per byte")

    i: int = Field(..., ge=0)
    j: int = Field(..., ge=0)
    s: list[int] = Field(...)

    @model_validator(mode="after")
    def _validate_profile(self) -> "EngineSnapshot":
        if self.profile is not None:
            p = profile_by_name(self.profile)
            if (p.size, p.units_per_byte) != (self.size, self.units_per_byte):
                raise ValueError(
                    f"profile {self.profile!r} requires size={p.size}, units_per_byte={p.units_per_byte}"
                )
        return self

    @classmethod
    def capture(cls, engine: RC4) -> "EngineSnapshot":
        state = engine.export_state()
        profile = engine.profile
        return cls(
            profile=profile.name if profile is not None else None,
            size=engine.size,
            units_per_byte=engine.units_per_byte,
            i=state.i,
            j=state.j,
            s=state.s,
        )

    def restore(self) -> RC4:
        """
        Build an engine of the recorded shape positioned at this snapshot.

        Raises InvalidStateError when the recorded state is not a valid
        permutation state.
        """
        # fixed placeholder key: the schedule is replaced by import_state
        engine = RC4([0], self.size, units_per_byte=self.units_per_byte)
        engine.import_state({"i": self.i, "j": self.j, "s": self.s})
        return engine

    def to_json(self) -> bytes:
        return orjson.dumps(self.model_dump(), option=orjson.OPT_SORT_KEYS)

    @classmethod
    def from_json(cls, data: bytes | str) -> "EngineSnapshot":
        return cls.model_validate(orjson.loads(data))

    def state_hash(self) -> str:
        """
        Deterministic fingerprint of the generator position.
        """
        return hashlib.sha256(self.to_json()).hexdigest()
