from __future__ import annotations

import orjson
import pytest
from pydantic import ValidationError

from rc4rng import RC4, EngineSnapshot, InvalidStateError, rc4, rc4_small


def test_snapshot_json_round_trip_restores_position() -> None:
    engine = rc4("snapshot")
    for _ in range(20):
        engine.next_byte()

    doc = EngineSnapshot.capture(engine).to_json()
    expected = [engine.next_uint32() for _ in range(10)]

    restored = EngineSnapshot.from_json(doc).restore()
    assert [restored.next_uint32() for _ in range(10)] == expected


def test_snapshot_keeps_nibble_configuration() -> None:
    engine = rc4_small("nibble snapshot")
    engine.next_byte()

    snap = EngineSnapshot.capture(engine)
    assert snap.profile == "rc4small"
    assert (snap.size, snap.units_per_byte) == (16, 2)

    restored = EngineSnapshot.from_json(snap.to_json()).restore()
    assert restored.units_per_byte == 2
    assert restored.export_state_text() == engine.export_state_text()
    assert restored.next_byte() == engine.next_byte()


def test_snapshot_custom_size() -> None:
    engine = RC4("custom", 64)
    snap = EngineSnapshot.capture(engine)
    assert snap.profile is None

    restored = snap.restore()
    assert restored.size == 64
    assert restored.next_byte() == engine.next_byte()


def test_snapshot_json_is_sorted_and_plain() -> None:
    snap = EngineSnapshot.capture(rc4_small("json"))
    payload = orjson.loads(snap.to_json())

    assert list(payload) == sorted(payload)
    assert payload["schema_version"] == 1
    assert payload["s"] == snap.s


def test_state_hash_tracks_position() -> None:
    a = rc4("hash")
    b = rc4("hash")

    assert EngineSnapshot.capture(a).state_hash() == EngineSnapshot.capture(b).state_hash()

    a.next_byte()
    assert EngineSnapshot.capture(a).state_hash() != EngineSnapshot.capture(b).state_hash()


def test_profile_shape_mismatch_rejected() -> None:
    with pytest.raises(ValidationError):
        EngineSnapshot(profile="rc4small", size=256, units_per_byte=1, i=0, j=0, s=list(range(256)))


def test_malformed_json_rejected() -> None:
    with pytest.raises(ValueError):
        EngineSnapshot.from_json(b"not json")

    with pytest.raises(ValidationError):
        EngineSnapshot.from_json(b'{"size": 16}')


def test_restore_runs_permutation_checks() -> None:
    snap = EngineSnapshot(profile="rc4small", size=16, units_per_byte=2, i=0, j=0, s=[0] * 16)
    with pytest.raises(InvalidStateError) as exc_info:
        snap.restore()
    assert exc_info.value.reason == "value_duplicated"

    snap = EngineSnapshot(size=16, i=16, j=0, s=list(range(16)))
    with pytest.raises(InvalidStateError) as exc_info:
        snap.restore()
    assert exc_info.value.reason == "i_out_of_range"
