from __future__ import annotations

import re

import pytest

from rc4rng import (
    RC4,
    EngineState,
    InvalidStateError,
    InvalidStateStringError,
    StateEncodingError,
    decode_state,
    encode_state,
    rc4_small,
)

_STATE_TEXT = re.compile(r"^[0-9a-f]{18}$")


def test_encode_identity_state() -> None:
    state = EngineState(i=0, j=0, s=list(range(16)))
    assert encode_state(state) == "000123456789abcdef"


def test_decode_parses_positions() -> None:
    state = decode_state("3a0123456789abcdef")
    assert state.i == 3
    assert state.j == 10
    assert state.s == list(range(16))


def test_export_text_after_steps() -> None:
    engine = rc4_small([0])
    engine.import_state_text("000123456789abcdef")

    assert engine.next_byte() == 0x25
    assert engine.export_state_text() == "230132456789abcdef"


def test_export_text_format_always_holds() -> None:
    engine = rc4_small("format")
    for _ in range(300):
        assert _STATE_TEXT.match(engine.export_state_text())
        engine.next_byte()


def test_text_round_trip_preserves_sequence() -> None:
    engine = rc4_small("text round trip")
    for _ in range(7):
        engine.next_byte()

    text = engine.export_state_text()
    expected = [engine.next_byte() for _ in range(50)]

    engine.import_state_text(text)
    assert [engine.next_byte() for _ in range(50)] == expected


def test_text_restores_into_fresh_engine() -> None:
    engine = rc4_small("carry")
    engine.next_uint32()

    clone = rc4_small()
    clone.import_state_text(engine.export_state_text())
    assert [clone.next_uint32() for _ in range(10)] == [engine.next_uint32() for _ in range(10)]


@pytest.mark.parametrize(
    "text",
    [
        "zz",
        "",
        "000123456789abcde",
        "000123456789abcdef0",
        "000123456789ABCDEF",
        "000123456789abcdeg",
        " 000123456789abcdef",
        "000123456789abcdef\n",
    ],
)
def test_malformed_text_rejected(text: str) -> None:
    engine = rc4_small("strict")
    before = engine.export_state()

    with pytest.raises(InvalidStateStringError):
        engine.import_state_text(text)
    with pytest.raises(TypeError):
        engine.import_state_text(text)

    assert engine.export_state() == before


def test_non_string_rejected() -> None:
    with pytest.raises(InvalidStateStringError):
        decode_state(None)  # type: ignore[arg-type]


def test_well_formed_text_still_needs_permutation() -> None:
    engine = rc4_small("strict")
    before = engine.export_state()

    with pytest.raises(InvalidStateError) as exc_info:
        engine.import_state_text("000023456789abcdef")
    assert exc_info.value.reason == "value_duplicated"
    assert engine.export_state() == before


def test_text_state_too_small_for_default_engine() -> None:
    engine = RC4("big")
    with pytest.raises(InvalidStateError) as exc_info:
        engine.import_state_text("000123456789abcdef")
    assert exc_info.value.reason == "wrong_length"


def test_default_engine_cannot_encode_text() -> None:
    with pytest.raises(StateEncodingError):
        RC4("big").export_state_text()
