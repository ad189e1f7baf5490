import pytest

from tvhkit.bitstream import BitStream, EndOfStreamError
from tvhkit.constants import Profile, SampleFrequency
from tvhkit.elements import (
    ProgramConfig,
    RDSBuffer,
    decode_cce,
    decode_cpe,
    decode_dse,
    decode_fil,
    decode_lfe,
    decode_pce,
    decode_sce,
)

MARKER = 0b1011
MARKER_FIELD = (MARKER, 4)


def pack(fields):
    text = "".join(format(value, f"0{width}b") for value, width in fields)
    text += "0" * (-len(text) % 8)
    return int(text, 2).to_bytes(len(text) // 8, "big") if text else b""


def stream_of(fields):
    return BitStream(pack(fields))


def dse_body(payload):
    return [(0, 4), (0, 1), (len(payload), 8)] + [(b, 8) for b in payload]


MINIMAL_LONG_ICS = [(0, 8), (0, 1), (0, 2), (0, 1), (0, 6), (0, 1), (0, 1), (0, 1), (0, 1)]


def test_fil_skips_payload():
    stream = stream_of([(2, 4), (0xAB, 8), (0xCD, 8), MARKER_FIELD])
    decode_fil(stream)
    assert stream.read_bits(4) == MARKER


def test_fil_escaped_count():
    fields = [(15, 4), (2, 8)] + [(0x55, 8)] * 16 + [MARKER_FIELD]
    stream = stream_of(fields)
    decode_fil(stream)
    assert stream.read_bits(4) == MARKER


def test_dse_skips_payload():
    stream = stream_of(dse_body([1, 2]) + [MARKER_FIELD])
    decode_dse(stream)
    assert stream.read_bits(4) == MARKER


def test_dse_with_byte_align():
    fields = [(0, 4), (1, 1), (1, 8), (0, 3), (0xAB, 8), MARKER_FIELD]
    stream = stream_of(fields)
    decode_dse(stream)
    assert stream.read_bits(4) == MARKER


def test_pce_returns_config_and_consumes_element():
    fields = [
        (0, 4), (1, 2), (3, 4),
        (1, 4), (0, 4), (0, 4), (0, 2), (0, 3), (0, 4),
        (0, 1), (0, 1), (0, 1),
        (0b10101, 5),
        (0, 1),  # byte alignment
        (2, 8), (0x41, 8), (0x42, 8),
        MARKER_FIELD,
    ]
    stream = stream_of(fields)
    assert decode_pce(stream) == ProgramConfig(1, 3)
    assert stream.read_bits(4) == MARKER


def test_sce_minimal():
    stream = stream_of([(0, 4)] + MINIMAL_LONG_ICS + [MARKER_FIELD])
    decode_sce(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_sce_with_one_band():
    fields = [
        (0, 4),
        (0, 8), (0, 1), (0, 2), (0, 1), (1, 6), (0, 1),
        (1, 4), (1, 5),  # section: codebook 1, one band
        (0, 1),  # scale factor
        (0, 1), (0, 1), (0, 1),
        (0, 1),  # spectral quad
        MARKER_FIELD,
    ]
    stream = stream_of(fields)
    decode_sce(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_lfe_minimal():
    stream = stream_of([(0, 4)] + MINIMAL_LONG_ICS + [MARKER_FIELD])
    decode_lfe(stream, Profile.AAC_LC, SampleFrequency.HZ_44100)
    assert stream.read_bits(4) == MARKER


def test_cpe_separate_windows():
    stream = stream_of([(0, 4), (0, 1)] + MINIMAL_LONG_ICS + MINIMAL_LONG_ICS + [MARKER_FIELD])
    decode_cpe(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_cpe_common_window_with_ms_mask():
    channel = [(0, 8), (0, 4), (1, 5), (0, 1), (0, 1), (0, 1)]
    fields = (
        [(0, 4), (1, 1), (0, 1), (0, 2), (0, 1), (1, 6), (0, 1), (1, 2), (1, 1)]
        + channel
        + channel
        + [MARKER_FIELD]
    )
    stream = stream_of(fields)
    decode_cpe(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_cpe_rejects_unknown_frequency():
    stream = stream_of([(0, 32)])
    with pytest.raises(ValueError):
        decode_cpe(stream, Profile.AAC_LC, SampleFrequency.NONE)


def test_cce_minimal():
    fields = [(0, 4), (0, 1), (0, 3), (0, 1), (0, 4), (0, 1), (0, 3)] + MINIMAL_LONG_ICS
    stream = stream_of(fields + [MARKER_FIELD])
    decode_cce(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_cce_channel_pair_adds_gain_element():
    fields = (
        [(0, 4), (0, 1), (0, 3), (1, 1), (0, 4), (3, 2), (0, 1), (0, 3)]
        + MINIMAL_LONG_ICS
        + [(1, 1), (0, 1), MARKER_FIELD]
    )
    stream = stream_of(fields)
    decode_cce(stream, Profile.AAC_LC, SampleFrequency.HZ_48000)
    assert stream.read_bits(4) == MARKER


def test_rds_complete_package():
    buffer = RDSBuffer()
    stream = stream_of(dse_body([0xFE, 0x01, 0xFF]) + [MARKER_FIELD])
    assert buffer.decode_dse(stream) == b"\xfe\x01\xff"
    assert stream.read_bits(4) == MARKER


def test_rds_package_spread_over_elements():
    buffer = RDSBuffer()
    assert buffer.decode_dse(stream_of(dse_body([0xFE, 0x01]))) == b""
    assert buffer.decode_dse(stream_of(dse_body([0x02, 0xFF]))) == b"\xfe\x01\x02\xff"


def test_rds_package_without_start_is_dropped():
    buffer = RDSBuffer()
    assert buffer.decode_dse(stream_of(dse_body([0x01, 0xFF]))) == b""
    assert buffer.decode_dse(stream_of(dse_body([0xFE, 0xFF]))) == b"\xfe\xff"


def test_rds_reset_drops_partial_package():
    buffer = RDSBuffer()
    buffer.decode_dse(stream_of(dse_body([0xFE, 0x01])))
    buffer.reset()
    assert buffer.decode_dse(stream_of(dse_body([0x02, 0xFF]))) == b""


def test_rds_read_error_resets_buffer():
    buffer = RDSBuffer()
    buffer.decode_dse(stream_of(dse_body([0xFE, 0x01])))
    truncated = BitStream(pack([(0, 4), (0, 1), (10, 8), (0x11, 8)]))
    with pytest.raises(EndOfStreamError):
        buffer.decode_dse(truncated)
    assert buffer.decode_dse(stream_of(dse_body([0xFF]))) == b""