import pytest

from tvhkit.bitstream import AACDecodeError
from tvhkit.decoder import Decoder
from tvhkit.elements import RDSBuffer

END = [(7, 3)]
MINIMAL_LONG_ICS = [(0, 8), (0, 1), (0, 2), (0, 1), (0, 6), (0, 1), (0, 1), (0, 1), (0, 1)]


def pack(fields):
    text = "".join(format(value, f"0{width}b") for value, width in fields)
    text += "0" * (-len(text) % 8)
    return int(text, 2).to_bytes(len(text) // 8, "big") if text else b""


def dse(payload):
    return [(4, 3), (0, 4), (0, 1), (len(payload), 8)] + [(b, 8) for b in payload]


def header(frame_length, block_count, protection_absent, profile, sfi, sync=0xFFF):
    fields = [
        (sync, 12), (0, 3), (1 if protection_absent else 0, 1),
        (profile, 2), (sfi, 4), (0, 6), (0, 2),
        (frame_length, 13), (0x7FF, 11), (block_count - 1, 2),
    ]
    if not protection_absent:
        fields.append((0, 16))
    return pack(fields)


def adts_frame(blocks, protection_absent=True, profile=1, sfi=3, sync=0xFFF, length=None):
    body = b"".join(pack(block + END) for block in blocks)
    size = len(header(0, len(blocks), protection_absent, profile, sfi)) + len(body)
    frame_length = size if length is None else length
    return header(frame_length, len(blocks), protection_absent, profile, sfi, sync) + body


def test_decode_rds_returns_package():
    frame = adts_frame([dse([0xFE, 0x01, 0xFF])])
    assert Decoder(frame).decode_rds() == b"\xfe\x01\xff"


def test_decode_rds_with_crc_and_audio_element():
    frame = adts_frame([[(0, 3), (0, 4)] + MINIMAL_LONG_ICS + dse([0xFE, 0xFF])], protection_absent=False)
    assert Decoder(frame).decode_rds() == b"\xfe\xff"


def test_decode_rds_without_data_stream():
    frame = adts_frame([[(0, 3), (0, 4)] + MINIMAL_LONG_ICS])
    assert Decoder(frame).decode_rds() == b""


def test_package_spread_over_frames_with_shared_buffer():
    buffer = RDSBuffer()
    first = adts_frame([dse([0xFE, 0x01])])
    second = adts_frame([dse([0x02, 0xFF])])
    assert Decoder(first, buffer).decode_rds() == b""
    assert Decoder(second, buffer).decode_rds() == b"\xfe\x01\x02\xff"


def test_package_spread_over_raw_data_blocks():
    frame = adts_frame([dse([0xFE, 0x01]), dse([0xFF])])
    assert Decoder(frame).decode_rds() == b"\xfe\x01\xff"


def test_decode_frame_does_not_collect_rds():
    buffer = RDSBuffer()
    Decoder(adts_frame([dse([0xFE, 0x01])]), buffer).decode_frame()
    assert Decoder(adts_frame([dse([0xFF])]), buffer).decode_rds() == b""


def test_decode_frame_reads_header_fields():
    decoder = Decoder(adts_frame([dse([0x10])], profile=2, sfi=4))
    decoder.decode_frame()
    assert decoder.profile == 2
    assert decoder.sample_frequency_index == 4


def test_invalid_syncword():
    frame = adts_frame([dse([0x10])], sync=0xFFE)
    with pytest.raises(AACDecodeError):
        Decoder(frame).decode_rds()


def test_invalid_frame_length():
    frame = adts_frame([dse([0x10])], length=3)
    with pytest.raises(AACDecodeError):
        Decoder(frame).decode_frame()