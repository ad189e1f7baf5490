import pytest

from tvhkit.bitstream import AACDecodeError, BitStream, EndOfStreamError

DATA = bytes([0xAB, 0xCD, 0xEF, 0x01, 0x23, 0x45, 0x67, 0x89])


def test_len_is_data_length():
    assert len(BitStream(DATA)) == len(DATA)


def test_read_bytes_round_trip():
    stream = BitStream(DATA)
    assert [stream.read_bits(8) for _ in DATA] == list(DATA)


def test_read_bit_matches_binary_representation():
    stream = BitStream(DATA)
    bits = "".join(str(stream.read_bit()) for _ in range(8 * len(DATA)))
    assert bits == "".join(format(b, "08b") for b in DATA)


def test_read_32_bits():
    stream = BitStream(DATA)
    assert stream.read_bits(32) == int.from_bytes(DATA[:4], "big")
    assert stream.read_bits(32) == int.from_bytes(DATA[4:], "big")


def test_read_across_word_boundary():
    stream = BitStream(DATA)
    stream.read_bits(24)
    assert stream.read_bits(16) == int.from_bytes(DATA[3:5], "big")


def test_read_zero_bits():
    stream = BitStream(DATA)
    assert stream.read_bits(0) == 0
    assert stream.read_bits(8) == DATA[0]


def test_read_bool():
    stream = BitStream(bytes([0x80, 0, 0, 0]))
    assert stream.read_bool() is True
    assert stream.read_bool() is False


def test_bits_left_decreases_with_reads():
    stream = BitStream(DATA)
    total = 8 * len(DATA)
    assert stream.bits_left() == total
    consumed = 0
    for n in (3, 7, 13, 1, 20):
        stream.read_bits(n)
        consumed += n
        assert stream.bits_left() == total - consumed


def test_more_than_32_bits_rejected():
    with pytest.raises(ValueError):
        BitStream(DATA).read_bits(33)


def test_empty_stream_raises():
    with pytest.raises(EndOfStreamError):
        BitStream(b"").read_bit()


def test_reading_past_end_raises():
    stream = BitStream(DATA[:4])
    stream.read_bits(32)
    with pytest.raises(EndOfStreamError):
        stream.read_bits(1)


def test_end_of_stream_is_decode_error():
    stream = BitStream(DATA[:4])
    stream.skip_bits(32)
    with pytest.raises(AACDecodeError):
        stream.skip_bit()


def test_partial_tail_is_zero_padded():
    stream = BitStream(DATA[:5])
    stream.read_bits(32)
    assert stream.read_bits(8) == DATA[4]
    assert stream.read_bits(24) == 0
    with pytest.raises(EndOfStreamError):
        stream.read_bit()


def test_short_stream_reads_available_bytes():
    stream = BitStream(DATA[:2])
    assert stream.read_bits(16) == int.from_bytes(DATA[:2], "big")


@pytest.mark.parametrize("skip,read", [(1, 7), (12, 4), (30, 5), (33, 16), (40, 8), (5, 32)])
def test_skip_equals_read_and_discard(skip, read):
    skipped = BitStream(DATA)
    skipped.skip_bits(skip)
    consumed = BitStream(DATA)
    while skip > 0:
        step = min(skip, 32)
        consumed.read_bits(step)
        skip -= step
    assert skipped.read_bits(read) == consumed.read_bits(read)


def test_skip_bit_equals_read_bit():
    skipped = BitStream(DATA)
    consumed = BitStream(DATA)
    for _ in range(9):
        skipped.skip_bit()
        consumed.read_bit()
    assert skipped.read_bits(15) == consumed.read_bits(15)


def test_skip_whole_words_then_read():
    stream = BitStream(DATA)
    stream.skip_bits(32)
    assert stream.read_bits(8) == DATA[4]


def test_skip_past_end_raises():
    stream = BitStream(DATA)
    with pytest.raises(EndOfStreamError):
        stream.skip_bits(8 * len(DATA) + 1)


def test_byte_align_moves_to_next_byte():
    stream = BitStream(DATA)
    stream.read_bits(3)
    stream.byte_align()
    assert stream.read_bits(8) == DATA[1]


def test_byte_align_when_aligned_is_noop():
    stream = BitStream(DATA)
    stream.read_bits(8)
    stream.byte_align()
    assert stream.read_bits(8) == DATA[1]