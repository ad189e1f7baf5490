"""Syntactic elements of an AAC raw data block.

Audio elements are parsed only to keep the bit stream in step; data stream
elements can be collected into RDS packages.
"""

from dataclasses import dataclass

from .bitstream import AACDecodeError
from .constants import SampleFrequency
from .huffman import ZERO_HCB, decode_scale_factor
from .ics import ICS

_RDS_BUFFER_SIZE = 65536
_RDS_START = 0xFE
_RDS_END = 0xFF

_MS_MASK_USED = 1


@dataclass(frozen=True)
class ProgramConfig:
    """Profile and sampling frequency index announced by a program config element."""

    profile: int
    sample_frequency_index: int


def _read_data_stream_header(stream):
    """Read the header of a data stream element and return its byte count."""
    stream.skip_bits(4)  # element id
    byte_align = stream.read_bool()
    count = stream.read_bits(8)
    if count == 255:
        count += stream.read_bits(8)
    if byte_align:
        stream.byte_align()
    return count


class RDSBuffer:
    """Collects RDS bytes carried in data stream elements across frames.

    A package starts with 0xFE and ends with 0xFF; it may be spread over
    several data stream elements.
    """

    def __init__(self):
        self._data = bytearray()

    def reset(self):
        """Drop any partially collected package."""
        self._data.clear()

    def decode_dse(self, stream):
        """Read a data stream element and return a completed RDS package, or b""."""
        count = _read_data_stream_header(stream)

        if count > _RDS_BUFFER_SIZE:
            stream.skip_bits(8 * count)
            self.reset()
            return b""

        if len(self._data) + count > _RDS_BUFFER_SIZE:
            self.reset()

        try:
            chunk = bytes(stream.read_bits(8) for _ in range(count))
        except AACDecodeError:
            self.reset()
            raise
        self._data += chunk

        if self._data and self._data[-1] == _RDS_END:
            package = bytes(self._data) if self._data[0] == _RDS_START else b""
            self.reset()
            return package
        return b""


def decode_sce(stream, profile, sample_frequency_index):
    """Read a single channel element."""
    stream.skip_bits(4)  # element id
    ICS().decode(False, stream, profile, sample_frequency_index)


def decode_lfe(stream, profile, sample_frequency_index):
    """Read a low frequency enhancement channel element."""
    stream.skip_bits(4)  # element id
    ICS().decode(False, stream, profile, sample_frequency_index)


def decode_cpe(stream, profile, sample_frequency_index):
    """Read a channel pair element."""
    if sample_frequency_index == SampleFrequency.NONE:
        raise ValueError("invalid sample frequency")

    stream.skip_bits(4)  # element id

    left = ICS()
    right = ICS()

    common_window = stream.read_bool()
    if common_window:
        left.info.decode(False, stream, profile, sample_frequency_index)
        right.info.copy_from(left.info)

        ms_mask_present = stream.read_bits(2)
        if ms_mask_present == _MS_MASK_USED:
            stream.skip_bits(left.info.window_group_count * left.info.max_sfb)

    left.decode(common_window, stream, profile, sample_frequency_index)
    right.decode(common_window, stream, profile, sample_frequency_index)


def decode_cce(stream, profile, sample_frequency_index):
    """Read a coupling channel element."""
    stream.skip_bits(4)  # element id

    coupling_point = 2 * stream.read_bit()  # ind sw cce flag
    coupled_count = stream.read_bits(3)

    gain_count = 0
    for _ in range(coupled_count + 1):
        gain_count += 1
        channel_pair = stream.read_bool()
        stream.skip_bits(4)  # target is cpe, tag select
        if channel_pair and stream.read_bits(2) == 3:
            gain_count += 1

    coupling_point += stream.read_bit()  # cc domain
    coupling_point |= coupling_point >> 1

    stream.skip_bits(3)  # gain element sign, gain element scale

    ics = ICS()
    ics.decode(False, stream, profile, sample_frequency_index)

    group_count = ics.info.window_group_count
    first_group_codebooks = ics.sfb_cb[: ics.info.max_sfb]

    for i in range(gain_count):
        cge = 1
        if i > 0:
            cge = 1 if coupling_point == 2 else stream.read_bit()
            if cge != 0:
                decode_scale_factor(stream)

        if coupling_point != 2:
            for _ in range(group_count):
                for codebook in first_group_codebooks:
                    if codebook != ZERO_HCB and cge == 0:
                        decode_scale_factor(stream)


def decode_dse(stream):
    """Read and discard a data stream element."""
    count = _read_data_stream_header(stream)
    stream.skip_bits(8 * count)


def decode_fil(stream):
    """Read and discard a fill element."""
    count = stream.read_bits(4)
    if count == 15:
        count += stream.read_bits(8) - 1
    if count > 0:
        stream.skip_bits(8 * count)


def decode_pce(stream):
    """Read a program config element and return its profile and frequency index."""
    stream.skip_bits(4)  # element id

    profile = stream.read_bits(2)
    sample_frequency_index = stream.read_bits(4)

    front = stream.read_bits(4)
    side = stream.read_bits(4)
    back = stream.read_bits(4)
    lfe = stream.read_bits(2)
    assoc_data = stream.read_bits(3)
    valid_cc = stream.read_bits(4)

    if stream.read_bool():  # mono mixdown
        stream.skip_bits(4)
    if stream.read_bool():  # stereo mixdown
        stream.skip_bits(4)
    if stream.read_bool():  # matrix mixdown idx, pseudo surround enable
        stream.skip_bits(3)

    stream.skip_bits(5 * front + 5 * side + 5 * back + 4 * lfe + 4 * assoc_data + 5 * valid_cc)

    stream.byte_align()

    comment_bytes = stream.read_bits(8)
    stream.skip_bits(8 * comment_bytes)

    return ProgramConfig(profile, sample_frequency_index)