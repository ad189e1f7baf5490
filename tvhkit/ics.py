"""Individual channel stream (ICS) parsing for AAC raw data blocks.

The parser walks the syntax to keep the bit stream in step; the decoded
spectral values themselves are discarded.
"""

from enum import IntEnum

from .bitstream import AACDecodeError
from .constants import Profile, SampleFrequency
from .huffman import (
    INTENSITY_HCB,
    INTENSITY_HCB2,
    NOISE_HCB,
    ZERO_HCB,
    decode_scale_factor,
    decode_spectral_data,
)


class WindowSequence(IntEnum):
    """Window sequence of an individual channel stream."""

    ONLY_LONG_SEQUENCE = 0
    LONG_START_SEQUENCE = 1
    EIGHT_SHORT_SEQUENCE = 2
    LONG_STOP_SEQUENCE = 3


_PRED_SFB_MAX = (33, 33, 38, 40, 40, 40, 41, 41, 37, 37, 37, 34)

_SWB_OFFSET_128_96 = (0, 4, 8, 12, 16, 20, 24, 32, 40, 48, 64, 92, 128)
_SWB_OFFSET_128_64 = (0, 4, 8, 12, 16, 20, 24, 32, 40, 48, 64, 92, 128)
_SWB_OFFSET_128_48 = (0, 4, 8, 12, 16, 20, 28, 36, 44, 56, 68, 80, 96, 112, 128)
_SWB_OFFSET_128_24 = (0, 4, 8, 12, 16, 20, 24, 28, 36, 44, 52, 64, 76, 92, 108, 128)
_SWB_OFFSET_128_16 = (0, 4, 8, 12, 16, 20, 24, 28, 32, 40, 48, 60, 72, 88, 108, 128)
_SWB_OFFSET_128_8 = (0, 4, 8, 12, 16, 20, 24, 28, 36, 44, 52, 60, 72, 88, 108, 128)

_SWB_OFFSET_128 = (
    _SWB_OFFSET_128_96, _SWB_OFFSET_128_96, _SWB_OFFSET_128_64,
    _SWB_OFFSET_128_48, _SWB_OFFSET_128_48, _SWB_OFFSET_128_48,
    _SWB_OFFSET_128_24, _SWB_OFFSET_128_24, _SWB_OFFSET_128_16,
    _SWB_OFFSET_128_16, _SWB_OFFSET_128_16, _SWB_OFFSET_128_8,
)

_SWB_OFFSET_1024_96 = (
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40,
    44, 48, 52, 56, 64, 72, 80, 88, 96, 108, 120,
    132, 144, 156, 172, 188, 212, 240, 276, 320, 384, 448,
    512, 576, 640, 704, 768, 832, 896, 960, 1024,
)

_SWB_OFFSET_1024_64 = (
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 64,
    72, 80, 88, 100, 112, 124, 140, 156, 172, 192, 216, 240, 268, 304, 344, 384,
    424, 464, 504, 544, 584, 624, 664, 704, 744, 784, 824, 864, 904, 944, 984, 1024,
)

_SWB_OFFSET_1024_48 = (
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 48, 56, 64, 72, 80, 88,
    96, 108, 120, 132, 144, 160, 176, 196, 216, 240, 264, 292, 320, 352, 384, 416, 448,
    480, 512, 544, 576, 608, 640, 672, 704, 736, 768, 800, 832, 864, 896, 928, 1024,
)

_SWB_OFFSET_1024_32 = (
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 48, 56, 64, 72, 80, 88, 96,
    108, 120, 132, 144, 160, 176, 196, 216, 240, 264, 292, 320, 352, 384, 416, 448, 480, 512,
    544, 576, 608, 640, 672, 704, 736, 768, 800, 832, 864, 896, 928, 960, 992, 1024,
)

_SWB_OFFSET_1024_24 = (
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 52, 60, 68, 76,
    84, 92, 100, 108, 116, 124, 136, 148, 160, 172, 188, 204, 220, 240, 260, 284,
    308, 336, 364, 396, 432, 468, 508, 552, 600, 652, 704, 768, 832, 896, 960, 1024,
)

_SWB_OFFSET_1024_16 = (
    0, 8, 16, 24, 32, 40, 48, 56, 64, 72, 80,
    88, 100, 112, 124, 136, 148, 160, 172, 184, 196, 212,
    228, 244, 260, 280, 300, 320, 344, 368, 396, 424, 456,
    492, 532, 572, 616, 664, 716, 772, 832, 896, 960, 1024,
)

_SWB_OFFSET_1024_8 = (
    0, 12, 24, 36, 48, 60, 72, 84, 96, 108, 120,
    132, 144, 156, 172, 188, 204, 220, 236, 252, 268, 288,
    308, 328, 348, 372, 396, 420, 448, 476, 508, 544, 580,
    620, 664, 712, 764, 820, 880, 944, 1024,
)

_SWB_OFFSET_1024 = (
    _SWB_OFFSET_1024_96, _SWB_OFFSET_1024_96, _SWB_OFFSET_1024_64, _SWB_OFFSET_1024_48,
    _SWB_OFFSET_1024_48, _SWB_OFFSET_1024_32, _SWB_OFFSET_1024_24, _SWB_OFFSET_1024_24,
    _SWB_OFFSET_1024_16, _SWB_OFFSET_1024_16, _SWB_OFFSET_1024_16, _SWB_OFFSET_1024_8,
)

_MAX_LTP_SFB = 40
_SF_DELTA = 60
_FIRST_PAIR_HCB = 5
_INVALID_SECTION_CODEBOOK = 12

# (ics window length, location bits of the first window, location bits of the others)
_GAIN_CONTROL_LAYOUT = {
    WindowSequence.ONLY_LONG_SEQUENCE: (1, 5, 5),
    WindowSequence.EIGHT_SHORT_SEQUENCE: (8, 2, 2),
    WindowSequence.LONG_START_SEQUENCE: (2, 4, 2),
    WindowSequence.LONG_STOP_SEQUENCE: (2, 4, 5),
}


def _check_sample_frequency(index):
    if index == SampleFrequency.NONE:
        raise ValueError("invalid sample frequency")
    if not 0 <= index < len(_SWB_OFFSET_1024):
        raise AACDecodeError(f"unsupported sample frequency index: {index}")


class ICSInfo:
    """Window layout of an individual channel stream."""

    def __init__(self):
        self.window_sequence = WindowSequence.ONLY_LONG_SEQUENCE
        self.max_sfb = 0
        self.window_group_count = 0
        self.window_group_lengths = [0] * 8
        self.swb_offsets = ()
        self.window_count = 0

    def copy_from(self, other):
        """Take over the window layout of another ICSInfo."""
        self.window_sequence = other.window_sequence
        self.max_sfb = other.max_sfb
        self.window_group_count = other.window_group_count
        self.window_group_lengths = list(other.window_group_lengths)
        self.swb_offsets = other.swb_offsets
        self.window_count = other.window_count

    def decode(self, common_window, stream, profile, sample_frequency_index):
        """Read the ICS info fields from ``stream``."""
        _check_sample_frequency(sample_frequency_index)

        stream.skip_bit()  # reserved
        self.window_sequence = WindowSequence(stream.read_bits(2))
        stream.skip_bit()  # window shape

        lengths = [1]
        if self.window_sequence == WindowSequence.EIGHT_SHORT_SEQUENCE:
            self.max_sfb = stream.read_bits(4)
            for _ in range(7):
                if stream.read_bool():
                    lengths[-1] += 1
                else:
                    lengths.append(1)
            self.window_count = 8
            self.swb_offsets = _SWB_OFFSET_128[sample_frequency_index]
        else:
            self.max_sfb = stream.read_bits(6)
            self.window_count = 1
            self.swb_offsets = _SWB_OFFSET_1024[sample_frequency_index]

        self.window_group_count = len(lengths)
        self.window_group_lengths = lengths + [0] * (8 - len(lengths))

        if self.window_sequence != WindowSequence.EIGHT_SHORT_SEQUENCE and stream.read_bool():
            self._decode_prediction_data(common_window, stream, profile, sample_frequency_index)

    def _decode_prediction_data(self, common_window, stream, profile, sample_frequency_index):
        if profile == Profile.AAC_MAIN:
            if stream.read_bool():
                stream.skip_bits(5)  # predictor reset group number
            stream.skip_bits(min(self.max_sfb, _PRED_SFB_MAX[sample_frequency_index]))
        elif profile == Profile.AAC_LTP:
            if stream.read_bool():
                self._decode_lt_prediction_data(stream)
            if common_window and stream.read_bool():
                self._decode_lt_prediction_data(stream)
        elif profile == Profile.ER_AAC_LTP:
            if not common_window and stream.read_bool():
                self._decode_lt_prediction_data(stream)
        else:
            raise AACDecodeError(f"unexpected profile for prediction data: {profile}")

    def _decode_lt_prediction_data(self, stream):
        stream.skip_bits(14)  # 11 bits lag, 3 bits coef
        if self.window_sequence == WindowSequence.EIGHT_SHORT_SEQUENCE:
            for _ in range(self.window_count):
                if stream.read_bool() and stream.read_bool():
                    stream.skip_bits(4)  # short lag
        else:
            stream.skip_bits(min(self.max_sfb, _MAX_LTP_SFB))


class ICS:
    """An individual channel stream: section, scale factor and spectral data."""

    def __init__(self):
        self.info = ICSInfo()
        self.sfb_cb = []
        self.section_ends = []

    @property
    def _is_short(self):
        return self.info.window_sequence == WindowSequence.EIGHT_SHORT_SEQUENCE

    def decode(self, common_window, stream, profile, sample_frequency_index):
        """Read one individual channel stream from ``stream``."""
        stream.skip_bits(8)  # global gain

        if not common_window:
            self.info.decode(common_window, stream, profile, sample_frequency_index)

        self._decode_section_data(stream)
        self._decode_scale_factor_data(stream)

        if stream.read_bool():
            if self._is_short:
                raise AACDecodeError("pulse data not allowed for short frames")
            self._decode_pulse_data(stream)

        if stream.read_bool():
            self._decode_tns_data(stream)

        if stream.read_bool():
            self._decode_gain_control_data(stream)

        self._decode_spectral_data(stream)

    def _decode_section_data(self, stream):
        bits = 3 if self._is_short else 5
        esc_val = (1 << bits) - 1
        max_sfb = self.info.max_sfb

        self.sfb_cb = []
        self.section_ends = []
        for _ in range(self.info.window_group_count):
            k = 0
            while k < max_sfb:
                end = k
                sect_cb = stream.read_bits(4)
                if sect_cb == _INVALID_SECTION_CODEBOOK:
                    raise AACDecodeError("invalid huffman codebook: 12")

                incr = stream.read_bits(bits)
                while incr == esc_val and stream.bits_left() >= bits:
                    end += incr
                    incr = stream.read_bits(bits)
                end += incr

                if stream.bits_left() < 0 or incr == esc_val:
                    raise AACDecodeError("section data past end of stream")
                if end > max_sfb:
                    raise AACDecodeError("too many scale factor bands")

                self.sfb_cb.extend([sect_cb] * (end - k))
                self.section_ends.extend([end] * (end - k))
                k = end

    def _decode_scale_factor_data(self, stream):
        noise_flag = True
        max_sfb = self.info.max_sfb

        idx = 0
        for _ in range(self.info.window_group_count):
            sfb = 0
            while sfb < max_sfb:
                end = self.section_ends[idx]
                codebook = self.sfb_cb[idx]
                count = end - sfb
                if codebook in (INTENSITY_HCB, INTENSITY_HCB2):
                    for _ in range(count):
                        if decode_scale_factor(stream) - _SF_DELTA > 255:
                            raise AACDecodeError("scale factor out of range")
                elif codebook == NOISE_HCB:
                    for _ in range(count):
                        if noise_flag:
                            stream.skip_bits(9)
                            noise_flag = False
                        else:
                            decode_scale_factor(stream)
                elif codebook != ZERO_HCB:
                    for _ in range(count):
                        decode_scale_factor(stream)
                sfb = end
                idx += count

    @staticmethod
    def _decode_pulse_data(stream):
        pulse_count = stream.read_bits(2)
        stream.skip_bits(6)  # pulse start sfb
        stream.skip_bits(9 * (pulse_count + 1))  # 5 bits offset, 4 bits amp each

    def _decode_tns_data(self, stream):
        n_filt_bits, length_bits, order_bits = (1, 4, 3) if self._is_short else (2, 6, 5)

        for _ in range(self.info.window_count):
            n_filt = stream.read_bits(n_filt_bits)
            if n_filt == 0:
                continue
            coef_res = stream.read_bit()
            for _ in range(n_filt):
                stream.skip_bits(length_bits)
                order = stream.read_bits(order_bits)
                if order != 0:
                    stream.skip_bit()  # direction
                    coef_compress = stream.read_bit()
                    stream.skip_bits(order * (coef_res + 3 - coef_compress))

    def _decode_gain_control_data(self, stream):
        max_band = stream.read_bits(2) + 1
        layout = _GAIN_CONTROL_LAYOUT.get(self.info.window_sequence)
        if layout is None:
            return
        wd_len, loc_bits, loc_bits2 = layout

        for _ in range(1, max_band):
            for wd in range(wd_len):
                length = stream.read_bits(3)
                for _ in range(length):
                    stream.skip_bits(4)
                    stream.skip_bits(loc_bits if wd == 0 else loc_bits2)

    def _decode_spectral_data(self, stream):
        offsets = self.info.swb_offsets
        max_sfb = self.info.max_sfb
        if max_sfb > 0 and max_sfb >= len(offsets):
            raise AACDecodeError("too many scale factor bands")

        codebooks = iter(self.sfb_cb)
        for group_len in self.info.window_group_lengths[: self.info.window_group_count]:
            for sfb in range(max_sfb):
                hcb = next(codebooks)
                if hcb in (ZERO_HCB, INTENSITY_HCB, INTENSITY_HCB2, NOISE_HCB):
                    continue
                width = offsets[sfb + 1] - offsets[sfb]
                step = 2 if hcb >= _FIRST_PAIR_HCB else 4
                for _ in range(group_len):
                    for _ in range(0, width, step):
                        decode_spectral_data(stream, hcb)