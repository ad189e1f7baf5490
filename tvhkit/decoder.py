"""ADTS frame parser whose purpose is extracting embedded RDS data."""

from enum import IntEnum

from .bitstream import AACDecodeError, BitStream
from .constants import Profile, SampleFrequency
from .elements import (
    RDSBuffer,
    decode_cce,
    decode_cpe,
    decode_dse,
    decode_fil,
    decode_lfe,
    decode_pce,
    decode_sce,
)

_ADTS_SYNCWORD = 0xFFF


class _Element(IntEnum):
    SCE = 0
    CPE = 1
    CCE = 2
    LFE = 3
    DSE = 4
    PCE = 5
    FIL = 6
    END = 7


class Decoder:
    """Parses one ADTS frame.

    RDS packages may span several frames, so the collecting buffer can be
    shared between decoders.
    """

    def __init__(self, data, rds_buffer=None):
        self._stream = BitStream(data)
        self._rds_buffer = rds_buffer if rds_buffer is not None else RDSBuffer()
        self.profile = Profile.UNKNOWN
        self.sample_frequency_index = SampleFrequency.NONE
        self._raw_data_block_count = 0
        self._rds_only = False
        self._rds_data = b""

    def decode_frame(self):
        """Parse the ADTS header and all raw data blocks of the frame."""
        self._decode_adts_header()
        for _ in range(self._raw_data_block_count):
            self._decode_raw_data_block()

    def decode_rds(self):
        """Parse the frame and return the RDS package it completes, or b""."""
        self._rds_only = True
        self.decode_frame()
        return self._rds_data

    def _decode_adts_header(self):
        stream = self._stream

        if stream.read_bits(12) != _ADTS_SYNCWORD:
            raise AACDecodeError("invalid ADTS syncword")

        stream.skip_bits(3)  # id, layer
        protection_absent = stream.read_bool()
        self.profile = stream.read_bits(2)
        self.sample_frequency_index = stream.read_bits(4)
        stream.skip_bits(6)  # private bit, channel configuration, copy, home

        stream.skip_bits(2)  # copyright id bit, copyright id start
        frame_length = stream.read_bits(13)
        if frame_length != len(stream):
            raise AACDecodeError("invalid ADTS frame length")

        stream.skip_bits(11)  # buffer fullness
        self._raw_data_block_count = stream.read_bits(2) + 1

        if not protection_absent:
            stream.skip_bits(16)  # CRC

    def _decode_raw_data_block(self):
        stream = self._stream
        while True:
            element = _Element(stream.read_bits(3))
            if element == _Element.END:
                break
            if element == _Element.SCE:
                decode_sce(stream, self.profile, self.sample_frequency_index)
            elif element == _Element.LFE:
                decode_lfe(stream, self.profile, self.sample_frequency_index)
            elif element == _Element.CPE:
                decode_cpe(stream, self.profile, self.sample_frequency_index)
            elif element == _Element.CCE:
                decode_cce(stream, self.profile, self.sample_frequency_index)
            elif element == _Element.DSE:
                if self._rds_only:
                    self._rds_data = self._rds_buffer.decode_dse(stream)
                else:
                    decode_dse(stream)
            elif element == _Element.PCE:
                config = decode_pce(stream)
                self.profile = config.profile
                self.sample_frequency_index = config.sample_frequency_index
            elif element == _Element.FIL:
                decode_fil(stream)
        stream.byte_align()