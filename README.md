# tvhkit

`tvhkit` parses ADTS-framed AAC audio far enough to find Radio Data System
(RDS) payloads carried in Data Stream Elements. It also predicts which
channel a viewer will tune to next when zapping up or down.

The AAC side is a structural parser, not an audio decoder. It walks every
syntax element in a frame, including the Huffman-coded spectral data, so
that it stays in step with the bitstream, and discards what it reads.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Extracting RDS data from AAC frames

Create one `RDSBuffer` and reuse it for the whole stream. An RDS package
may be split over several data stream elements and frames; the buffer
collects the pieces until a package is complete.

```python
from tvhkit.decoder import Decoder
from tvhkit.elements import RDSBuffer

rds = RDSBuffer()

for frame in adts_frames:          # each item is one complete ADTS frame as bytes
    payload = Decoder(frame, rds).decode_rds()
    if payload:
        handle_rds(payload)        # starts with 0xFE and ends with 0xFF
```

`decode_rds()` returns `b""` when the frame completes no package. If no
buffer is passed, the decoder uses a fresh one of its own.
`Decoder.decode_frame()` walks a frame without collecting RDS data. After
either call, `Decoder.profile` and `Decoder.sample_frequency_index` hold
the values from the ADTS header, or from a program config element if the
frame carried one.

The element parsers are available on their own in `tvhkit.elements`
(`decode_sce`, `decode_cpe`, `decode_cce`, `decode_lfe`, `decode_dse`,
`decode_fil`, `decode_pce`), as are the individual channel stream parser
(`tvhkit.ics.ICS`, `tvhkit.ics.ICSInfo`) and the Huffman decoding functions
(`tvhkit.huffman.decode_scale_factor`, `tvhkit.huffman.decode_spectral_data`).
Profiles and sampling frequency indices are enumerated in
`tvhkit.constants.Profile` and `tvhkit.constants.SampleFrequency`.

### Errors

Malformed input raises `tvhkit.bitstream.AACDecodeError`. Examples are a
bad ADTS syncword, a frame length that does not match the data, or an
invalid codebook. Reading past the end of a frame raises
`tvhkit.bitstream.EndOfStreamError`, a subclass of `AACDecodeError`.
Channel elements decoded with an unknown sampling frequency
(`SampleFrequency.NONE`) raise `ValueError`.

## Reading bits directly

```python
from tvhkit.bitstream import BitStream

stream = BitStream(b"\xff\xf1\x50\x80")
stream.read_bits(12)   # 0xFFF
stream.read_bool()     # False
stream.skip_bits(3)
stream.bits_left()
stream.byte_align()
```

`read_bits` reads at most 32 bits at a time and raises `ValueError` for
more.

## Predictive tuning

`ChannelTuningPredictor` keeps channels sorted by channel number (with an
optional minor number). Given the channel being left and the channel being
tuned to, it guesses the next channel worth tuning in advance.

```python
from tvhkit.tuning import Channel, ChannelTuningPredictor

predictor = ChannelTuningPredictor()
predictor.add_channel(Channel(id=10, number=1))
predictor.add_channel(Channel(id=20, number=2))
predictor.add_channel(Channel(id=30, number=3))

predictor.predict_next_channel_id(10, 20)   # zapping up   -> 30
predictor.predict_next_channel_id(30, 20)   # zapping down -> 10
```

If no prediction can be made, `predict_next_channel_id` returns `None`.
Channels can be changed with `update_channel` and removed with
`remove_channel`. Channel numbers are unique: adding a channel whose
number is already present has no effect.

## What this package does not do

- It produces no PCM audio; spectral data is read and thrown away.
- It does not split a byte stream into ADTS frames; each `Decoder` needs
  exactly one whole frame.
- It does not connect to any streaming server or tune anything itself; the
  tuning predictor only works on the channels it is given.