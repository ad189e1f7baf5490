"""Predicts which channel will be tuned next after a normal zap."""

import bisect
from dataclasses import dataclass


@dataclass(frozen=True)
class Channel:
    """The parts of a channel needed for tuning prediction."""

    id: int
    number: int
    minor_number: int = 0


@dataclass(frozen=True, order=True)
class ChannelNumber:
    """A channel number with its sub-channel number; ordered lexicographically."""

    channel: int = 0
    subchannel: int = 0


class ChannelTuningPredictor:
    """Keeps channels sorted by number and predicts the next channel to tune.

    Channel numbers are unique: adding a channel whose number is already
    present has no effect.
    """

    def __init__(self):
        self._numbers = []
        self._ids = []

    @staticmethod
    def _number_of(channel):
        return ChannelNumber(channel.number, channel.minor_number)

    def _insert(self, channel):
        number = self._number_of(channel)
        pos = bisect.bisect_left(self._numbers, number)
        if pos < len(self._numbers) and self._numbers[pos] == number:
            return
        self._numbers.insert(pos, number)
        self._ids.insert(pos, channel.id)

    def _erase_number(self, number):
        pos = bisect.bisect_left(self._numbers, number)
        if pos < len(self._numbers) and self._numbers[pos] == number:
            del self._numbers[pos]
            del self._ids[pos]

    def _index_of(self, channel_id):
        try:
            return self._ids.index(channel_id)
        except ValueError:
            return None

    def add_channel(self, channel):
        """Add a channel."""
        self._insert(channel)

    def update_channel(self, old_channel, new_channel):
        """Replace the entry holding the old channel's number with the new channel."""
        self._erase_number(self._number_of(old_channel))
        self._insert(new_channel)

    def remove_channel(self, channel_id):
        """Remove the channel with the given ID, if present."""
        pos = self._index_of(channel_id)
        if pos is not None:
            del self._numbers[pos]
            del self._ids[pos]

    def predict_next_channel_id(self, tuning_from, tuning_to):
        """Return the ID of the channel likely to be tuned next, or None."""
        if not self._ids:
            return None

        from_pos = self._index_of(tuning_from)
        to_pos = self._index_of(tuning_to)
        if to_pos is None:
            return None

        if from_pos is None or from_pos + 1 == to_pos or to_pos == 0:
            predicted = to_pos + 1
        elif from_pos - 1 == to_pos:
            predicted = to_pos - 1
        else:
            return None

        if 0 <= predicted < len(self._ids):
            return self._ids[predicted]
        return None