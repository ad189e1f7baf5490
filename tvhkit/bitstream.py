"""Big-endian bit reader used by the AAC frame parser."""


class AACDecodeError(Exception):
    """Raised when an AAC frame cannot be parsed."""


class EndOfStreamError(AACDecodeError):
    """Raised when reading beyond the end of the data."""


def _mask(n):
    return (1 << n) - 1


class BitStream:
    """Reads bits most-significant first, caching 32 bits at a time.

    Near the end of the data a short cache is padded with zero bits, so a
    final partial word may yield up to 24 trailing zero bits before
    :class:`EndOfStreamError` is raised.
    """

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0
        self._cache = 0
        self._bits_cached = 0

    def __len__(self):
        return len(self._data)

    def bits_left(self):
        """Return the number of bits not yet consumed, counting cached padding."""
        return 8 * (len(self._data) - self._pos) + self._bits_cached

    def _read_cache(self):
        if self._pos == len(self._data):
            raise EndOfStreamError("attempt to read past end of stream")
        chunk = self._data[self._pos:self._pos + 4]
        self._pos += len(chunk)
        return int.from_bytes(chunk.ljust(4, b"\x00"), "big")

    def read_bit(self):
        """Read a single bit and return it as 0 or 1."""
        if self._bits_cached > 0:
            self._bits_cached -= 1
        else:
            self._cache = self._read_cache()
            self._bits_cached = 31
        return (self._cache >> self._bits_cached) & 0x1

    def read_bits(self, n):
        """Read ``n`` bits (at most 32) as an unsigned integer."""
        if n > 32:
            raise ValueError("attempt to read more than 32 bits")
        if n < 0:
            raise ValueError("bit count must not be negative")

        if self._bits_cached >= n:
            self._bits_cached -= n
            return (self._cache >> self._bits_cached) & _mask(n)

        high = self._cache & _mask(self._bits_cached)
        left = n - self._bits_cached
        self._cache = self._read_cache()
        self._bits_cached = 32 - left
        return ((self._cache >> self._bits_cached) & _mask(left)) | (high << left)

    def read_bool(self):
        """Read a single bit as a boolean."""
        return self.read_bit() == 1

    def skip_bit(self):
        """Discard a single bit."""
        if self._bits_cached > 0:
            self._bits_cached -= 1
        else:
            self._cache = self._read_cache()
            self._bits_cached = 31

    def skip_bits(self, n):
        """Discard ``n`` bits."""
        if n <= self._bits_cached:
            self._bits_cached -= n
            return

        n -= self._bits_cached
        while n >= 32:
            n -= 32
            self._read_cache()

        if n > 0:
            self._cache = self._read_cache()
            self._bits_cached = 32 - n
        else:
            self._cache = 0
            self._bits_cached = 0

    def byte_align(self):
        """Skip to the next byte boundary."""
        to_flush = self._bits_cached & 0x7
        if to_flush > 0:
            self.skip_bits(to_flush)