"""
Fixed length, tick indexed sequence of values. Used for price, demand and cost signals alike. All indexing wraps around
the length of the buffer, so slot `i % length` holds the value that applies at absolute tick `i`.
"""
import numpy as np

from model.errors import BufferLengthViolation


def _check_length(length) -> int:
    if length is None or int(length) <= 0:
        raise BufferLengthViolation("signal buffer length must be positive, got {}".format(length))
    return int(length)


class SignalBuffer:
    def __init__(self, length: int, fill: float = 0.0):
        self.length = _check_length(length)
        self.values = np.full(self.length, fill, dtype=np.float64)

    @staticmethod
    def from_values(values) -> "SignalBuffer":
        values = np.array(values, dtype=np.float64).flatten()
        buffer = SignalBuffer(len(values))
        buffer.values[:] = values
        return buffer

    def get(self, tick: int) -> float:
        return float(self.values[int(tick) % self.length])

    def set(self, tick: int, value: float):
        self.values[int(tick) % self.length] = value

    def fill_constant(self, value: float):
        self.values.fill(value)

    def resize(self, new_length: int):
        """reallocates the buffer. Old contents are discarded"""
        self.length = _check_length(new_length)
        self.values = np.zeros(self.length, dtype=np.float64)

    def equals_contents(self, other: "SignalBuffer") -> bool:
        if other is None or other.length != self.length:
            return False
        return bool(np.array_equal(self.values, other.values))

    def copy(self) -> "SignalBuffer":
        return SignalBuffer.from_values(self.values)

    def __len__(self):
        return self.length

    def __getitem__(self, tick):
        return self.get(tick)

    def __setitem__(self, tick, value):
        self.set(tick, value)

    def __iter__(self):
        return iter(self.values.tolist())

    def __repr__(self):
        return "SignalBuffer({})".format(self.values.tolist())
