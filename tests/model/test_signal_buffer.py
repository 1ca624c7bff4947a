import unittest

from model.errors import BufferLengthViolation
from model.signal_buffer import SignalBuffer


class TestSignalBuffer(unittest.TestCase):

    def setUp(self):
        self.b = SignalBuffer.from_values([1, 2, 3, 4])

    def test_get_wraps(self):
        assert self.b.get(0) == 1
        assert self.b.get(5) == 2
        assert self.b.get(103) == 4
        assert self.b.get(-1) == 4

    def test_set_wraps(self):
        self.b.set(6, 42)
        assert self.b.values.tolist() == [1, 2, 42, 4]
        self.b[9] = 7
        assert self.b[1] == 7

    def test_fill_constant(self):
        self.b.fill_constant(12.5)
        assert list(self.b) == [12.5] * 4

    def test_resize_discards(self):
        self.b.resize(6)
        assert self.b.length == 6
        assert len(self.b) == 6
        assert list(self.b) == [0.0] * 6

    def test_equals_contents(self):
        other = SignalBuffer.from_values([1, 2, 3, 4])
        assert self.b.equals_contents(other)
        other.set(0, 0)
        assert not self.b.equals_contents(other)
        assert not self.b.equals_contents(SignalBuffer.from_values([1, 2, 3]))
        assert not self.b.equals_contents(None)

    def test_copy_is_independent(self):
        c = self.b.copy()
        c.set(0, 99)
        assert self.b.get(0) == 1

    def test_non_positive_length(self):
        with self.assertRaises(BufferLengthViolation):
            SignalBuffer(0)
        with self.assertRaises(BufferLengthViolation):
            SignalBuffer(-3)
        with self.assertRaises(BufferLengthViolation):
            self.b.resize(0)
        with self.assertRaises(BufferLengthViolation):
            SignalBuffer.from_values([])
        # a length violation is a value error
        with self.assertRaises(ValueError):
            SignalBuffer(0)
