import unittest

from agent_components.aggregator.broadcast import assemble_broadcast
from model.signal_buffer import SignalBuffer


class TestAssembleBroadcast(unittest.TestCase):

    def test_window_matches_source(self):
        for length in [1, 2, 3, 7, 48]:
            source = SignalBuffer.from_values(range(length))
            for start in [0, 1, length - 1, length, 3 * length + 2, 1000]:
                for requested in [1, 2, length - 1 or 1, length, length + 1, 5 * length + 3]:
                    out = assemble_broadcast(source, start, requested)
                    assert out.length == requested
                    expected = [source.get(start + k) for k in range(requested)]
                    assert out.values.tolist() == expected, (length, start, requested)

    def test_literal_padding(self):
        source = SignalBuffer.from_values([1, 2, 3, 4])
        out = assemble_broadcast(source, 2, 9)
        assert out.values.tolist() == [3, 4, 1, 2, 3, 4, 1, 2, 3]

    def test_shorter_than_source(self):
        source = SignalBuffer.from_values([1, 2, 3, 4, 5, 6])
        assert assemble_broadcast(source, 1, 2).values.tolist() == [2, 3]

    def test_source_untouched(self):
        source = SignalBuffer.from_values([1, 2, 3])
        out = assemble_broadcast(source, 0, 3)
        out.set(0, 99)
        assert source.values.tolist() == [1, 2, 3]
