from typing import List


class PriceBroadcast:
    """Record of one broadcast event, published after the aggregator has pushed a price signal to its customers"""

    def __init__(self, aggregator_id, tick: int, valid_from: int, signal: List[float], receivers: List[int]):
        self.aggregator_id = aggregator_id
        self.tick = tick
        self.valid_from = valid_from
        self.signal = signal
        self.receivers = receivers

    def to_dict(self):
        return {
            'aggregator_id': self.aggregator_id,
            'tick': self.tick,
            'valid_from': self.valid_from,
            'signal': self.signal,
            'receivers': self.receivers,
        }
