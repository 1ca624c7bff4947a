from typing import Dict, List

from communication.pubsub import signals
from communication.pubsub.SignalConsumer import SignalConsumer
from model.price_broadcast import PriceBroadcast


class AggregatorHistory(SignalConsumer):
    """Listens to the aggregator events and keeps the aggregated demand per tick and every broadcast that was sent"""

    def __init__(self):
        super().__init__()
        self.demand: Dict[int, float] = {}
        self.broadcasts: List[PriceBroadcast] = []

    def connections(self):
        return [(self.handle_demand_aggregated, signals.AGG_DEMAND_AGGREGATED),
                (self.handle_price_broadcast, signals.AGG_PRICE_BROADCAST)]

    def handle_demand_aggregated(self, sender, signal: str, msg):
        tick, demand = msg
        self.demand[tick] = demand

    def handle_price_broadcast(self, sender, signal: str, msg: PriceBroadcast):
        self.broadcasts.append(msg)

    def peak_demand(self) -> float:
        if not self.demand:
            return 0.0
        return max(self.demand.values())

    def summary(self) -> str:
        return "{} ticks, peak demand {:.4f}, {} broadcasts at ticks {}".format(
            len(self.demand), self.peak_demand(), len(self.broadcasts), [b.tick for b in self.broadcasts])
