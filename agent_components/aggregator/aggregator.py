"""
The aggregator supplies the prosumers linked to it. Once per tick, after all of its customers have stepped, it sums up
their net demand, remembers it as the predicted demand for this time of day, reprices and, at the start of every
period, broadcasts the price signal to its customers.
"""
import logging
import warnings
from typing import List

from pydispatch import dispatcher

import util.config as cfg
from agent_components.aggregator.broadcast import assemble_broadcast
from agent_components.cognitive_agent import CognitiveAgent
from agent_components.pricing.policies import PricingPolicy, RoscoeAndAult
from agent_components.prosumer.prosumer import is_prosumer
from communication.pubsub import signals
from model.errors import ConfigurationWarning, RelationshipTypeMismatch, BufferLengthViolation
from model.price_broadcast import PriceBroadcast
from model.signal_buffer import SignalBuffer

log = logging.getLogger(__name__)


class AggregatorAgent(CognitiveAgent):
    base_name = cfg.AGENT_BASE_NAMES['aggregator']

    def __init__(self, env, id_allocator, base_demand, policy: PricingPolicy = None, name=None):
        super().__init__(env, id_allocator, name)
        self.ticks_per_day = env.ticks_per_day
        if base_demand is None or len(base_demand) == 0:
            raise BufferLengthViolation("base demand of an aggregator must not be empty")
        if len(base_demand) % self.ticks_per_day != 0:
            msg = ("base demand imported to aggregator not a whole number of days ({} ticks, {} per day). "
                   "May cause unexpected behaviour unless you intend to repeat the signal within a day").format(
                len(base_demand), self.ticks_per_day)
            log.warning(msg)
            warnings.warn(msg, ConfigurationWarning)

        self.policy = policy if policy is not None else RoscoeAndAult()
        self.overall_system_demand = SignalBuffer.from_values(base_demand)
        # start with a flat price signal, always new until the first broadcast
        self.price_signal = SignalBuffer(len(base_demand), fill=cfg.DEFAULT_PRICE)
        self.price_signal_changed = True
        # naive prediction: the base demand scaled down, later replaced by what was observed one period ago
        self.predicted_customer_demand = SignalBuffer(self.ticks_per_day)
        for j in range(self.ticks_per_day):
            self.predicted_customer_demand.set(j, self.overall_system_demand.get(j) / cfg.BASE_DEMAND_PREDICTION_DIVISOR)

    def current_price_signal(self) -> float:
        return self.price_signal.get(self.env.current_tick)

    def customers(self) -> List:
        """all prosumers linked to this aggregator. Fails on the first linked entity that is no prosumer"""
        linkages = self.env.relationships.out_edges(self)
        log.debug("Agent {} has {} links in economic network".format(self.agent_id, len(linkages)))
        for entity in linkages:
            if not is_prosumer(entity):
                raise RelationshipTypeMismatch(entity)
        return linkages

    def step(self):
        time = int(self.env.current_tick)
        time_of_day = time % self.ticks_per_day

        customers = self.customers()
        sum_demand = sum(c.net_demand for c in customers)
        self.net_demand = sum_demand
        dispatcher.send(signal=signals.AGG_DEMAND_AGGREGATED, sender=self, msg=(time, sum_demand))

        # predicted demand for the next period is the demand at this time today
        log.debug("Setting predicted demand at {} to {}".format(time_of_day, sum_demand))
        self.predicted_customer_demand.set(time_of_day, sum_demand)

        changed = self.policy.apply(self.price_signal, self.predicted_customer_demand, self.ticks_per_day,
                                    tick=time, net_demand=sum_demand)
        self.price_signal_changed = self.price_signal_changed or changed

        # broadcast the value signal each midnight
        if time_of_day == 0:
            self.broadcast_price_signal(customers, time, self.price_signal.length)
        return True

    def broadcast_price_signal(self, customers: List, time: int, broadcast_length: int):
        """Only prepares and transmits the price signal if it has changed since the last broadcast"""
        if not self.price_signal_changed:
            log.debug("price signal unchanged, skipping broadcast at {}".format(time))
            return None
        broadcast = assemble_broadcast(self.price_signal, time, broadcast_length)
        for c in customers:
            # each customer gets its own copy, valid from now
            c.receive_value_signal(broadcast.copy(), broadcast_length)
        self.price_signal_changed = False
        log.info("aggregator {} broadcast price signal to {} customers at tick {}".format(
            self.agent_id, len(customers), time))
        record = PriceBroadcast(self.agent_id, time, time, broadcast.values.tolist(),
                                [getattr(c, "agent_id", None) for c in customers])
        dispatcher.send(signal=signals.AGG_PRICE_BROADCAST, sender=self, msg=record)
        return broadcast

    def param_string_report(self) -> str:
        return "net_demand={} policy={} price_signal_changed={}".format(
            self.net_demand, self.policy, self.price_signal_changed)
