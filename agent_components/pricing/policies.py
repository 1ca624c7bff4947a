"""
Pricing policies of the aggregator. Each policy computes a complete new price signal from the predicted customer demand
of one period. The aggregator applies it to its price signal and learns whether anything changed, which decides whether
the next broadcast is necessary.

Prices are in £/MWh, predicted demand in the units the prosumers report.
"""
import logging

import numpy as np

import util.config as cfg
from model.signal_buffer import SignalBuffer

log = logging.getLogger(__name__)


class PricingPolicy:
    """Interface of a pricing policy. Implement `price`, the rest is shared"""
    name = None

    def price(self, previous: np.ndarray, predicted_demand: SignalBuffer, ticks_per_day: int, tick: int = 0,
              net_demand: float = 0.0) -> np.ndarray:
        """
        Calculates new price values. Must not alter `previous` and must return an array of the same length
        :param previous: the values of the current price signal
        :param predicted_demand: predicted demand per time of day
        :param ticks_per_day: period length
        :param tick: current absolute tick
        :param net_demand: aggregated demand observed in this tick
        """
        raise NotImplementedError

    def apply(self, price_signal: SignalBuffer, predicted_demand: SignalBuffer, ticks_per_day: int, tick: int = 0,
              net_demand: float = 0.0) -> bool:
        """Rewrites the contents of `price_signal` and returns True if the new signal differs from the old one"""
        new_values = self.price(price_signal.values, predicted_demand, ticks_per_day, tick=tick, net_demand=net_demand)
        changed = self.has_changed(price_signal, SignalBuffer.from_values(new_values))
        price_signal.values[:] = new_values
        return changed

    def has_changed(self, old: SignalBuffer, new: SignalBuffer) -> bool:
        return not old.equals_contents(new)

    def __repr__(self):
        return "{}()".format(type(self).__name__)


class FlatRate(PricingPolicy):
    name = "flat"

    def __init__(self, price=cfg.DEFAULT_PRICE):
        self.flat_price = price

    def price(self, previous, predicted_demand, ticks_per_day, tick=0, net_demand=0.0):
        prices = SignalBuffer(len(previous))
        prices.fill_constant(self.flat_price)
        return prices.values


def economy_seven_boundaries(ticks_per_day: int):
    """the indices within a period where the high tariff starts and where it ends"""
    morning = int(ticks_per_day * cfg.ECONOMY_SEVEN_MORNING / 24)
    evening = int(ticks_per_day * cfg.ECONOMY_SEVEN_EVENING / 24)
    return morning, evening


class EconomySeven(PricingPolicy):
    """Two tier time of use tariff. Cheap at night, expensive during the day"""
    name = "economy7"

    def __init__(self, high_price=cfg.ECONOMY_SEVEN_HIGH, low_price=cfg.ECONOMY_SEVEN_LOW):
        self.high_price = high_price
        self.low_price = low_price

    def price(self, previous, predicted_demand, ticks_per_day, tick=0, net_demand=0.0):
        morning, evening = economy_seven_boundaries(ticks_per_day)
        prices = np.full(len(previous), self.low_price, dtype=np.float64)
        prices[morning:evening] = self.high_price
        return prices


class RoscoeAndAult(PricingPolicy):
    """
    Exponential price curve based on how much of the spare generation capacity the predicted demand takes up.
    price = A * exp(B * x) + C, capped at the system buy price. Always reports a change, the curve almost never
    reproduces the exact same floats.
    """
    name = "roscoe-ault"

    def __init__(self, A=cfg.ROSCOE_AULT_A, B=cfg.ROSCOE_AULT_B, C=cfg.ROSCOE_AULT_C,
                 max_supply_capacity=cfg.MAX_SUPPLY_CAPACITY_GWATTS,
                 max_generator_capacity=cfg.MAX_GENERATOR_CAPACITY_GWATTS,
                 price_cap=cfg.MAX_SYSTEM_BUY_PRICE_PNDSPERMWH):
        self.A = A
        self.B = B
        self.C = C
        self.margin = max_supply_capacity - max_generator_capacity
        if self.margin == 0:
            raise ValueError("supply capacity must differ from generator capacity")
        self.price_cap = price_cap

    def price(self, previous, predicted_demand, ticks_per_day, tick=0, net_demand=0.0):
        ticks = np.arange(len(previous))
        demand = np.array([predicted_demand.get(i % ticks_per_day) for i in ticks])
        # division by 10 converts predicted demand into units compatible with capacities in GW
        x = (demand / 10) / self.margin
        with np.errstate(over='ignore', invalid='ignore'):
            prices = self.A * np.exp(self.B * x) + self.C
        prices = np.where(np.isnan(prices), self.price_cap, prices)
        prices = np.minimum(prices, self.price_cap)
        if log.isEnabledFor(logging.DEBUG):
            for i, p in enumerate(prices):
                log.debug("Price at tick {} is {}".format(i, p))
        return prices

    def has_changed(self, old, new):
        return True


class OverCapacityScaling(PricingPolicy):
    """
    Scales the price of the current slot (and the same slot one period later) when the observed demand lies above the
    predicted instantaneous demand. The prediction is zero, the customer base is expected to be self-sufficient.
    """
    name = "over-capacity"

    def __init__(self, predicted_instantaneous_demand=0.0, scale=cfg.OVER_CAPACITY_SCALE):
        self.predicted_instantaneous_demand = predicted_instantaneous_demand
        self.scale = scale

    def price(self, previous, predicted_demand, ticks_per_day, tick=0, net_demand=0.0):
        prices = np.array(previous, dtype=np.float64)
        excess = net_demand - self.predicted_instantaneous_demand
        if excess <= 0:
            return prices
        factor = self.scale - np.exp(-excess)
        slot = int(tick) % len(prices)
        prices[slot] *= factor
        # it was high today, so moderate tomorrow
        if len(prices) > slot + ticks_per_day:
            prices[slot + ticks_per_day] *= factor
        return prices


POLICIES = {p.name: p for p in [FlatRate, EconomySeven, RoscoeAndAult, OverCapacityScaling]}


def get_policy(name: str, **kwargs) -> PricingPolicy:
    """looks up a policy by its CLI name and instantiates it"""
    if name not in POLICIES:
        raise ValueError("unknown pricing policy {}. Choose one of {}".format(name, list(POLICIES)))
    return POLICIES[name](**kwargs)
