"""
environment module of the simulation. This holds the clock every agent reads "now" from and the relationship graph
that links aggregators to their customers.
"""
import logging

import util.config as cfg
from env.relationships import RelationshipGraph

log = logging.getLogger(__name__)

_env = None


def get_instance() -> "Environment":
    """manage environment as singleton for the CLI. Agents get their environment passed in"""
    global _env
    if _env is None:
        _env = Environment()
    return _env


def reset_instance(ticks_per_day=None) -> "Environment":
    global _env
    _env = Environment(ticks_per_day)
    return _env


class Environment():
    def __init__(self, ticks_per_day=None, first_tick=0, relationships=None):
        self.ticks_per_day    = int(ticks_per_day if ticks_per_day is not None else cfg.TICKS_PER_DAY)
        if self.ticks_per_day <= 0:
            raise ValueError("ticks per day must be positive")
        self.first_tick       = first_tick
        self.current_tick     = first_tick
        self.relationships    = relationships if relationships is not None else RelationshipGraph()

    @property
    def time_of_day(self) -> int:
        return int(self.current_tick) % self.ticks_per_day

    def is_period_start(self) -> bool:
        return self.time_of_day == 0

    def advance(self):
        self.current_tick += 1
        return self.current_tick
