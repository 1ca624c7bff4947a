"""
Discrete time scheduler. Steps every registered agent once per tick. Agents with normal priority run in a random order,
agents registered with `LAST_PRIORITY` run strictly afterwards, so an aggregator always sees the demand of all of its
customers for the current tick.
"""
import logging
import random

from pydispatch import dispatcher

from communication.pubsub import signals
from env.environment import Environment

log = logging.getLogger(__name__)

NORMAL_PRIORITY = 0
LAST_PRIORITY = 1


class TickScheduler:
    def __init__(self, env: Environment, seed=None):
        self.env = env
        self.random = random.Random(seed)
        self.agents = {NORMAL_PRIORITY: [], LAST_PRIORITY: []}

    def register(self, agent, priority=NORMAL_PRIORITY):
        if priority not in self.agents:
            raise ValueError("unknown priority {}".format(priority))
        self.agents[priority].append(agent)

    def step_order(self):
        """the order of the agents for the next tick. shuffled within each priority"""
        normal = list(self.agents[NORMAL_PRIORITY])
        last = list(self.agents[LAST_PRIORITY])
        self.random.shuffle(normal)
        self.random.shuffle(last)
        return normal + last

    def tick(self):
        """runs one complete tick. Any exception aborts the tick and is passed on to the caller"""
        now = self.env.current_tick
        dispatcher.send(signal=signals.TICK_START, sender=self, tick=now)
        for agent in self.step_order():
            agent.step()
        dispatcher.send(signal=signals.TICK_COMPLETE, sender=self, tick=now)
        self.env.advance()
        return now

    def run(self, ticks: int):
        log.info("running {} ticks starting at tick {}".format(ticks, self.env.current_tick))
        for _ in range(ticks):
            self.tick()
