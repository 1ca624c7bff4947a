"""The main entrance file for the simulation. Here, commands and parameters can be defined according to the [click api](click.pocoo.org)"""
import logging
import logging.config
import os

import click
import numpy as np

import util.config as cfg
from agent_components.aggregator.aggregator import AggregatorAgent
from agent_components.aggregator.history import AggregatorHistory
from agent_components.pricing.policies import POLICIES, get_policy
from agent_components.prosumer.generator import GeneratorProsumer
from agent_components.prosumer.household import HouseholdProsumer
from communication import messages_cache
from env import environment
from env.scheduler import TickScheduler, LAST_PRIORITY
from util.id_generator import IdAllocator


@click.group()
@click.option('--log-target', multiple=True, type=click.Choice(['file']))
@click.option('--log-level', type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]))
def cli(log_target, log_level):
    """CLI interface for the tick based price signal simulation. One aggregator prices the demand of its prosumers and
    broadcasts a price signal to them at the start of every day."""
    configure_logging(log_target, log_level)


@cli.command()
@click.option('--ticks',         default=96,                 help="number of ticks to simulate")
@click.option('--households',    default=3,                  help="number of household prosumers")
@click.option('--generators',    default=1,                  help="number of generator prosumers")
@click.option('--ticks-per-day', default=cfg.TICKS_PER_DAY,  help="period length of the price signal")
@click.option('--policy',        default='roscoe-ault',      type=click.Choice(list(POLICIES)), help="pricing policy of the aggregator")
@click.option('--seed',          default=None, type=int,     help="seed for the stepping order and the demand profiles")
@click.option('--record',        is_flag=True,               help="log all published messages to the data folder")
def simulate(ticks, households, generators, ticks_per_day, policy, seed, record):
    """runs one aggregator with a population of prosumers and prints demand and price per tick"""
    messages_cache.subscribe(to_file=record)
    history = AggregatorHistory()
    history.subscribe()
    try:
        _, aggregator, scheduler = build_simulation(households, generators, ticks_per_day, policy, seed)
        for _ in range(ticks):
            tick = scheduler.tick()
            click.echo("{:>6} {:>12.4f} {:>10.4f}".format(tick, aggregator.net_demand,
                                                        aggregator.price_signal.get(tick)))
        click.echo(history.summary())
    finally:
        history.unsubscribe()
        messages_cache.unsubscribe()


def build_simulation(households, generators, ticks_per_day, policy, seed=None):
    env = environment.reset_instance(ticks_per_day)
    ids = IdAllocator()
    rng = np.random.RandomState(seed)
    scheduler = TickScheduler(env, seed)

    tod = np.arange(ticks_per_day) / ticks_per_day
    # evening peak household, midday peak generation
    household_shape = 0.3 + np.clip(np.sin(2 * np.pi * (tod - 0.5)), 0, None)
    generator_shape = np.clip(np.sin(2 * np.pi * (tod - 0.25)), 0, None)

    aggregator = AggregatorAgent(env, ids, household_shape * cfg.HOUSEHOLD_PEAK_KW * max(households, 1),
                                 policy=get_policy(policy))
    scheduler.register(aggregator, LAST_PRIORITY)

    for _ in range(households):
        profile = household_shape * cfg.HOUSEHOLD_PEAK_KW * rng.uniform(0.8, 1.2)
        h = HouseholdProsumer(env, ids, profile, elasticity=cfg.HOUSEHOLD_ELASTICITY,
                              has_smart_meter=True, exercises_behaviour_change=True)
        env.relationships.add_edge(aggregator, h)
        scheduler.register(h)
    for _ in range(generators):
        g = GeneratorProsumer(env, ids, cfg.GENERATOR_CAPACITY, generator_shape, has_smart_meter=True)
        env.relationships.add_edge(aggregator, g)
        scheduler.register(g)
    log.info("built simulation with {} households and {} generators".format(households, generators))
    return env, aggregator, scheduler


@cli.command()
def about():
    """just prints out some text"""
    print('''
This is a tick based simulation of an energy retail market. An aggregator observes the net demand of its prosumers,
prices it with one of several pricing policies and broadcasts the price signal to its customers every day.
    ''')
    log.info("about info sent")


log = logging.getLogger(__name__)


def configure_logging(log_target, log_level):
    cfg.LOG_LEVEL = log_level if log_level else cfg.LOG_LEVEL

    # making sure target folder exists
    if 'file' in log_target:
        os.makedirs(cfg.LOG_PATH, exist_ok=True)

    log_cfg = cfg.get_log_config()

    # applying logging targets
    for h in log_target:
        log_cfg['handlers'][h] = cfg.get_log_handlers()[h]
        log_cfg['loggers']['']['handlers'].append(h)

    # apply logging configuration
    logging.config.dictConfig(log_cfg)

    log.info("logger configured")
    log.debug(log_cfg)


if __name__ == '__main__':
    cli()
