"""
Caches every message that is published on the pubsub infrastructure until it is cleared. Optionally also writes them to
the file system as json lines, one file per signal, for later analysis.
"""
import datetime as dt
import json
import logging
import os

from pydispatch import dispatcher

import util.config as cfg

log = logging.getLogger(__name__)

caches = {}
file_handlers = {}
_path = None
_subscribed = False


def store_message(sender, signal, msg=None, tick=None):
    payload = msg if msg is not None else tick
    caches.setdefault(signal, []).append(payload)
    if _path is not None:
        log_message(signal, payload)


def get_cached(signal):
    return caches.get(signal, [])


def clear():
    caches.clear()

# ------
# hook into pubsub

def subscribe(to_file=False):
    global _path, _subscribed
    if _subscribed:
        return
    if to_file:
        _path = os.path.join(cfg.DATA_LOG_PATH, dt.datetime.now().strftime("%Y-%m-%d--%H-%M-%S"))
        log.info("logging messages to {}".format(_path))
    dispatcher.connect(store_message, signal=dispatcher.Any, sender=dispatcher.Any)
    _subscribed = True


def unsubscribe():
    global _path, _subscribed
    if _subscribed:
        dispatcher.disconnect(store_message, signal=dispatcher.Any, sender=dispatcher.Any)
        _subscribed = False
    _close_all_handlers()
    _path = None

# ------
# logging to file system for later analysis

def get_file_handler(signal):
    if signal not in file_handlers:
        os.makedirs(_path, exist_ok=True)
        file_handlers[signal] = open(os.path.join(_path, "{}.json".format(signal)), "a+", encoding="utf-8")
    return file_handlers[signal]


def log_message(signal, payload):
    if hasattr(payload, "to_dict"):
        payload = payload.to_dict()
    handler = get_file_handler(signal)
    handler.write(json.dumps(payload) + "\n")


def _close_all_handlers():
    for h in file_handlers.values():
        h.close()
    file_handlers.clear()
