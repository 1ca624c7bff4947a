"""
Prosumers can both consume and generate electricity. Everything an aggregator needs from them is the current net demand
and the ability to accept a cost signal, see `is_prosumer`.
"""
import logging

import numpy as np
from pydispatch import dispatcher

import util.config as cfg
from agent_components.cognitive_agent import CognitiveAgent
from communication.pubsub import signals
from model.errors import BufferLengthViolation
from model.signal_buffer import SignalBuffer

log = logging.getLogger(__name__)


def is_prosumer(entity) -> bool:
    """True if the entity exposes a net demand and accepts value signals"""
    return hasattr(entity, "net_demand") and callable(getattr(entity, "receive_value_signal", None))


class ProsumerAgent(CognitiveAgent):
    base_name = cfg.AGENT_BASE_NAMES['prosumer']

    def __init__(self, env, id_allocator, name=None,
                 has_smart_meter=False,
                 exercises_behaviour_change=False,
                 has_smart_control=False,
                 receives_cost_signal=False):
        super().__init__(env, id_allocator, name)
        # the agent can see "smart" information, without it no signal is stored
        self.has_smart_meter            = has_smart_meter
        # acts on "smart" information mediated by human input
        self.exercises_behaviour_change = exercises_behaviour_change
        # allows automatic control of its demand / generation
        self.has_smart_control          = has_smart_control
        self.receives_cost_signal       = receives_cost_signal

        self.predicted_cost_signal: SignalBuffer = None
        self.prediction_valid_time = 0

    @property
    def predicted_cost_signal_length(self) -> int:
        if self.predicted_cost_signal is None:
            return 0
        return self.predicted_cost_signal.length

    def current_prediction(self) -> float:
        """the predicted cost for the current tick or 0 if no signal was received yet"""
        if self.predicted_cost_signal is None:
            return 0.0
        since_valid = int(self.env.current_tick) - self.prediction_valid_time
        return self.predicted_cost_signal.get(since_valid)

    def receive_value_signal(self, signal, length: int, valid_time: int = None) -> bool:
        """
        Receives a centralised value signal and stores it in the prosumers memory, realigned so that local index 0
        refers to the current tick.

        :param signal: the cost signal, one member per tick. A SignalBuffer or a sequence of floats
        :param length: the number of valid members in the signal
        :param valid_time: the tick the signal is valid from. Defaults to now
        :return: False if the signal was already entirely elapsed, True otherwise
        """
        if not self.has_smart_meter:
            # cannot receive anything without a smart meter, which is not an error
            return True
        if length is None or length <= 0:
            raise BufferLengthViolation("value signal length must be positive, got {}".format(length))

        values = signal.values if isinstance(signal, SignalBuffer) else np.asarray(signal, dtype=np.float64)
        if len(values) < length:
            raise BufferLengthViolation("value signal holds {} members, {} were declared".format(len(values), length))
        values = values[:length]
        time = int(self.env.current_tick)
        if valid_time is None:
            valid_time = time
        offset = time - int(valid_time)
        new_length = length - offset

        if offset != 0:
            log.debug("Signal valid from time other than current time, offset {}".format(offset))
        if new_length <= 0:
            log.warning("{} dropped a signal valid from {} with length {}, it is over at {}".format(
                self, valid_time, length, time))
            return False

        if self.predicted_cost_signal is None or new_length != self.predicted_cost_signal.length:
            log.debug("Re-defining length of signal in agent {}".format(self.agent_id))
            if self.predicted_cost_signal is None:
                self.predicted_cost_signal = SignalBuffer(new_length)
            else:
                self.predicted_cost_signal.resize(new_length)

        if offset < 0:
            # signal projected into the future. the slots before it keep what was there before
            self.predicted_cost_signal.values[-offset:-offset + length] = values
        else:
            # valid from now or some point in the past. only the part that is still valid is kept
            self.predicted_cost_signal.values[0:new_length] = values[offset:length]
        self.prediction_valid_time = time

        log.debug("{} received value signal {}".format(self.agent_id, values.tolist()))
        dispatcher.send(signal=signals.PROSUMER_SIGNAL_RECEIVED, sender=self, msg=(self.agent_id, time))
        return True

    def param_string_report(self) -> str:
        return "net_demand={} smart_meter={} smart_control={} receives_cost_signal={} signal_length={}".format(
            self.net_demand, self.has_smart_meter, self.has_smart_control, self.receives_cost_signal,
            self.predicted_cost_signal_length)
