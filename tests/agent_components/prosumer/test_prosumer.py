import unittest
from unittest.mock import Mock

from pydispatch import dispatcher

from agent_components.prosumer.prosumer import ProsumerAgent, is_prosumer
from communication.pubsub import signals
from env.environment import Environment
from model.errors import BufferLengthViolation
from model.signal_buffer import SignalBuffer
from util.id_generator import IdAllocator

SIGNAL = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


class TestReceiveValueSignal(unittest.TestCase):

    def setUp(self):
        self.env = Environment(ticks_per_day=10, first_tick=100)
        self.p = ProsumerAgent(self.env, IdAllocator(), has_smart_meter=True)

    def test_offset_zero(self):
        assert self.p.receive_value_signal(SignalBuffer.from_values(SIGNAL), 10, 100)
        assert self.p.predicted_cost_signal.values.tolist() == SIGNAL
        assert self.p.predicted_cost_signal_length == 10

    def test_default_valid_time_is_now(self):
        assert self.p.receive_value_signal(SIGNAL, 10)
        assert self.p.predicted_cost_signal.values.tolist() == SIGNAL
        assert self.p.prediction_valid_time == 100

    def test_positive_offset_drops_elapsed(self):
        self.env.current_tick = 103
        assert self.p.receive_value_signal(SignalBuffer.from_values(SIGNAL), 10, 100)
        assert self.p.predicted_cost_signal.values.tolist() == [4, 5, 6, 7, 8, 9, 10]
        assert self.p.predicted_cost_signal_length == 7

    def test_negative_offset_inserts_at_offset(self):
        self.env.current_tick = 97
        assert self.p.receive_value_signal(SignalBuffer.from_values(SIGNAL), 10, 100)
        assert self.p.predicted_cost_signal_length == 13
        assert self.p.predicted_cost_signal.values.tolist() == [0, 0, 0] + SIGNAL

    def test_negative_offset_keeps_stale_padding(self):
        self.env.current_tick = 97
        self.p.predicted_cost_signal = SignalBuffer(13, fill=50)
        self.p.receive_value_signal(SIGNAL, 10, 100)
        assert self.p.predicted_cost_signal.values.tolist() == [50, 50, 50] + SIGNAL

    def test_idempotent(self):
        self.p.receive_value_signal(SIGNAL, 10, 98)
        once = self.p.predicted_cost_signal.values.tolist()
        self.p.receive_value_signal(SIGNAL, 10, 98)
        assert self.p.predicted_cost_signal.values.tolist() == once
        assert self.p.predicted_cost_signal_length == 8

    def test_reallocates_on_new_length(self):
        self.p.receive_value_signal(SIGNAL, 10)
        first = self.p.predicted_cost_signal
        self.p.receive_value_signal(SIGNAL, 10)
        assert self.p.predicted_cost_signal is first
        self.p.receive_value_signal([1, 2, 3], 3)
        assert self.p.predicted_cost_signal_length == 3
        assert self.p.predicted_cost_signal.values.tolist() == [1, 2, 3]

    def test_short_signal_rejected_before_storing(self):
        self.p.receive_value_signal(SIGNAL, 10)
        with self.assertRaises(BufferLengthViolation):
            self.p.receive_value_signal([1, 2, 3], 5)
        assert self.p.predicted_cost_signal_length == 10
        assert self.p.predicted_cost_signal.values.tolist() == SIGNAL

    def test_short_future_signal_rejected(self):
        self.p.receive_value_signal(SIGNAL, 10)
        with self.assertRaises(BufferLengthViolation):
            self.p.receive_value_signal(SignalBuffer.from_values([1, 2]), 4, 102)
        assert self.p.predicted_cost_signal.values.tolist() == SIGNAL


    def test_elapsed_signal_rejected(self):
        self.p.receive_value_signal([7, 7], 2)
        self.env.current_tick = 110
        assert not self.p.receive_value_signal(SIGNAL, 10, 100)
        assert self.p.predicted_cost_signal.values.tolist() == [7, 7]

    def test_without_smart_meter_noop(self):
        dumb = ProsumerAgent(self.env, IdAllocator())
        assert dumb.receive_value_signal(SIGNAL, 10)
        assert dumb.predicted_cost_signal is None
        assert dumb.predicted_cost_signal_length == 0

    def test_invalid_length(self):
        with self.assertRaises(BufferLengthViolation):
            self.p.receive_value_signal(SIGNAL, 0)

    def test_publishes_receipt(self):
        listener = Mock()
        dispatcher.connect(listener, signal=signals.PROSUMER_SIGNAL_RECEIVED)
        try:
            self.p.receive_value_signal(SIGNAL, 10)
        finally:
            dispatcher.disconnect(listener, signal=signals.PROSUMER_SIGNAL_RECEIVED)
        assert listener.call_args[1]['msg'] == (self.p.agent_id, 100)


class TestCurrentPrediction(unittest.TestCase):

    def setUp(self):
        self.env = Environment(ticks_per_day=10, first_tick=100)
        self.p = ProsumerAgent(self.env, IdAllocator(), has_smart_meter=True)

    def test_without_signal(self):
        assert self.p.current_prediction() == 0

    def test_follows_clock(self):
        self.p.receive_value_signal(SIGNAL, 10)
        assert self.p.current_prediction() == 1
        self.env.current_tick = 104
        assert self.p.current_prediction() == 5
        self.env.current_tick = 111
        assert self.p.current_prediction() == 2

    def test_realigned_signal(self):
        self.env.current_tick = 103
        self.p.receive_value_signal(SIGNAL, 10, 100)
        assert self.p.current_prediction() == 4


class TestIdentity(unittest.TestCase):

    def test_names_and_ids(self):
        ids = IdAllocator()
        env = Environment()
        a = ProsumerAgent(env, ids)
        b = ProsumerAgent(env, ids, name="bob")
        assert (a.agent_id, b.agent_id) == (0, 1)
        assert a.agent_name == "prosumer"
        assert b.agent_name == "bob"
        a.agent_name = "alice"
        assert a.agent_name == "alice"
        assert str(b) == "ProsumerAgent 1"
        assert "smart_meter=False" in a.param_string_report()

    def test_report_lists_capabilities(self):
        p = ProsumerAgent(Environment(), IdAllocator(), has_smart_meter=True, has_smart_control=True)
        report = p.param_string_report()
        assert "smart_meter=True" in report
        assert "smart_control=True" in report
        assert "receives_cost_signal=False" in report


    def test_separate_allocators(self):
        env = Environment()
        assert ProsumerAgent(env, IdAllocator()).agent_id == ProsumerAgent(env, IdAllocator()).agent_id

    def test_is_prosumer(self):
        assert is_prosumer(ProsumerAgent(Environment(), IdAllocator()))
        assert not is_prosumer(object())
        assert not is_prosumer(Mock(spec=['net_demand']))

    def test_step_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            ProsumerAgent(Environment(), IdAllocator()).step()
