import util.config as cfg
from agent_components.prosumer.prosumer import ProsumerAgent
from model.signal_buffer import SignalBuffer


class GeneratorProsumer(ProsumerAgent):
    """Pure generation. The output profile holds the fraction of capacity produced per tick, net demand is negative"""
    base_name = cfg.AGENT_BASE_NAMES['generator']

    def __init__(self, env, id_allocator, capacity, output_profile, name=None, **capabilities):
        super().__init__(env, id_allocator, name, **capabilities)
        self.capacity = capacity
        self.output_profile = SignalBuffer.from_values(output_profile)

    def step(self):
        self.net_demand = -self.capacity * self.output_profile.get(self.env.current_tick)

    def param_string_report(self):
        return "capacity={} {}".format(self.capacity, super().param_string_report())
