import numpy as np

import util.config as cfg
from agent_components.prosumer.prosumer import ProsumerAgent
from model.signal_buffer import SignalBuffer


class HouseholdProsumer(ProsumerAgent):
    """
    A household consuming along its base demand profile. If it exercises behaviour change it reacts elastically to the
    predicted cost: demand shrinks when the cost of the current tick lies above the mean of the stored cost signal and
    grows when it lies below.
    """
    base_name = cfg.AGENT_BASE_NAMES['household']

    def __init__(self, env, id_allocator, base_demand, name=None, elasticity=0.0, **capabilities):
        super().__init__(env, id_allocator, name, **capabilities)
        self.base_demand_profile = SignalBuffer.from_values(base_demand)
        self.elasticity = elasticity

    def step(self):
        demand = self.base_demand_profile.get(self.env.current_tick)
        if self.exercises_behaviour_change and self.predicted_cost_signal is not None:
            demand *= self._elastic_factor()
        self.net_demand = float(demand)

    def _elastic_factor(self) -> float:
        mean = float(np.mean(self.predicted_cost_signal.values))
        if mean == 0:
            return 1.0
        relative = (self.current_prediction() - mean) / mean
        return max(0.0, 1.0 - self.elasticity * relative)
