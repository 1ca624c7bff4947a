from env.environment import Environment
from util.id_generator import IdAllocator


class CognitiveAgent:
    """
    Identity and net demand shared by all agents of the simulation. Net demand may be positive (consumption), zero or
    negative (generation).
    """
    base_name = "agent"

    def __init__(self, env: Environment, id_allocator: IdAllocator, name: str = None):
        self.env = env
        self.agent_id = id_allocator.create_id()
        self._agent_name = name
        self.net_demand = 0.0

    @property
    def agent_name(self) -> str:
        """the explicitly set name or the base name of the agent type"""
        if self._agent_name is None:
            return self.base_name
        return self._agent_name

    @agent_name.setter
    def agent_name(self, name: str):
        self._agent_name = name

    def param_string_report(self) -> str:
        return "net_demand={}".format(self.net_demand)

    def step(self):
        raise NotImplementedError

    def __str__(self):
        return "{} {}".format(type(self).__name__, self.agent_id)
