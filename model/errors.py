"""
Error kinds of the price signal loop. Warnings let the simulation continue, the exceptions abort the current tick.
"""


class ConfigurationWarning(UserWarning):
    """Raised through `warnings.warn` when a configured length does not fit the period length"""


class RelationshipTypeMismatch(TypeError):
    """An edge of the relationship graph points at something that is not a prosumer"""

    def __init__(self, entity):
        super().__init__("linked entity {} is not a prosumer".format(entity))
        self.entity = entity


class BufferLengthViolation(ValueError):
    """A signal buffer was used with a non-positive length or before it was initialized"""
