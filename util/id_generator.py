"""Hands out agent IDs. One allocator per simulation, passed into every agent that needs an identity."""
import itertools


class IdAllocator:
    def __init__(self, start=0):
        self._counter = itertools.count(start)

    def create_id(self) -> int:
        return next(self._counter)
