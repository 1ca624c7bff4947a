from typing import Dict, List


class RelationshipGraph:
    """
    Directed adjacency lists of the economic network. Edges go from an aggregator to the prosumers it supplies.
    Within a tick the graph is only read.
    """

    def __init__(self):
        self._edges: Dict[int, List] = {}
        # holds the sources so their ids stay unique while edges exist
        self._sources: Dict[int, object] = {}

    def add_edge(self, source, target):
        key = id(source)
        self._sources[key] = source
        targets = self._edges.setdefault(key, [])
        if not any(t is target for t in targets):
            targets.append(target)

    def remove_edge(self, source, target):
        targets = self._edges.get(id(source), [])
        self._edges[id(source)] = [t for t in targets if t is not target]

    def out_edges(self, source) -> List:
        """all targets linked from the source, in the order the edges were added"""
        return list(self._edges.get(id(source), []))

    def linked(self, source, target) -> bool:
        return any(t is target for t in self._edges.get(id(source), []))

    def __len__(self):
        return sum(len(t) for t in self._edges.values())
