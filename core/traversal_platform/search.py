import logging
from typing import Callable, Iterator, List, Set

from api.traversal_api.errors import InvalidArgument
from api.traversal_api.model import Node, Relationship

LOGGER = logging.getLogger(__name__)

Predicate = Callable[[Node], bool]


class DepthFirstGraphSearch:
    """
    Depth-first search for nodes matching a predicate, rooted at one node.

    Matches are leaves: once a node satisfies the predicate it is yielded and
    its own relationships are not followed. Visited tracking is by edge id
    (kind plus target id), so a node reached through edges of different kinds
    is explored once per kind.

    Edges are marked visited as soon as they are taken, which makes the walk
    terminate on cyclic graphs: every edge id is followed at most once per
    search. Because edge ids ignore the source node, and node ids are not
    required to be unique, this also skips a second edge of the same kind to
    a different node sharing an id with one already being explored, even on
    an acyclic graph.
    """

    def __init__(self, start: Node):
        if start is None:
            raise InvalidArgument("Search start node is required.")
        self._start = start

    @property
    def start(self) -> Node:
        return self._start

    def search(self, predicate: Predicate) -> Iterator[Node]:
        if predicate is None:
            raise InvalidArgument("Search predicate is required.")
        return self._walk(predicate)

    def _walk(self, predicate: Predicate) -> Iterator[Node]:
        LOGGER.debug("Depth-first search from node '%s'.", self._start.node_id)

        if predicate(self._start):
            LOGGER.debug("Start node '%s' matched.", self._start.node_id)
            yield self._start
            return

        visited: Set[str] = set()
        # Each frame is the remaining relationships of a node being explored.
        stack: List[Iterator[Relationship]] = [iter(self._start.relationships)]

        while stack:
            relationship = next(stack[-1], None)
            if relationship is None:
                stack.pop()
                continue

            edge_id = relationship.edge_id
            if edge_id in visited:
                continue
            visited.add(edge_id)

            target = relationship.target
            if predicate(target):
                LOGGER.debug("Matched node '%s' via edge '%s'.", target.node_id, edge_id)
                yield target
                continue

            stack.append(iter(target.relationships))
