import logging
from typing import Iterator, List, Optional

from api.traversal_api.errors import InvalidArgument
from api.traversal_api.model import Graph, Node
from .search import DepthFirstGraphSearch, Predicate

LOGGER = logging.getLogger(__name__)


class Workspace:
    """
    Rooted searches over a node registry.

    Start nodes are named by id and resolved through the registry; the walk
    itself only follows relationships, so nodes that are registered but not
    reachable from the start are never returned.
    """

    def __init__(self, graph: Graph):
        if graph is None:
            raise InvalidArgument("Graph is required.")
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    def find_node_by_id(self, node_id: str) -> Optional[Node]:
        return self._graph.get_node(node_id)

    def search(self, start_id: str, predicate: Predicate) -> Iterator[Node]:
        start = self._graph.get_node(start_id)
        if start is None:
            raise InvalidArgument(f"Start node '{start_id}' does not exist.")
        LOGGER.debug("Workspace search from '%s'.", start_id)
        return DepthFirstGraphSearch(start).search(predicate)

    def find_reachable(self, start_id: str, node_id: str) -> Optional[Node]:
        """Return the first node with `node_id` reachable from `start_id`."""
        return next(self.search(start_id, lambda n: n.node_id == node_id), None)

    def find_nodes_by_label(self, start_id: str, label_substr: str) -> List[Node]:
        """Return distinct reachable nodes whose label contains the given substring."""
        needle = label_substr.lower()
        found = {}
        for node in self.search(start_id, lambda n: needle in n.label.lower()):
            found.setdefault(node.node_id, node)
        return list(found.values())
