from typing import Dict, List, Optional

from ..errors import InvalidArgument
from .node import Node
from .relationship import Relationship


class Graph:
    """
    Optional registry of nodes indexed by id.

    Nodes do not need a graph to be linked or searched; the registry only
    gives callers a place to look nodes up by id.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, node: Node) -> Node:
        if node is None:
            raise InvalidArgument("Node is required.")
        if node.node_id in self._nodes:
            raise InvalidArgument(f"Node '{node.node_id}' already exists.")

        self._nodes[node.node_id] = node
        return node

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    # -----------------
    # RELATIONSHIP OPERATIONS
    # -----------------

    def add_relationship(self, source_id: str, kind: str, target_id: str) -> Relationship:
        source = self._require(source_id, "Source")
        target = self._require(target_id, "Target")
        return source.add_relationship(kind, target)

    def _require(self, node_id: str, role: str) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise InvalidArgument(f"{role} node '{node_id}' does not exist.")
        return node

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes
