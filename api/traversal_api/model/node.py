from typing import Dict, Optional, Tuple

from ..errors import InvalidArgument
from .relationship import Relationship


class Node:
    """
    Identified entity of the graph with its outgoing relationships.

    Relationships are grouped by kind, then keyed by target id, so a
    (kind, target) pair is stored at most once. Both levels keep insertion
    order, which is the order `relationships` enumerates them in.
    """

    def __init__(self, node_id: str, label: str = "", attributes: dict = None):
        self._node_id = node_id
        self.label = label or node_id
        self.attributes = attributes or {}
        self._relationships: Dict[str, Dict[str, Relationship]] = {}

    @property
    def node_id(self) -> str:
        return self._node_id

    @property
    def relationships(self) -> Tuple[Relationship, ...]:
        return tuple(
            relationship
            for by_target in self._relationships.values()
            for relationship in by_target.values()
        )

    def relationships_by_kind(self, kind: str) -> Tuple[Relationship, ...]:
        return tuple(self._relationships.get(kind, {}).values())

    def add_relationship(self, kind: str, target: "Node") -> Relationship:
        if kind is None:
            raise InvalidArgument("Relationship kind is required.")
        if target is None:
            raise InvalidArgument("Relationship target is required.")
        if not isinstance(target, Node):
            raise InvalidArgument(
                f"Relationship target must be a Node, got {type(target).__name__}."
            )

        by_target = self._relationships.setdefault(kind, {})
        existing = by_target.get(target.node_id)
        if existing is not None:
            return existing

        relationship = by_target[target.node_id] = Relationship(kind, target)
        return relationship

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node_id!r})"


# -----------------
# FUNCTIONAL API
# -----------------

def new_node(node_id: str, label: str = "", attributes: Optional[dict] = None) -> Node:
    return Node(node_id, label=label, attributes=attributes)


def add_relationship(node: Node, kind: str, target: Node) -> Relationship:
    if node is None:
        raise InvalidArgument("Source node is required.")
    return node.add_relationship(kind, target)


def relationships_of(node: Node) -> Tuple[Relationship, ...]:
    if node is None:
        raise InvalidArgument("Node is required.")
    return node.relationships
