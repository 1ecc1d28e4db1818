from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import InvalidArgument

if TYPE_CHECKING:
    from .node import Node


@dataclass(frozen=True, slots=True, eq=False)
class Relationship:
    """
    Directed, kind-labeled edge pointing at a target node.

    The owning node is not stored; a relationship only lives inside the
    relationship map of the node it leaves from. Two relationships are equal
    when their edge ids are.
    """

    kind: str
    target: Node

    def __post_init__(self):
        if self.kind is None:
            raise InvalidArgument("Relationship kind is required.")
        if self.target is None:
            raise InvalidArgument("Relationship target is required.")

    @property
    def edge_id(self) -> str:
        return f"{self.kind}-{self.target.node_id}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Relationship):
            return NotImplemented
        return self.edge_id == other.edge_id

    def __hash__(self) -> int:
        return hash(self.edge_id)
