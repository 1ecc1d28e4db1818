"""Public API exports for the traversal data model."""

from .errors import InvalidArgument
from .model import (
    Graph,
    Node,
    Relationship,
    add_relationship,
    new_node,
    relationships_of,
)

__all__ = [
    "InvalidArgument",
    "Node",
    "Relationship",
    "Graph",
    "new_node",
    "add_relationship",
    "relationships_of",
]
