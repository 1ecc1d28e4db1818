"""
Core graph domain model (Node, Relationship, Graph).
"""

from .node import Node, new_node, add_relationship, relationships_of
from .relationship import Relationship
from .graph import Graph

__all__ = [
    "Node",
    "Relationship",
    "Graph",
    "new_node",
    "add_relationship",
    "relationships_of",
]
