from .search import DepthFirstGraphSearch
from .workspace import Workspace

__all__ = ["DepthFirstGraphSearch", "Workspace"]
