"""Tree module for the point quadtree implementation."""

from .tree import Entry, Quadtree, TreeNode

__all__ = ["Entry", "Quadtree", "TreeNode"]
