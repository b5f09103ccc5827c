"""Point quadtree for axis-aligned rectangle range queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from spatial_quadtree.config import TreeConfig
from spatial_quadtree.errors import OutOfBounds
from spatial_quadtree.geometry import Point, Quadrant, Rect

if TYPE_CHECKING:
    from collections.abc import Iterator

    from spatial_quadtree.config import Config

logger = logging.getLogger(__name__)

T = TypeVar("T")

Visitor = Callable[[Any, Point], bool]


@dataclass(frozen=True)
class Entry(Generic[T]):
    """A payload stored at a position. The payload is never inspected."""

    position: Point
    payload: T


class TreeNode:
    """Node in a quadtree covering one spatial partition.

    A node is a leaf while ``children`` is None; it then owns ``entries``.
    Splitting turns it into an internal node with four children and no
    entries. The transition is one-way.

    Containment and pruning use ``extent``. Children take their edges from
    the parent's extent and midpoint, so siblings share edges exactly and
    the outer children end on the parent's own edges.
    """
    __slots__ = ("id", "depth", "bounds", "extent", "entries", "children")
    def __init__(self, node_id: str, depth: int, bounds: Rect,
                 extent: Optional[tuple[float, float, float, float]] = None) -> None:
        """
        Initialize an empty leaf.

        Args
        -----
        node_id (str): Quadrant digits on the path from the root, "" for the root.
        depth (int): Depth of the node in the tree.
        bounds (Rect): Spatial bounds of the node.
        extent (tuple, optional): Bounds in the form (xmin, ymin, xmax, ymax).
            Defaults to ``bounds.extent``.
        """
        self.id = node_id
        self.depth = depth
        self.bounds = bounds
        self.extent = extent if extent is not None else bounds.extent
        self.entries: Optional[list[Entry]] = []
        # Indexed by Quadrant once split
        self.children: Optional[tuple[TreeNode, TreeNode, TreeNode, TreeNode]] = None

    def __repr__(self):
        if self.children is None:
            return f"TreeNode(id='{self.id}', depth={self.depth}, entries={len(self.entries)})"
        return f"TreeNode(id='{self.id}', depth={self.depth}, children=4)"

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def contains(self, position: Point) -> bool:
        """Check whether ``position`` lies inside this node's extent (half-open)."""
        xmin, ymin, xmax, ymax = self.extent
        return xmin <= position.x < xmax and ymin <= position.y < ymax

    def overlaps(self, rect: Rect) -> bool:
        """Check whether ``rect`` shares any area with this node's extent."""
        xmin, ymin, xmax, ymax = self.extent
        return (
            xmin < rect.x + rect.width
            and rect.x < xmax
            and ymin < rect.y + rect.height
            and rect.y < ymax
        )

    def get_child_extent(self, quadrant: Quadrant) -> tuple[float, float, float, float]:
        """Calculate the extent of the child in a given quadrant."""
        xmin, ymin, xmax, ymax = self.extent
        mid = self.bounds.midpoint
        if quadrant == Quadrant.LOWER_LEFT:
            return (xmin, ymin, mid.x, mid.y)
        if quadrant == Quadrant.UPPER_LEFT:
            return (xmin, mid.y, mid.x, ymax)
        if quadrant == Quadrant.UPPER_RIGHT:
            return (mid.x, mid.y, xmax, ymax)
        if quadrant == Quadrant.LOWER_RIGHT:
            return (mid.x, ymin, xmax, mid.y)
        msg = f"Invalid quadrant {quadrant!r}"
        raise ValueError(msg)

    def child_for(self, position: Point) -> TreeNode:
        """Return the child whose quadrant holds ``position``."""
        return self.children[self.bounds.quadrant_toward(position)]

    def split(self) -> list[Entry]:
        """Create the four children one level deeper and drain this node's entries.

        Returns
        -------
            list[Entry]: The entries previously held, for the caller to re-insert.

        Raises
        ------
            RuntimeError: If the node is already internal.
        """
        if self.children is not None:
            msg = f"Node '{self.id}' is already split"
            raise RuntimeError(msg)
        children = []
        for q in Quadrant:
            extent = self.get_child_extent(q)
            children.append(TreeNode(self.id + str(int(q)), self.depth + 1,
                                     Rect.from_extent(*extent), extent))
        self.children = tuple(children)
        drained = self.entries
        self.entries = None
        return drained


class Quadtree(Generic[T]):
    """Spatial index storing payloads at 2D points.

    The bounds are fixed at construction. Leaves split into four quadrants
    once they hold more than ``max_entries_per_leaf`` entries, except at
    ``max_depth`` where they grow without limit. Points sharing a
    coordinate therefore cannot cause unbounded subdivision.

    The tree is not thread-safe. Callers that insert from one thread while
    another inserts or queries must synchronize externally.
    """

    def __init__(self, bounds: Rect, max_depth: int = 10, max_entries_per_leaf: int = 10) -> None:
        """
        Initialize the tree with a single empty leaf as root.

        Args
        -----
        bounds (Rect): Area covered by the tree.
        max_depth (int): Deepest level of subdivision, at least 1.
        max_entries_per_leaf (int): Leaf capacity below max_depth, at least 1.

        Raises
        ------
        InvalidConfiguration: If max_depth or max_entries_per_leaf is below 1.
        """
        self._config = TreeConfig(max_depth=max_depth, max_entries_per_leaf=max_entries_per_leaf)
        self.root = TreeNode("", 0, bounds)
        self._size: int = 0

    @classmethod
    def from_config(cls, config: Config) -> Quadtree:
        """Build an empty tree from the bounds and tree sections of a Config."""
        return cls(
            config.bounds.to_rect(),
            max_depth=config.tree.max_depth,
            max_entries_per_leaf=config.tree.max_entries_per_leaf,
        )

    def __repr__(self):
        return (
            f"Quadtree(bounds={self.bounds}, max_depth={self.max_depth}, "
            f"max_entries_per_leaf={self.max_entries_per_leaf}, size={self._size})"
        )

    def __len__(self) -> int:
        return self._size

    @property
    def bounds(self) -> Rect:
        return self.root.bounds

    @property
    def max_depth(self) -> int:
        return self._config.max_depth

    @property
    def max_entries_per_leaf(self) -> int:
        return self._config.max_entries_per_leaf

    def size(self) -> int:
        """Number of entries inserted so far."""
        return self._size

    def insert(self, payload: T, position: Point) -> None:
        """Store ``payload`` at ``position``.

        Duplicate positions and payloads are allowed.

        Args
        -----
            payload: Any caller value.
            position (Point): Where to store it.

        Raises
        ------
            OutOfBounds: If the root bounds do not contain ``position``.
                The tree is left unchanged.
        """
        if not self.root.bounds.contains(position):
            raise OutOfBounds(position, self.root.bounds)
        self._insert_entry(self.root, Entry(position, payload))
        self._size += 1

    def _insert_entry(self, node: TreeNode, entry: Entry) -> None:
        """Route ``entry`` from ``node`` down to a leaf, splitting full leaves on the way.

        Descent follows the midpoint of each node, and children share their
        parent's edges, so an entry accepted at the root always lands in
        exactly one leaf that contains it.
        """
        while True:
            while not node.is_leaf:
                node = node.child_for(entry.position)

            if node.depth >= self.max_depth or len(node.entries) < self.max_entries_per_leaf:
                node.entries.append(entry)
                return

            drained = node.split()
            logger.debug("Split node '%s' at depth %d, redistributing %d entries",
                         node.id, node.depth, len(drained))
            # A full leaf holds exactly max_entries_per_leaf entries, so the
            # drained ones always fit in the new children.
            for existing in drained:
                node.child_for(existing.position).entries.append(existing)

    def query(self, bounds: Rect) -> list[T]:
        """Collect the payloads stored inside ``bounds``.

        Order is unspecified across leaves; within a leaf it follows
        insertion order.
        """
        found: list[T] = []

        def _collect(payload: T, _position: Point) -> bool:
            found.append(payload)
            return True

        self._visit(bounds, _collect)
        return found

    def query_visit(self, bounds: Rect, visitor: Callable[[T, Point], bool]) -> None:
        """Call ``visitor(payload, position)`` for each entry inside ``bounds``.

        The whole traversal stops as soon as the visitor returns a falsy
        value. Exceptions raised by the visitor propagate.
        """
        self._visit(bounds, visitor)

    def _visit(self, bounds: Rect, visitor: Visitor) -> None:
        """Walk the tree depth-first in quadrant order until the visitor asks to stop."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if not node.overlaps(bounds):
                continue
            if node.is_leaf:
                # The leaf may only partially overlap, so test each position.
                for entry in node.entries:
                    if bounds.contains(entry.position) and not visitor(entry.payload, entry.position):
                        return
            else:
                stack.extend(reversed(node.children))

    def leaves(self) -> Iterator[TreeNode]:
        """Yield every leaf, depth-first in quadrant order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.extend(reversed(node.children))

    def depth(self) -> int:
        """Depth of the deepest leaf."""
        return max(leaf.depth for leaf in self.leaves())
