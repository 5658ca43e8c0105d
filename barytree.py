# barytree.py

import constants as C
import logger as log
from geometry import (
    BarycentricBasis,
    Point,
    cartesian_to_barycentric,
    cartesian_to_barycentric_array,
    edge_midpoints,
)


class Triangle:
    """A triangular region defined by a barycentric basis."""
    def __init__(self, basis):
        self.basis = basis

    @classmethod
    def from_corners(cls, r1, r2, r3):
        """Builds a validated triangle; raises InvalidGeometryError if degenerate."""
        return cls(BarycentricBasis(r1, r2, r3).validate())

    def contains(self, point):
        """
        Checks if a point is inside this triangle.
        Edges r2-r3 and r1-r3 are inclusive, edge r1-r2 is exclusive, so the
        four children of a subdivision do not share their boundary points.
        """
        l1, l2, _ = cartesian_to_barycentric(point, self.basis)
        return l1 >= 0 and l2 >= 0 and l1 + l2 < 1

    def contains_array(self, xs, ys):
        """Vectorized contains over coordinate arrays, returning a boolean mask."""
        l1, l2, _ = cartesian_to_barycentric_array(xs, ys, self.basis)
        return (l1 >= 0) & (l2 >= 0) & (l1 + l2 < 1)

    def __contains__(self, point):
        return self.contains(point)

    def corners(self):
        return self.basis.corners()

    def intersects(self, other):
        """
        Checks if any corner of this triangle lies inside the other one.
        Corner-only and one-directional: a triangle entirely inside this one
        without containing any of its corners is not detected.
        """
        for corner in self.corners():
            if other.contains(corner):
                return True
        return False

    def subdivide(self):
        """Splits the triangle Sierpinski-style into top, center, left and right."""
        r1, r2, r3 = self.corners()
        m1, m2, m3 = edge_midpoints(self.basis)
        return [
            Triangle(BarycentricBasis(r1, m3, m1)),
            Triangle(BarycentricBasis(m3, m2, m1)),
            Triangle(BarycentricBasis(m3, r2, m2)),
            Triangle(BarycentricBasis(m1, m2, r3)),
        ]

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.basis == other.basis

    def __hash__(self):
        return hash(self.basis)

    def __repr__(self):
        return f"Triangle({self.basis.r1}, {self.basis.r2}, {self.basis.r3})"


class BaryTree:
    """
    The BaryTree data structure.
    A node may hold a resident point and four children at the same time: the
    resident point is never pushed down when the node splits.
    """
    def __init__(self, region, is_root=False, depth=0):
        self.region = region
        self.is_root = is_root
        self.depth = depth
        self.point = None
        self.divided = False
        self.top = None
        self.center = None
        self.left = None
        self.right = None

    @classmethod
    def from_corners(cls, r1, r2, r3):
        """Builds an empty root node over a validated triangle."""
        return cls(Triangle.from_corners(r1, r2, r3), is_root=True)

    @property
    def children(self):
        """The four children in fixed order, or an empty list if not divided."""
        if not self.divided:
            return []
        return [self.top, self.center, self.left, self.right]

    def contains(self, point):
        return self.region.contains(point)

    def __contains__(self, point):
        return self.region.contains(point)

    def subdivide(self):
        """Divides the node into four new sub-triangles."""
        top, center, left, right = self.region.subdivide()
        depth = self.depth + 1
        self.top = BaryTree(top, depth=depth)
        self.center = BaryTree(center, depth=depth)
        self.left = BaryTree(left, depth=depth)
        self.right = BaryTree(right, depth=depth)
        self.divided = True

    def _can_subdivide(self, point):
        if self.depth < C.MAX_TREE_DEPTH:
            return True
        log.log(f"WARNING: Depth cap {C.MAX_TREE_DEPTH} reached, rejecting point ({point.x}, {point.y}).")
        return False

    def insert(self, point):
        """Inserts a point into the tree. Returns False if it was not stored."""
        point = Point.of(point)
        if not self.region.contains(point):
            return False

        if self.point is None and not self.divided:
            if not self._can_subdivide(point):
                return False
            self.subdivide()
            # One-level direct placement: the point lives one level below this node.
            for child in self.children:
                if child.region.contains(point):
                    child.point = point
                    if C.LOG_INSERT_EVENTS:
                        log.log(f"Placed ({point.x}, {point.y}) at depth {child.depth}.")
                    return True
            log.log(f"WARNING: No child of a depth {self.depth} node contains ({point.x}, {point.y}); point dropped.")
            return False

        if not self.divided:
            if not self._can_subdivide(point):
                return False
            # The resident point stays here; only the new point goes down.
            self.subdivide()

        if self.top.insert(point): return True
        if self.center.insert(point): return True
        if self.left.insert(point): return True
        if self.right.insert(point): return True

        # A child that contains the point already reported why it failed.
        if not any(child.region.contains(point) for child in self.children):
            log.log(f"WARNING: No child of a depth {self.depth} node contains ({point.x}, {point.y}); point dropped.")
        return False

    def query(self, range_triangle, found=None):
        """Queries for stored points within a given triangle, in pre-order."""
        if found is None:
            found = []

        if not range_triangle.intersects(self.region):
            return found

        if self.point is not None and range_triangle.contains(self.point):
            found.append(self.point)

        for child in self.children:
            child.query(range_triangle, found)

        return found

    def size(self):
        """Counts nodes, not points."""
        s = 1
        for child in self.children:
            s += child.size()
        return s

    def walk(self):
        """Yields every node in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so that top is visited before center, left and right.
            stack.extend(reversed(node.children))

    def points(self):
        return [node.point for node in self.walk() if node.point is not None]

    def count_points(self):
        return sum(1 for node in self.walk() if node.point is not None)

    def max_depth(self):
        return max(node.depth for node in self.walk()) - self.depth

    def __repr__(self):
        return f"BaryTree(depth={self.depth}, point={self.point}, divided={self.divided})"
