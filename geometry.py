# geometry.py

import math
from dataclasses import dataclass

import numpy as np
import constants as C


class InvalidGeometryError(ValueError):
    """Raised when three corners cannot span a barycentric coordinate system."""


@dataclass(frozen=True)
class Point:
    """An immutable cartesian point."""
    x: float
    y: float

    @classmethod
    def of(cls, value):
        """Builds a Point from a Point or any (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self):
        yield self.x
        yield self.y


class BarycentricBasis:
    """
    The three cartesian corners (r1, r2, r3) of a barycentric coordinate system.
    The corner order fixes which edges the containment test includes and how
    the triangle is subdivided, so it must never be reordered.
    """
    __slots__ = ('r1', 'r2', 'r3', 'determinant')

    def __init__(self, r1, r2, r3):
        self.r1 = Point.of(r1)
        self.r2 = Point.of(r2)
        self.r3 = Point.of(r3)
        # Shared denominator of the 2x2 solve in cartesian_to_barycentric.
        self.determinant = (
            (self.r2.y - self.r3.y) * (self.r1.x - self.r3.x)
            + (self.r3.x - self.r2.x) * (self.r1.y - self.r3.y)
        )

    def corners(self):
        return [self.r1, self.r2, self.r3]

    def validate(self):
        """Raises InvalidGeometryError if the corners are non-finite or collinear."""
        for corner in self.corners():
            if not (math.isfinite(corner.x) and math.isfinite(corner.y)):
                raise InvalidGeometryError(f"Corner {corner} is not a finite point.")
        if abs(self.determinant) <= C.DEGENERATE_DETERMINANT_EPSILON:
            raise InvalidGeometryError(
                f"Corners {self.r1}, {self.r2}, {self.r3} are collinear "
                f"(determinant {self.determinant:.3e})."
            )
        return self

    def __eq__(self, other):
        if not isinstance(other, BarycentricBasis):
            return NotImplemented
        return self.corners() == other.corners()

    def __hash__(self):
        return hash((self.r1, self.r2, self.r3))

    def __repr__(self):
        return f"BarycentricBasis({self.r1}, {self.r2}, {self.r3})"


def cartesian_to_barycentric(p, basis):
    """
    Expresses point p as an affine combination of the basis corners.
    Only l1 and l2 are solved for; l3 is whatever is left so the three sum to 1.
    """
    x, y = p
    r1, r2, r3 = basis.r1, basis.r2, basis.r3
    l1 = ((r2.y - r3.y) * (x - r3.x) + (r3.x - r2.x) * (y - r3.y)) / basis.determinant
    l2 = ((r3.y - r1.y) * (x - r3.x) + (r1.x - r3.x) * (y - r3.y)) / basis.determinant
    return l1, l2, 1.0 - l1 - l2

def cartesian_to_barycentric_array(xs, ys, basis):
    """Vectorized cartesian_to_barycentric over numpy arrays of coordinates."""
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    r1, r2, r3 = basis.r1, basis.r2, basis.r3
    l1 = ((r2.y - r3.y) * (xs - r3.x) + (r3.x - r2.x) * (ys - r3.y)) / basis.determinant
    l2 = ((r3.y - r1.y) * (xs - r3.x) + (r1.x - r3.x) * (ys - r3.y)) / basis.determinant
    return l1, l2, 1.0 - l1 - l2

def barycentric_to_cartesian(l1, l2, l3, basis):
    r1, r2, r3 = basis.r1, basis.r2, basis.r3
    return Point(
        l1 * r1.x + l2 * r2.x + l3 * r3.x,
        l1 * r1.y + l2 * r2.y + l3 * r3.y,
    )

def edge_midpoints(basis):
    """Returns the midpoints (m1, m2, m3) of edges r1-r3, r2-r3 and r1-r2."""
    return (
        barycentric_to_cartesian(*C.MIDPOINT_R1_R3, basis),
        barycentric_to_cartesian(*C.MIDPOINT_R2_R3, basis),
        barycentric_to_cartesian(*C.MIDPOINT_R1_R2, basis),
    )
