# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Point and Vector value types.

A Point is a position, a Vector a direction or offset. Both are small
immutable dataclasses; Point - Point yields a Vector and Point + Vector
yields a Point so that the stroker's geometry reads like the formulas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    @staticmethod
    def zero() -> Vector:
        return Vector(0.0, 0.0)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vector:
        return Vector(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> Vector:
        return self.__mul__(s)

    def __truediv__(self, s: float) -> Vector:
        return Vector(self.x / s, self.y / s)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector:
        ln = self.length()
        if ln == 0.0:
            return Vector(0.0, 0.0)
        return Vector(self.x / ln, self.y / ln)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        """Point - Point is a Vector, Point - Vector is a Point."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)
