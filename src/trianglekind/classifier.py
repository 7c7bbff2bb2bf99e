#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Classifies triangles by the lengths of their three sides."""

import enum


class Category(str, enum.Enum):
    """The categories a triple of side lengths can fall into."""

    INVALID = "INVALID"
    """The sides do not form a triangle, e.g., a side is not positive or the triangle
    is degenerate."""

    EQUILATERAL = "EQUILATERAL"
    """All three sides are equal."""

    ISOSCELES = "ISOSCELES"
    """Exactly two sides are equal."""

    SCALENE = "SCALENE"
    """No two sides are equal."""


def _is_valid(a: int, b: int, c: int) -> bool:
    # A side equal to the sum of the other two is degenerate, hence strict.
    return a > 0 and b > 0 and c > 0 and a + b > c and a + c > b and b + c > a


def classify(a: int, b: int, c: int) -> Category:
    """Classifies the triangle given by its side lengths.

    Every triple of integers yields a category; inputs that do not form a
    triangle are reported as INVALID instead of raising.  The result does not
    depend on the order of the arguments.

    Args:
        a: The length of the first side
        b: The length of the second side
        c: The length of the third side

    Returns:
        The category of the triangle
    """
    if not _is_valid(a, b, c):
        return Category.INVALID
    if a == b == c:
        return Category.EQUILATERAL
    if a in {b, c} or b == c:
        return Category.ISOSCELES
    return Category.SCALENE
