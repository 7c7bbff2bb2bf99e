#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""trianglekind classifies triangles by their integer side lengths."""

import trianglekind.classifier as cls


classify = cls.classify
Category = cls.Category

__all__ = [
    "Category",
    "classify",
]
