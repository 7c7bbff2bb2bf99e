#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the version of trianglekind."""

__version__ = "0.1.0"
