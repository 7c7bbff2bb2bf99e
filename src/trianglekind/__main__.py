#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""trianglekind classifies triangles by their integer side lengths.

This module provides the main entry location for the program executions.
"""

import sys

from trianglekind.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv))
