#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a configuration interface for the classification runner."""

import dataclasses
import enum

from simple_parsing import field


class OutputFormat(str, enum.Enum):
    """Contains the available formats to report a classification result."""

    NAME = "NAME"
    """Report the name of the category, e.g., `ISOSCELES`."""

    TEXT = "TEXT"
    """Report a lower-case sentence, e.g., `isosceles triangle`."""


@dataclasses.dataclass
class Configuration:
    """General configuration for the classification runner."""

    a: int = field(positional=True)
    """Length of the first side of the triangle"""

    b: int = field(positional=True)
    """Length of the second side of the triangle"""

    c: int = field(positional=True)
    """Length of the third side of the triangle"""

    output_format: OutputFormat = OutputFormat.NAME
    """The format in which the resulting category is reported"""

    fail_on_invalid: bool = False
    """Signal an invalid triangle by a non-zero return code"""


# Singleton instance of the configuration.
configuration = Configuration(a=0, b=0, c=0)
