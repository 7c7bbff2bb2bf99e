#  This file is part of trianglekind.
#
#  SPDX-FileCopyrightText: 2025 trianglekind Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Runs a classification as configured from the command line.

The runner reads the sides from the configuration singleton, classifies them, and
reports the category in the configured output format.  It can also be used as a
library by setting a configuration and calling `run_classification` directly.
"""

from __future__ import annotations

import enum
import logging

from typing import TYPE_CHECKING

import trianglekind.configuration as config

from trianglekind.classifier import Category
from trianglekind.classifier import classify
from trianglekind.utils.exceptions import ConfigurationException


if TYPE_CHECKING:
    from collections.abc import Callable


@enum.unique
class ReturnCode(enum.IntEnum):
    """Return codes for trianglekind to signal result."""

    OK = 0
    """Symbolises that the execution ended as expected."""

    SETUP_FAILED = 1
    """Symbolises that the execution failed in the setup phase."""

    INVALID_TRIANGLE = 2
    """Symbolises that the sides do not form a triangle, if requested."""


_LOGGER = logging.getLogger(__name__)


def set_configuration(configuration: config.Configuration) -> None:
    """Initialises the runner with the given configuration.

    Args:
        configuration: The configuration to use.
    """
    config.configuration = configuration


def format_category(category: Category, output_format: config.OutputFormat) -> str:
    """Renders a category in the requested output format.

    Args:
        category: The category to render
        output_format: The format to render it in

    Returns:
        The rendered category
    """
    if output_format == config.OutputFormat.TEXT:
        return f"{category.value.lower()} triangle"
    return category.value


def run_classification(report: Callable[[str], None] = print) -> ReturnCode:
    """Run the classification.

    The result of the classification is indicated by the resulting ReturnCode.

    Args:
        report: Receives the rendered category

    Returns:
        See ReturnCode.
    """
    try:
        _LOGGER.info("Start classification…")
        sides = _get_sides()
    except ConfigurationException as ex:
        _LOGGER.error("Invalid configuration: %s", ex)  # noqa: TRY400
        return ReturnCode.SETUP_FAILED
    try:
        category = classify(*sides)
        _LOGGER.debug("Sides %s, %s, %s are classified as %s", *sides, category.name)
        report(format_category(category, config.configuration.output_format))
        if category == Category.INVALID and config.configuration.fail_on_invalid:
            return ReturnCode.INVALID_TRIANGLE
        return ReturnCode.OK
    finally:
        _LOGGER.info("Stop classification…")


def _get_sides() -> tuple[int, int, int]:
    sides = (config.configuration.a, config.configuration.b, config.configuration.c)
    for name, value in zip("abc", sides, strict=True):
        # bool is a subclass of int but no length.
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationException(
                f"Side {name} must be an integer, got {type(value).__name__}"
            )
    return sides
