"""Pattern Catalog - Root Package.

An educational catalog of classic object-oriented design patterns. Each
pattern is a small, self-contained unit with a description, a pros/cons
list and a runnable demonstration.

Key Components:
    - domain: Shared vehicle products, value objects and exceptions
    - patterns: The pattern implementations (creational and structural)
    - catalog: Descriptions, pros/cons and demonstrations of every pattern
    - config: Configuration schemas and loading
    - infrastructure: Logging and singleton support
    - cli: Command line interface

Usage:
    >>> pattern-catalog patterns list
    >>> pattern-catalog patterns run factory
    >>> pattern-catalog vehicles create truck --family land
"""
import logging

from ._version import __version__

PACKAGE_NAME = "pattern-catalog"

__author__ = "Pattern Catalog Contributors"
__package_name__ = PACKAGE_NAME

# Library default: stay silent until the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
