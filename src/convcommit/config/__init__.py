"""
Configuration loading for convcommit.

Output settings for the command line interface are read from JSON
files. See :mod:`convcommit.config.loader` for details.
"""

from .loader import ConfigError, load_config  # noqa: F401
