"""
Configuration for the action config editor.
All tunable values live here and can be overridden from the environment.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Central configuration for all editor components."""

    # Export
    EXPORT_INDENT = int(os.getenv('EXPORT_INDENT', '2'))
    EXPORT_PATH = os.getenv('EXPORT_PATH') or None

    # Validation
    WHITESPACE_NAMES_ARE_BLANK = os.getenv('WHITESPACE_NAMES_ARE_BLANK', 'true').lower() == 'true'

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    VERBOSE = os.getenv('VERBOSE', 'false').lower() == 'true'

