"""
Action config core: the editable bot action list.

Architecture:
- action_model.py: ActionKind, Action, Document and the seed document
- registry.py: ActionRegistry, the ordered list and its mutations
- validator.py: Duplicate name detection
- exporter.py: Validated export to the canonical artifact
- errors.py: Out-of-range and validation errors
"""

from .action_model import (
    Action, ActionKind, Document, KIND_LABELS,
    DEFAULT_DOCUMENT, default_document
)
from .errors import (
    ErrorCategory, OutOfRangeError, ValidationError,
    DUPLICATE_NAMES_MESSAGE, format_error_for_user
)
from .validator import find_duplicates, is_blank
from .registry import ActionRegistry
from .exporter import ConfigExporter, ExportResult, to_artifact, to_json

__all__ = [
    # Models
    "Action",
    "ActionKind",
    "Document",
    "KIND_LABELS",
    "DEFAULT_DOCUMENT",
    "default_document",

    # Errors
    "ErrorCategory",
    "OutOfRangeError",
    "ValidationError",
    "DUPLICATE_NAMES_MESSAGE",
    "format_error_for_user",

    # Processing
    "find_duplicates",
    "is_blank",
    "ActionRegistry",
    "ConfigExporter",
    "ExportResult",
    "to_artifact",
    "to_json",
]

__version__ = "0.1.0"
