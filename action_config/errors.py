"""
Error types for the action config core.

Two kinds of failure exist:
- Out of range: update/remove addressed a position that does not exist.
  This is a caller defect and is raised.
- Duplicate names: two or more non-blank actions share a name. The operator
  fixes it by renaming, so it is returned as a value, never raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet


class ErrorCategory(str, Enum):
    """Categories of errors with different handling strategies"""
    OUT_OF_RANGE = "out_of_range"        # Bad index - programming error
    DUPLICATE_NAMES = "duplicate_names"  # Name collision - rename and retry


DUPLICATE_NAMES_MESSAGE = (
    "Two or more actions have the same name - please ensure each action has a unique name!"
)


class OutOfRangeError(IndexError):
    """Raised when an index does not address a current position"""

    category = ErrorCategory.OUT_OF_RANGE

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Action index {index} out of range for {size} action(s)")


@dataclass(frozen=True)
class ValidationError:
    """Recoverable validation failure carried inside an export result"""
    category: ErrorCategory
    offending_names: FrozenSet[str] = field(default_factory=frozenset)
    message: str = DUPLICATE_NAMES_MESSAGE


def format_error_for_user(error: ValidationError) -> str:
    """Render a validation error with the names the operator has to fix"""
    if not error.offending_names:
        return error.message

    names = ", ".join(f"'{name}'" for name in sorted(error.offending_names))
    return f"{error.message} (duplicated: {names})"
