"""
Config exporter: turns a validated document into its canonical artifact.

Export is all-or-nothing. A document with duplicate names produces no
artifact and the sink is never called.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from config import Config
from action_config.action_model import Document
from action_config.errors import (
    ErrorCategory, ValidationError, DUPLICATE_NAMES_MESSAGE, format_error_for_user
)
from action_config.validator import find_duplicates
from logger import get_logger

logger = get_logger(__name__)

EXPORT_SUCCESS_MESSAGE = "Success - config exported!"
DUPLICATE_NAMES_TITLE = "Duplicate Action Names"


@dataclass
class ExportResult:
    """Outcome of one export: an artifact or a validation error, never both"""
    artifact: Optional[Dict[str, Any]] = None
    error: Optional[ValidationError] = None
    indent: int = Config.EXPORT_INDENT

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def json(self) -> Optional[str]:
        if self.artifact is None:
            return None
        return to_json(self.artifact, self.indent)


def to_artifact(document: Document) -> Dict[str, Any]:
    """
    Canonical, order-preserving shape of a document.

    `instruction` is included whenever it was set, regardless of kind.
    """
    actions = []
    for action in document.actions:
        entry = {"name": action.name, "type": action.kind.value}
        if action.instruction is not None:
            entry["instruction"] = action.instruction
        actions.append(entry)

    return {
        "name": document.name,
        "version": document.version,
        "actions": actions,
    }


def to_json(artifact: Dict[str, Any], indent: int = 2) -> str:
    return json.dumps(artifact, indent=indent, ensure_ascii=False)


class ConfigExporter:
    """
    Validates and serializes documents.

    Args:
        notifications: Optional object with success()/error() for advisory messages
        sink: Optional callable receiving the JSON text of a successful export
        indent: Indentation used for the JSON text
    """

    def __init__(
        self,
        notifications: Optional[Any] = None,
        sink: Optional[Callable[[str], None]] = None,
        indent: Optional[int] = None
    ):
        self.notifications = notifications
        self.sink = sink
        self.indent = Config.EXPORT_INDENT if indent is None else indent

    def export(self, document: Document) -> ExportResult:
        duplicates = find_duplicates(document.actions)

        if duplicates:
            error = ValidationError(
                category=ErrorCategory.DUPLICATE_NAMES,
                offending_names=frozenset(duplicates),
            )
            logger.warning(f"Export of '{document.name}' rejected: {format_error_for_user(error)}")
            if self.notifications:
                self.notifications.error(DUPLICATE_NAMES_MESSAGE, title=DUPLICATE_NAMES_TITLE)
            return ExportResult(error=error, indent=self.indent)

        result = ExportResult(artifact=to_artifact(document), indent=self.indent)

        if self.sink:
            self.sink(result.json)

        logger.info(
            f"Exported '{document.name}' v{document.version} "
            f"with {len(document.actions)} action(s)"
        )
        if self.notifications:
            self.notifications.success(EXPORT_SUCCESS_MESSAGE)
        return result
