"""
Action registry: owns the ordered action list for one editing session.

Actions are addressed by their current position. Positions shift after
add/remove, so callers must re-read indices after either.
"""

from dataclasses import replace
from typing import Any, Optional, Set, Tuple, Union

from action_config.action_model import Action, ActionKind, Document
from action_config.errors import OutOfRangeError
from action_config.validator import find_duplicates
from logger import get_logger

logger = get_logger(__name__)


class ActionRegistry:
    """
    Single source of truth for editor state.

    Nothing here blocks invalid intermediate states: empty and duplicate
    names are allowed while editing and only checked on demand.

    Usage:
        registry = ActionRegistry(default_document(), notifications)
        registry.add(ActionKind.SUBMIT_BOT_INSTRUCTION)
        registry.rename(4, "say hello")
        document = registry.snapshot()
    """

    def __init__(self, document: Document, notifications: Optional[Any] = None):
        self._document = document.copy()
        self.notifications = notifications

    # ------------------------------------------------------------------
    # Core mutations
    # ------------------------------------------------------------------

    def add(self, kind: Union[ActionKind, str]) -> Action:
        """Append a blank action of the given kind"""
        kind = ActionKind(kind)
        action = Action(name="", kind=kind)
        self._document.actions.append(action)

        logger.debug(f"Added {kind.value} at index {len(self._document.actions) - 1}")
        if self.notifications:
            self.notifications.success(
                f"{kind.value} created, please fill in the corresponding information :)"
            )
        return action

    def update(self, index: int, new_action: Action) -> None:
        """Replace the action at index, keeping its position"""
        self._check_index(index)
        self._document.actions[index] = new_action
        logger.debug(f"Updated index {index}: {new_action}")

    def remove(self, index: int) -> None:
        """Delete the action at index; later actions shift left by one"""
        self._check_index(index)
        removed = self._document.actions.pop(index)
        logger.debug(f"Removed index {index}: {removed}")

    def snapshot(self) -> Document:
        """Independent copy of the current document"""
        return self._document.copy()

    # ------------------------------------------------------------------
    # Single-field edits (copy the record, change one field, update)
    # ------------------------------------------------------------------

    def rename(self, index: int, name: str) -> None:
        self.update(index, replace(self.get(index), name=name))

    def change_kind(self, index: int, kind: Union[ActionKind, str]) -> None:
        """Switch kind; any instruction already set is kept"""
        self.update(index, replace(self.get(index), kind=ActionKind(kind)))

    def set_instruction(self, index: int, instruction: Optional[str]) -> None:
        self.update(index, replace(self.get(index), instruction=instruction))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, index: int) -> Action:
        self._check_index(index)
        return replace(self._document.actions[index])

    @property
    def name(self) -> str:
        return self._document.name

    @property
    def version(self) -> str:
        return self._document.version

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(replace(action) for action in self._document.actions)

    def duplicate_names(self) -> Set[str]:
        """Live duplicate feedback for the current list"""
        return find_duplicates(self._document.actions)

    def __len__(self) -> int:
        return len(self._document.actions)

    def _check_index(self, index: int) -> None:
        # Negative indices are not positions
        if not 0 <= index < len(self._document.actions):
            raise OutOfRangeError(index, len(self._document.actions))
