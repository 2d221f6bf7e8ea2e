"""
Core action model: the records an operator edits.

Classes:
- ActionKind: Enum for the closed set of bot actions
- Action: One configured bot behavior entry
- Document: Named, versioned, ordered collection of actions
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ActionKind(str, Enum):
    """Kinds of action a bot can be configured to take"""
    ACCEPT_OFFER = "AcceptOffer"
    REJECT_OFFER = "RejectOffer"
    SUBMIT_BOT_INSTRUCTION = "SubmitBotInstruction"

    @property
    def label(self) -> str:
        """Human readable name shown in pickers"""
        return KIND_LABELS[self]


KIND_LABELS = {
    ActionKind.ACCEPT_OFFER: "Accept Offer",
    ActionKind.REJECT_OFFER: "Reject Offer",
    ActionKind.SUBMIT_BOT_INSTRUCTION: "Submit Bot Instruction",
}


@dataclass
class Action:
    """
    A single entry in the action list.

    `instruction` is only read when kind is SUBMIT_BOT_INSTRUCTION. It is
    kept as-is when the kind changes to something else.
    """

    name: str = ""
    kind: ActionKind = ActionKind.ACCEPT_OFFER
    instruction: Optional[str] = None

    @property
    def takes_instruction(self) -> bool:
        return self.kind == ActionKind.SUBMIT_BOT_INSTRUCTION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Action":
        """
        Build an action from its exported shape ({name, type, instruction?}).

        Raises ValueError when the shape or a field type is wrong.
        """
        _require(isinstance(data, dict), f"action must be an object, got {type(data).__name__}")
        name = data.get("name", "")
        instruction = data.get("instruction")
        _require(isinstance(name, str), f"action name must be a string, got {name!r}")
        _require("type" in data, f"action '{name}' has no type")
        _require(isinstance(data["type"], str), f"action '{name}' type must be a string")
        _require(
            instruction is None or isinstance(instruction, str),
            f"action '{name}' instruction must be a string, got {instruction!r}"
        )
        return cls(name=name, kind=ActionKind(data["type"]), instruction=instruction)


@dataclass
class Document:
    """The full config being edited"""

    name: str
    version: str
    actions: List[Action] = field(default_factory=list)

    def copy(self) -> "Document":
        return copy.deepcopy(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Build a document from its exported shape. Raises ValueError on a bad shape."""
        _require(isinstance(data, dict), f"config must be an object, got {type(data).__name__}")
        for key in ("name", "version"):
            _require(isinstance(data.get(key), str), f"config {key} must be a string")
        actions = data.get("actions", [])
        _require(isinstance(actions, list), "config actions must be a list")
        return cls(
            name=data["name"],
            version=data["version"],
            actions=[Action.from_dict(item) for item in actions],
        )


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


# Seed used when the editor is started without a document
DEFAULT_DOCUMENT = Document(
    name="exampleConfig",
    version="0.1.8",
    actions=[
        Action(name="rejectOffer1", kind=ActionKind.REJECT_OFFER),
        Action(
            name="BuyerNeedsBathroom",
            kind=ActionKind.SUBMIT_BOT_INSTRUCTION,
            instruction="The Buyer needs to use the bathroom and should say so in the next message.",
        ),
        Action(name="acceptOffer", kind=ActionKind.ACCEPT_OFFER),
        Action(
            name="tell a joke",
            kind=ActionKind.SUBMIT_BOT_INSTRUCTION,
            instruction="The Buyer should tell a joke.",
        ),
    ],
)


def default_document() -> Document:
    """Fresh copy of the seed document"""
    return DEFAULT_DOCUMENT.copy()
