"""
Name uniqueness checks over an action list.
"""

from collections import Counter
from typing import Iterable, Optional, Set

from config import Config
from action_config.action_model import Action


def is_blank(name: str, strip_whitespace: Optional[bool] = None) -> bool:
    """Blank names are placeholders and never count as duplicates"""
    if strip_whitespace is None:
        strip_whitespace = Config.WHITESPACE_NAMES_ARE_BLANK
    if strip_whitespace:
        return name.strip() == ""
    return name == ""


def find_duplicates(actions: Iterable[Action], strip_whitespace: Optional[bool] = None) -> Set[str]:
    """
    Return the non-blank names used by more than one action.

    Names are compared exactly, so "x" and "x " are different names.
    """
    counts = Counter(
        action.name for action in actions
        if not is_blank(action.name, strip_whitespace)
    )
    return {name for name, count in counts.items() if count > 1}
