"""Stable backend boundary for a board UI.

Only speaks JSON-friendly structures:
- state snapshots
- action encode/decode
- apply/click producing diffs suitable for animation
"""

from .facade import CrusaderEngine, diff
from .serde import action_to_dict, dict_to_action, snapshot, MalformedActionError

__all__ = ["CrusaderEngine", "diff", "action_to_dict", "dict_to_action", "snapshot", "MalformedActionError"]
