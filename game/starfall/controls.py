"""
Input tracking: raw key events in, named held-flags out
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Hashable, Mapping, Optional


class Control(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    FIRE = "fire"


class InputTracker:
    """
    Held state for the fixed set of game controls.

    Hosts translate their own key identifiers through ``bindings``; anything
    unbound is ignored. The update step only ever reads the flags.
    """

    def __init__(self, bindings: Optional[Mapping[Hashable, Control]] = None):
        self.bindings: Dict[Hashable, Control] = dict(bindings or {})
        self._held: Dict[Control, bool] = {c: False for c in Control}

    def set_held(self, control, held: bool) -> None:
        control = self._coerce(control)
        if control is not None:
            self._held[control] = bool(held)

    def is_held(self, control) -> bool:
        control = self._coerce(control)
        if control is None:
            return False
        return self._held[control]

    def press(self, key: Hashable) -> None:
        control = self.bindings.get(key)
        if control is not None:
            self._held[control] = True

    def release(self, key: Hashable) -> None:
        control = self.bindings.get(key)
        if control is not None:
            self._held[control] = False

    def release_all(self) -> None:
        for control in Control:
            self._held[control] = False

    def snapshot(self) -> Dict[Control, bool]:
        """Copy of the flags, read once at the start of a frame"""
        return dict(self._held)

    @staticmethod
    def _coerce(control) -> Optional[Control]:
        if isinstance(control, Control):
            return control
        try:
            return Control(control)
        except ValueError:
            return None
