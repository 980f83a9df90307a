#===============================================================================
#  Group_Launcher | selection.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Selection state machine for the group chooser. Pure functions only: every
#  key event produces a new SelectionState from the previous one.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


class Mode(Enum):
    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class KeyEvent(Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"


# prompt_toolkit key names -> events
KEY_BINDINGS: Dict[str, KeyEvent] = {
    "up": KeyEvent.UP,
    "k": KeyEvent.UP,
    "down": KeyEvent.DOWN,
    "j": KeyEvent.DOWN,
    "enter": KeyEvent.CONFIRM,
    "q": KeyEvent.CANCEL,
    "escape": KeyEvent.CANCEL,
    "c-c": KeyEvent.CANCEL,
}


@dataclass(frozen=True)
class SelectionState:
    group_count: int
    selected_group_index: int = 0
    mode: Mode = Mode.BROWSING

    @property
    def finished(self) -> bool:
        return self.mode is not Mode.BROWSING

    @property
    def confirmed_index(self) -> Optional[int]:
        return self.selected_group_index if self.mode is Mode.CONFIRMED else None


def initial_state(group_count: int) -> SelectionState:
    if group_count < 0:
        raise ValueError("group_count must be >= 0")
    return SelectionState(group_count=group_count)


def transition(state: SelectionState, event: KeyEvent) -> SelectionState:
    """Apply one key event.

    Navigation wraps around both ends of the list. With zero groups,
    navigation and confirm are no-ops; only cancel leaves Browsing.
    Confirmed and Cancelled are terminal and absorb every event.
    """
    if state.finished:
        return state

    if event is KeyEvent.CANCEL:
        return replace(state, mode=Mode.CANCELLED)

    if state.group_count == 0:
        return state

    if event is KeyEvent.UP:
        return replace(state, selected_group_index=(state.selected_group_index - 1) % state.group_count)
    if event is KeyEvent.DOWN:
        return replace(state, selected_group_index=(state.selected_group_index + 1) % state.group_count)
    if event is KeyEvent.CONFIRM:
        return replace(state, mode=Mode.CONFIRMED)
    return state
