"""Recorded edits and the stacks used for undo and redo."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ActionType(enum.Enum):
    """The kinds of edit that can be undone."""

    INSERT_CHAR = enum.auto()
    DELETE_CHAR = enum.auto()
    INSERT_ROW = enum.auto()
    DELETE_ROW = enum.auto()
    SPLIT_ROW = enum.auto()
    JOIN_ROWS = enum.auto()


@dataclass(frozen=True)
class Action:
    """One edit: where it happened and the text needed to reverse it."""

    type: ActionType
    row: int = 0
    col: int = 0
    data: str = ""
    original_row1_size: int = 0


class History:
    """A last-in, first-out stack of actions."""

    def __init__(self) -> None:
        self._actions: list[Action] = []

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"History({self._actions!r})"

    def push(self, action: Action) -> None:
        """Record an action on top of the stack."""
        self._actions.append(action)

    def pop(self) -> Action:
        """Remove and return the most recent action."""
        if not self._actions:
            raise IndexError("pop from empty history")
        return self._actions.pop()

    def clear(self) -> None:
        """Forget every recorded action."""
        self._actions.clear()