"""Wrappers that track changes of a value or its lifecycle state."""

from __future__ import annotations

import enum
from typing import Any

_UNSET: Any = object()


class ValueTracker:
    """Holds an optional value together with its previous value.

    A tracker is truthy when the value is set and differs from the old value.
    """

    def __init__(self, value: Any = None, old_value: Any = _UNSET) -> None:
        self.value = value
        self.old_value = value if old_value is _UNSET else old_value

    def __bool__(self) -> bool:
        return self.value is not None and self.value != self.old_value

    def __repr__(self) -> str:
        return f"ValueTracker(value={self.value!r}, old_value={self.old_value!r})"


class TrackerState(enum.Enum):
    DELETED = "deleted"
    MODIFIED = "modified"
    ADDED = "added"


class StateTracker:
    """Holds a value together with whether it was added, modified or deleted."""

    def __init__(self, value: Any, state: TrackerState = TrackerState.ADDED) -> None:
        self.value = value
        self.state = state

    @property
    def is_deleted(self) -> bool:
        return self.state is TrackerState.DELETED

    @property
    def is_modified(self) -> bool:
        return self.state is TrackerState.MODIFIED

    @property
    def is_added(self) -> bool:
        return self.state is TrackerState.ADDED

    def mark_deleted(self) -> StateTracker:
        self.state = TrackerState.DELETED
        return self

    def mark_added(self) -> StateTracker:
        self.state = TrackerState.ADDED
        return self

    def mark_modified(self) -> StateTracker:
        self.state = TrackerState.MODIFIED
        return self

    def __repr__(self) -> str:
        return f"StateTracker(value={self.value!r}, state={self.state})"