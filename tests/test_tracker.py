from alienbase.tracker import StateTracker, TrackerState, ValueTracker


def test_value_tracker_unchanged_is_false():
    tracker = ValueTracker(5)
    assert tracker.value == 5
    assert tracker.old_value == 5
    assert not tracker


def test_value_tracker_change_is_true():
    tracker = ValueTracker(5)
    tracker.value = 6
    assert bool(tracker) is True
    assert tracker.old_value == 5


def test_value_tracker_set_back_to_old_is_false():
    tracker = ValueTracker("a")
    tracker.value = "b"
    tracker.value = "a"
    assert not tracker


def test_value_tracker_empty_is_false():
    assert not ValueTracker()
    assert ValueTracker().value is None


def test_value_tracker_with_explicit_old_value():
    changed = ValueTracker(value=2, old_value=1)
    assert changed.value == 2
    assert changed.old_value == 1
    assert bool(changed) is True

    emptied = ValueTracker(value=None, old_value=1)
    assert emptied.value is None
    assert emptied.old_value == 1
    assert bool(emptied) is False

    filled = ValueTracker(value=1, old_value=None)
    assert filled.value == 1
    assert filled.old_value is None
    assert bool(filled) is True


def test_state_tracker_default_added():
    tracker = StateTracker([1, 2])
    assert tracker.is_added
    assert not tracker.is_deleted
    assert not tracker.is_modified
    assert tracker.state is TrackerState.ADDED


def test_state_tracker_transitions_chain():
    tracker = StateTracker("cell")
    assert tracker.mark_deleted() is tracker
    assert tracker.is_deleted and not tracker.is_added
    assert tracker.mark_modified().is_modified
    assert tracker.mark_added().is_added
    assert tracker.value == "cell"


def test_state_tracker_explicit_state():
    tracker = StateTracker(3, TrackerState.MODIFIED)
    assert tracker.is_modified
    tracker.value = 4
    assert tracker.value == 4
    assert tracker.is_modified