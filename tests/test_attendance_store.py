# tests/test_attendance_store.py

import pytest

import core.attendance_store as store
from core.errors import DuplicateIdError, InvalidStatusError, UnknownIdError
from models.aggregates import Aggregates
from models.student import AttendanceStatus, Student

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT
LATE = AttendanceStatus.LATE
UNMARKED = AttendanceStatus.UNMARKED


# === initialize ===


def test_initialize_marks_every_student_unmarked(sample_roster):
    attendance = store.initialize(sample_roster)

    assert list(attendance) == ["a", "b", "c"]
    assert all(status is UNMARKED for status in attendance.values())


def test_initialize_empty_roster():
    assert store.initialize([]) == {}


def test_initialize_rejects_duplicate_ids(duplicate_roster):
    with pytest.raises(DuplicateIdError) as exc_info:
        store.initialize(duplicate_roster)

    assert exc_info.value.duplicate_ids == ["a"]


# === reconcile ===


def test_reconcile_keeps_known_adds_new_drops_stale(sample_roster):
    previous = {"a": PRESENT, "b": LATE, "c": ABSENT}
    new_roster = [sample_roster[0], sample_roster[2], Student("d", "Karan Singh", "04")]

    reconciled = store.reconcile(previous, new_roster)

    assert reconciled == {"a": PRESENT, "c": ABSENT, "d": UNMARKED}


def test_reconcile_is_idempotent(sample_roster):
    previous = {"a": PRESENT, "z": LATE}

    once = store.reconcile(previous, sample_roster)
    twice = store.reconcile(once, sample_roster)

    assert once == twice


def test_reconcile_is_order_independent(sample_roster):
    previous = {"a": PRESENT, "b": ABSENT}

    forward = store.reconcile(previous, sample_roster)
    backward = store.reconcile(previous, list(reversed(sample_roster)))

    assert forward == backward


def test_reconcile_accepts_raw_status_values(sample_roster):
    reconciled = store.reconcile({"a": "present", "b": None}, sample_roster)

    assert reconciled == {"a": PRESENT, "b": UNMARKED, "c": UNMARKED}


def test_reconcile_does_not_mutate_previous(sample_roster):
    previous = {"a": PRESENT, "z": LATE}

    store.reconcile(previous, sample_roster)

    assert previous == {"a": PRESENT, "z": LATE}


def test_reconcile_rejects_duplicate_ids(duplicate_roster):
    with pytest.raises(DuplicateIdError):
        store.reconcile({}, duplicate_roster)


# === set_status ===


def test_set_status_updates_only_target(sample_roster):
    attendance = store.initialize(sample_roster)

    updated = store.set_status(attendance, "b", ABSENT)

    assert updated == {"a": UNMARKED, "b": ABSENT, "c": UNMARKED}
    assert attendance["b"] is UNMARKED


def test_set_status_with_none_unmarks(sample_roster):
    attendance = store.mark_all(sample_roster, PRESENT)

    updated = store.set_status(attendance, "a", None)

    assert updated["a"] is UNMARKED


def test_set_status_rejects_unknown_id(sample_roster):
    attendance = store.initialize(sample_roster)

    with pytest.raises(UnknownIdError) as exc_info:
        store.set_status(attendance, "zz", PRESENT)

    assert exc_info.value.student_id == "zz"


def test_set_status_rejects_invalid_status(sample_roster):
    attendance = store.initialize(sample_roster)

    with pytest.raises(InvalidStatusError):
        store.set_status(attendance, "a", "excused")


@pytest.mark.parametrize("status", [PRESENT, ABSENT, LATE, UNMARKED])
def test_set_status_moves_one_count(sample_roster, status):
    attendance = {"a": PRESENT, "b": ABSENT, "c": UNMARKED}
    before = store.compute_aggregates(attendance)

    after = store.compute_aggregates(store.set_status(attendance, "b", status))

    assert after.total == before.total
    assert after.absent == before.absent - (0 if status is ABSENT else 1)
    if status is PRESENT:
        assert after.present == before.present + 1
    if status is LATE:
        assert after.late == before.late + 1
    if status is UNMARKED:
        assert after.marked == before.marked - 1


# === toggle_status ===


def test_toggle_status_sets_then_unmarks(sample_roster):
    attendance = store.initialize(sample_roster)

    toggled = store.toggle_status(attendance, "a", LATE)
    assert toggled["a"] is LATE

    toggled_back = store.toggle_status(toggled, "a", LATE)
    assert toggled_back["a"] is UNMARKED


@pytest.mark.parametrize("status", [PRESENT, ABSENT, LATE])
def test_toggle_status_twice_restores_unmarked(status):
    attendance = {"a": UNMARKED}

    once = store.toggle_status(attendance, "a", status)
    twice = store.toggle_status(once, "a", status)

    assert once == {"a": status}
    assert twice == attendance


@pytest.mark.parametrize("status", [PRESENT, ABSENT, LATE])
def test_toggle_status_twice_restores_marked(status):
    attendance = {"a": status}

    twice = store.toggle_status(store.toggle_status(attendance, "a", status), "a", status)

    assert twice == attendance


def test_toggle_status_switches_between_statuses(sample_roster):
    attendance = store.mark_all(sample_roster, PRESENT)

    toggled = store.toggle_status(attendance, "c", ABSENT)

    assert toggled["c"] is ABSENT


def test_toggle_status_rejects_unknown_id(sample_roster):
    with pytest.raises(UnknownIdError):
        store.toggle_status(store.initialize(sample_roster), "zz", PRESENT)


# === bulk operations ===


@pytest.mark.parametrize("status", [PRESENT, ABSENT, LATE])
def test_mark_all_completes_roster(sample_roster, status):
    aggregates = store.compute_aggregates(store.mark_all(sample_roster, status))

    assert aggregates.completion_percent == 100
    assert aggregates.to_dict()[status.value] == len(sample_roster)


def test_mark_all_accepts_string_status(sample_roster):
    attendance = store.mark_all(sample_roster, "late")

    assert set(attendance.values()) == {LATE}


def test_mark_all_rejects_invalid_status(sample_roster):
    with pytest.raises(InvalidStatusError):
        store.mark_all(sample_roster, "tardy")


def test_clear_all_resets_completion(sample_roster):
    attendance = store.clear_all(sample_roster)

    assert attendance == store.initialize(sample_roster)
    assert store.compute_aggregates(attendance).completion_percent == 0


# === compute_aggregates ===


def test_worked_example(sample_roster):
    attendance = store.mark_all(sample_roster, "present")
    assert store.compute_aggregates(attendance) == Aggregates(3, 0, 0, 3)
    assert store.compute_aggregates(attendance).completion_percent == 100

    attendance = store.set_status(attendance, "b", "absent")
    assert store.compute_aggregates(attendance) == Aggregates(2, 1, 0, 3)
    assert store.compute_aggregates(attendance).completion_percent == 100

    attendance = store.toggle_status(attendance, "b", "absent")
    assert attendance["b"] is UNMARKED
    assert store.compute_aggregates(attendance) == Aggregates(2, 0, 0, 3)
    assert store.compute_aggregates(attendance).completion_percent == 67


def test_aggregates_of_empty_map():
    aggregates = store.compute_aggregates({})

    assert aggregates.total == 0
    assert aggregates.completion_percent == 0


# === payload helpers ===


def test_to_payload_uses_none_for_unmarked():
    payload = store.to_payload({"a": PRESENT, "b": UNMARKED})

    assert payload == {"a": "present", "b": None}


def test_ids_with_status():
    attendance = {"a": PRESENT, "b": LATE, "c": PRESENT}

    assert store.ids_with_status(attendance, "present") == ["a", "c"]
    assert store.ids_with_status(attendance, None) == []


# === raw map values ===


def test_compute_aggregates_counts_raw_status_strings():
    aggregates = store.compute_aggregates({"a": "Present", "b": "late", "c": None})

    assert aggregates == Aggregates(present=1, absent=0, late=1, total=3)
    assert aggregates.completion_percent == 67


def test_compute_aggregates_rejects_invalid_values():
    with pytest.raises(InvalidStatusError):
        store.compute_aggregates({"a": "Present", "b": "bogus"})


def test_set_status_rejects_invalid_existing_values():
    with pytest.raises(InvalidStatusError):
        store.set_status({"a": UNMARKED, "b": "bogus"}, "a", PRESENT)


def test_set_status_normalizes_existing_values():
    updated = store.set_status({"a": UNMARKED, "b": "Absent"}, "a", PRESENT)

    assert updated == {"a": PRESENT, "b": ABSENT}


def test_toggle_status_matches_raw_current_value():
    toggled = store.toggle_status({"a": "Late"}, "a", LATE)

    assert toggled == {"a": UNMARKED}


def test_toggle_status_rejects_invalid_current_value():
    with pytest.raises(InvalidStatusError):
        store.toggle_status({"a": "bogus"}, "a", LATE)
