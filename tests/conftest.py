# tests/conftest.py

import datetime

import pytest

from models.attendance_tracker import AttendanceTracker
from models.student import Student


@pytest.fixture
def sample_student():
    return Student("s1", "Aisha Verma", "01")


@pytest.fixture
def sample_roster():
    return [
        Student("a", "Aisha Verma", "01"),
        Student("b", "Rahul Sharma", "02"),
        Student("c", "Meera Patel", "03"),
    ]


@pytest.fixture
def duplicate_roster():
    return [
        Student("a", "Aisha Verma", "01"),
        Student("a", "Rahul Sharma", "02"),
    ]


@pytest.fixture
def class_date():
    return datetime.date(2025, 9, 1)


@pytest.fixture
def change_log():
    return []


@pytest.fixture
def sample_tracker(sample_roster, class_date, change_log):
    return AttendanceTracker(
        students=sample_roster,
        date=class_date,
        on_attendance_change=change_log.append,
    )
