# cli/model_formatters.py

# anything that renders domain objects or performs AttendanceTracker read-only operations
from textwrap import dedent
from typing import Any

import core.formatters as formatters
from models.aggregates import Aggregates
from models.attendance_tracker import AttendanceTracker
from models.class_section import ClassSection
from models.student import AttendanceStatus, Student

# === student formatters ===


def format_status_badge(status: AttendanceStatus) -> str:
    return f"[{status.label.upper()}]"


def format_roster_header() -> str:
    return f"    {'Student':<24} | {'Roll':<5} | Status"


def format_student_row(student: Student, status: AttendanceStatus) -> str:
    badge = format_status_badge(status)

    return f"({student.initials:<2}) {student.name:<24} | {student.roll:<5} | {badge}"


# === class section formatters ===


def format_class_section_oneline(section: ClassSection) -> str:
    return f"{section.id:<4} | {section.label}"


# === tracker formatters ===


def format_tracker_heading(tracker: AttendanceTracker) -> str:
    class_label = tracker.selected_class.label if tracker.selected_class else "[NO CLASS]"

    return dedent(
        f"""\
        ... Day: {tracker.day_name}
        ... Date: {tracker.formatted_date}
        ... Class: {class_label}"""
    )


def format_summary_cards(cards: list[dict[str, Any]]) -> str:
    return "\n".join(
        f"{card['label']:<8} {card['value']:>4}   {card['subtext']}" for card in cards
    )


def format_summary_footer(aggregates: Aggregates) -> str:
    percent = aggregates.completion_percent

    return (
        f"{aggregates.total} students | "
        f"Present: {aggregates.present} | "
        f"Absent: {aggregates.absent} | "
        f"Late: {aggregates.late} | "
        f"Completion: {formatters.format_completion_bar(percent)} "
        f"{formatters.format_percent(percent)}"
    )
