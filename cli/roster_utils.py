# cli/roster_utils.py

"""
Roster sources for the CLI: a built-in sample class, or a JSON file on disk.

A roster file holds a JSON list of objects with "id", "name", and "roll" keys.
"""

import json
import os

from models.student import Student

SAMPLE_ROSTER: tuple[Student, ...] = (
    Student("s1", "Aisha Verma", "01"),
    Student("s2", "Rahul Sharma", "02"),
    Student("s3", "Meera Patel", "03"),
    Student("s4", "Karan Singh", "04"),
    Student("s5", "Sneha Rao", "05"),
    Student("s6", "Aditya Gupta", "06"),
    Student("s7", "Nisha Jain", "07"),
    Student("s8", "Vikram Desai", "08"),
)


def resolve_roster_path(user_input: str) -> str:
    """
    Expands `~` and relative segments in a user-supplied roster path.

    Returns:
        An absolute path string.
    """
    return os.path.abspath(os.path.expanduser(user_input.strip()))


def load_roster(file_path: str) -> list[Student]:
    """
    Reads a roster JSON file.

    Args:
        file_path (str): Path to a JSON file containing a list of student objects.

    Returns:
        list[Student]: The students, in file order.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON or does not hold a list of student objects.
    """
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("Roster file must contain a JSON list of students.")

    try:
        return [Student.from_dict(entry) for entry in data]

    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed student entry in roster file: {e}")
