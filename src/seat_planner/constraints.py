"""Name-based pairing relations between students.

Works-well-with and avoid-pairing lists hold display names rather than ids.
They are resolved lazily against the current roster by case-insensitive exact
match; names that match nobody are simply ignored.
"""

from typing import Iterable, Optional

from .models import Student


def normalize_name(name: str) -> str:
    return name.strip().casefold()


def avoids(student: Student, other: Student) -> bool:
    """True if *student* declared that they should not sit next to *other*."""
    other_name = normalize_name(other.name)
    return any(normalize_name(n) == other_name for n in student.avoid_pairing)


def has_avoid_conflict(a: Student, b: Student) -> bool:
    """True if either student's avoid-pairing list names the other."""
    return avoids(a, b) or avoids(b, a)


def conflicts_with_any(candidate: Student, others: Iterable[Student]) -> bool:
    return any(has_avoid_conflict(candidate, o) for o in others)


def find_student_by_name(
    name: str,
    students: Iterable[Student],
    exclude_ids: Iterable[str] = (),
) -> Optional[Student]:
    """Return the first student whose name matches, skipping excluded ids."""
    target = normalize_name(name)
    excluded = set(exclude_ids)
    for student in students:
        if student.id in excluded:
            continue
        if normalize_name(student.name) == target:
            return student
    return None
