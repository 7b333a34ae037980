"""Shared fixtures for the seat planner tests."""

import pytest

from seat_planner.models import SkillLevel, Student


def make_student(
    name: str,
    skill: str = "intermediate",
    *,
    language: str = "English",
    secondary: list[str] | None = None,
    works_well_with: list[str] | None = None,
    avoid: list[str] | None = None,
    notes: str = "",
) -> Student:
    return Student(
        id=name.lower(),
        name=name,
        primary_language=language,
        secondary_languages=secondary or [],
        skill_level=SkillLevel(skill),
        works_well_with=works_well_with or [],
        avoid_pairing=avoid or [],
        notes=notes,
    )


@pytest.fixture
def student():
    """Factory for students whose id is their lower-cased name."""
    return make_student


@pytest.fixture
def classroom() -> list[Student]:
    """A mixed class of ten with languages, partners and conflicts."""
    return [
        make_student("Alice", "advanced", avoid=["Bob"], works_well_with=["Carla"]),
        make_student("Bob", "beginner", language="Spanish"),
        make_student("Carla", "intermediate", language="Spanish", secondary=["English"]),
        make_student("Dan", "beginner", notes="Needs extra support with fractions"),
        make_student("Eve", "advanced", avoid=["dan", "Frank"]),
        make_student("Frank", "intermediate", language="German"),
        make_student("Gina", "beginner", language="German", works_well_with=["Hugo", "Nobody"]),
        make_student("Hugo", "advanced", notes="Pay ATTENTION to seating"),
        make_student("Ines", "intermediate", language="Spanish"),
        make_student("Jon", "advanced", language="Polish"),
    ]
