"""Tests for roster import."""

import pytest

from seat_planner.models import ColumnMapping, SkillLevel
from seat_planner.roster import (
    default_mapping, import_students, parse_name_list, read_roster_columns,
    read_roster_preview,
)

ROSTER_CSV = """id,name,primaryLanguage,secondaryLanguages,skillLevel,worksWellWith,avoidPairing,notes
s1,Alice,English,"French, German",advanced,Carla,Bob,
s2,Bob,Spanish,,Beginner,,,needs support
s3,,English,,advanced,,,no name here
s4,Carla,Spanish,English,expert,"Alice,  ",,
"""


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER_CSV, encoding="utf-8")
    return path


def test_parse_name_list():
    assert parse_name_list("Ana, Ben ,, Cruz") == ["Ana", "Ben", "Cruz"]
    assert parse_name_list("") == []
    assert parse_name_list(None) == []
    assert parse_name_list(float("nan")) == []


def test_read_columns_and_preview(roster_file):
    columns = read_roster_columns(roster_file)
    assert columns[:3] == ["id", "name", "primaryLanguage"]
    assert len(read_roster_preview(roster_file, rows=2)) == 2


def test_default_mapping_uses_present_columns():
    mapping = default_mapping(["name", "skillLevel", "Unrelated"])
    assert mapping.name_column == "name"
    assert mapping.skill_level_column == "skillLevel"
    assert mapping.id_column == ""
    assert mapping.used_columns() == ["name", "skillLevel"]


def test_default_mapping_ignores_case_and_spacing():
    mapping = default_mapping(["Name", "Primary Language", " SKILLLEVEL ", "avoid-pairing"])
    assert mapping.name_column == "Name"
    assert mapping.primary_language_column == "Primary Language"
    assert mapping.skill_level_column == " SKILLLEVEL "
    assert mapping.avoid_pairing_column == "avoid-pairing"


def test_import_with_capitalized_headers(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(
        "Name,Primary Language,Skill Level,Avoid Pairing\n"
        "Ana,Spanish,Advanced,Ben\n"
        "Ben,English,beginner,\n",
        encoding="utf-8",
    )
    students = import_students(path, default_mapping(read_roster_columns(path)))
    assert [s.name for s in students] == ["Ana", "Ben"]
    assert students[0].primary_language == "Spanish"
    assert students[0].skill_level == SkillLevel.ADVANCED
    assert students[0].avoid_pairing == ["Ben"]


def test_import_requires_name_column(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("student,skillLevel\nAna,advanced\n", encoding="utf-8")
    with pytest.raises(ValueError, match="No name column mapped"):
        import_students(path, default_mapping(read_roster_columns(path)))


def test_import_students(roster_file):
    students = import_students(roster_file, default_mapping(read_roster_columns(roster_file)))
    assert [s.name for s in students] == ["Alice", "Bob", "Carla"]

    alice, bob, carla = students
    assert alice.id == "s1"
    assert alice.secondary_languages == ["French", "German"]
    assert alice.works_well_with == ["Carla"]
    assert alice.avoid_pairing == ["Bob"]
    assert alice.notes == ""

    assert bob.skill_level == SkillLevel.BEGINNER
    assert bob.secondary_languages == []
    assert bob.notes == "needs support"

    # unknown skill level falls back to beginner
    assert carla.skill_level == SkillLevel.BEGINNER
    assert carla.works_well_with == ["Alice"]


def test_import_generates_missing_ids(tmp_path):
    path = tmp_path / "names.csv"
    path.write_text("name,skillLevel\nAna,advanced\nBen,intermediate\n", encoding="utf-8")
    students = import_students(path, ColumnMapping(name_column="name", skill_level_column="skillLevel"))
    assert len({s.id for s in students}) == 2
    assert all(s.id for s in students)


def test_import_rejects_missing_columns(roster_file):
    with pytest.raises(ValueError, match="Missing columns"):
        import_students(roster_file, ColumnMapping(name_column="full_name"))


def test_import_excel(tmp_path):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("openpyxl")
    path = tmp_path / "roster.xlsx"
    pd.DataFrame({"name": ["Ana", "Ben"], "skillLevel": ["advanced", "beginner"]}).to_excel(path, index=False)
    students = import_students(path, default_mapping(read_roster_columns(path)))
    assert [(s.name, s.skill_level) for s in students] == [
        ("Ana", SkillLevel.ADVANCED),
        ("Ben", SkillLevel.BEGINNER),
    ]
