"""Roster import from CSV and Excel files."""

import logging
import re
import uuid
from pathlib import Path

import pandas as pd

from .models import ColumnMapping, SkillLevel, Student

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = ('.xlsx', '.xls')

# Column headers written by the roster export of the web app
DEFAULT_COLUMNS = {
    "id_column": "id",
    "name_column": "name",
    "primary_language_column": "primaryLanguage",
    "secondary_languages_column": "secondaryLanguages",
    "skill_level_column": "skillLevel",
    "works_well_with_column": "worksWellWith",
    "avoid_pairing_column": "avoidPairing",
    "notes_column": "notes",
}


def _read(path: str | Path, **kwargs) -> pd.DataFrame:
    if Path(path).suffix.lower() in EXCEL_SUFFIXES:
        return pd.read_excel(path, **kwargs)
    return pd.read_csv(path, **kwargs)


def read_roster_columns(path: str | Path) -> list[str]:
    """Read column names from a roster file."""
    df = _read(path, nrows=0)
    return list(df.columns)


def read_roster_preview(path: str | Path, rows: int = 5) -> pd.DataFrame:
    """Read the first rows of a roster file."""
    return _read(path, nrows=rows)


def header_key(header: str) -> str:
    """Compare headers ignoring case, spaces and punctuation."""
    return re.sub(r'[^a-z0-9_]', '', str(header).strip().lower())


def default_mapping(columns: list[str]) -> ColumnMapping:
    """Map every default header that is present in *columns*.

    Matching ignores case, spaces and punctuation, so "Primary Language"
    maps to primaryLanguage. The file's own header is kept in the mapping.
    """
    present = {}
    for column in columns:
        present.setdefault(header_key(column), column)
    return ColumnMapping.from_dict({
        field: present[header_key(header)]
        for field, header in DEFAULT_COLUMNS.items()
        if header_key(header) in present
    })


def _cell(row: pd.Series, column: str) -> str:
    if not column:
        return ""
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def parse_name_list(value: str | None) -> list[str]:
    """Parse a comma-separated list of names or languages."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return []
    return [part.strip() for part in str(value).split(',') if part.strip()]


def parse_skill_level(value: str) -> SkillLevel | None:
    try:
        return SkillLevel(value.strip().lower())
    except ValueError:
        return None


def import_students(path: str | Path, mapping: ColumnMapping) -> list[Student]:
    """Import students from a roster file using the given column mapping."""
    if not mapping.name_column:
        raise ValueError("No name column mapped")

    df = _read(path, dtype=str)

    missing = [c for c in mapping.used_columns() if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {', '.join(missing)}")

    students = []
    for index, row in df.iterrows():
        name = _cell(row, mapping.name_column)
        if not name:
            logger.warning(f"Row {index + 2}: no name, skipped")
            continue

        skill_text = _cell(row, mapping.skill_level_column)
        skill_level = parse_skill_level(skill_text)
        if skill_level is None:
            logger.warning(f"Row {index + 2}: unknown skill level {skill_text!r} for {name}, using beginner")
            skill_level = SkillLevel.BEGINNER

        students.append(Student(
            id=_cell(row, mapping.id_column) or str(uuid.uuid4()),
            name=name,
            primary_language=_cell(row, mapping.primary_language_column),
            secondary_languages=parse_name_list(_cell(row, mapping.secondary_languages_column)),
            skill_level=skill_level,
            works_well_with=parse_name_list(_cell(row, mapping.works_well_with_column)),
            avoid_pairing=parse_name_list(_cell(row, mapping.avoid_pairing_column)),
            notes=_cell(row, mapping.notes_column)
        ))

    logger.info(f"Imported {len(students)} students from {path}")
    return students
