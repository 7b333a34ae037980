"""Core data models for the Seat Planner application."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SkillLevel(Enum):
    """Skill level of a student."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LayoutKind(Enum):
    """Physical room shape used to place seats."""
    TRADITIONAL_ROWS = "traditional-rows"
    STADIUM = "stadium"
    HORSESHOE = "horseshoe"
    DOUBLE_HORSESHOE = "double-horseshoe"
    CIRCLE = "circle"
    GROUPS = "groups"
    PAIRS = "pairs"

    @classmethod
    def parse(cls, value: "str | LayoutKind | None") -> "LayoutKind":
        """Resolve a layout identifier, falling back to traditional rows."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.TRADITIONAL_ROWS

    @classmethod
    def is_known(cls, value: "str | LayoutKind | None") -> bool:
        if isinstance(value, cls):
            return True
        return str(value).strip().lower() in {k.value for k in cls}


class StrategyKind(Enum):
    """Pedagogical policy used to order students before seating."""
    MIXED_ABILITY = "mixed-ability"
    SKILL_CLUSTERING = "skill-clustering"
    LANGUAGE_SUPPORT = "language-support"
    COLLABORATIVE_PAIRS = "collaborative-pairs"
    ATTENTION_ZONE = "attention-zone"
    BEHAVIOR_MANAGEMENT = "behavior-management"
    RANDOM = "random"

    @classmethod
    def parse(cls, value: "str | StrategyKind | None") -> "StrategyKind":
        """Resolve a strategy identifier, falling back to random."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _LEGACY_STRATEGIES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.RANDOM


# Identifiers used by charts saved with the first schema revision
_LEGACY_STRATEGIES = {
    "mixed": "mixed-ability",
    "skill-based": "skill-clustering",
    "collaborative": "collaborative-pairs",
}


@dataclass
class Student:
    """A student with languages, skill level and pairing preferences."""
    id: str
    name: str
    primary_language: str = ""
    secondary_languages: list[str] = field(default_factory=list)
    skill_level: SkillLevel = SkillLevel.BEGINNER
    works_well_with: list[str] = field(default_factory=list)  # names, not ids
    avoid_pairing: list[str] = field(default_factory=list)    # names, not ids
    notes: str = ""

    @property
    def languages(self) -> list[str]:
        """Primary language followed by all secondary languages."""
        return [self.primary_language, *self.secondary_languages]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "primaryLanguage": self.primary_language,
            "secondaryLanguages": self.secondary_languages,
            "skillLevel": self.skill_level.value,
            "worksWellWith": self.works_well_with,
            "avoidPairing": self.avoid_pairing,
            "notes": self.notes
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            primary_language=data.get("primaryLanguage", ""),
            secondary_languages=data.get("secondaryLanguages", []),
            skill_level=SkillLevel(data.get("skillLevel", "beginner")),
            works_well_with=data.get("worksWellWith", []),
            avoid_pairing=data.get("avoidPairing", []),
            notes=data.get("notes", "")
        )


@dataclass
class Seat:
    """A seat index with an optional assigned student."""
    position: int
    student_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "studentId": self.student_id
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Seat":
        return cls(
            position=int(data["position"]),
            student_id=data.get("studentId")
        )


@dataclass
class SeatPosition:
    """Room coordinates of a seat, independent of who sits there."""
    position: int
    x: float
    y: float
    rotation: Optional[float] = None

    def to_dict(self) -> dict:
        data = {"position": self.position, "x": self.x, "y": self.y}
        if self.rotation is not None:
            data["rotation"] = self.rotation
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SeatPosition":
        return cls(
            position=int(data["position"]),
            x=float(data["x"]),
            y=float(data["y"]),
            rotation=data.get("rotation")
        )


@dataclass
class ValidationResult:
    """Avoid-pairing violations found in an arrangement."""
    is_valid: bool
    violations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "violations": self.violations}


@dataclass
class EffectivenessReport:
    """Heuristic score of an arrangement with explanatory insights."""
    score: int
    insights: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"score": self.score, "insights": self.insights}


@dataclass
class SeatingChart:
    """A generated chart: seat assignments plus their geometry."""
    name: str = ""
    layout: LayoutKind = LayoutKind.TRADITIONAL_ROWS
    strategy: StrategyKind = StrategyKind.RANDOM
    seats: list[Seat] = field(default_factory=list)
    positions: list[SeatPosition] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "layout": self.layout.value,
            "strategy": self.strategy.value,
            "seats": [s.to_dict() for s in self.seats],
            "positions": [p.to_dict() for p in self.positions]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SeatingChart":
        return cls(
            name=data.get("name", ""),
            layout=LayoutKind.parse(data.get("layout")),
            strategy=StrategyKind.parse(data.get("strategy")),
            seats=[Seat.from_dict(s) for s in data.get("seats", [])],
            positions=[SeatPosition.from_dict(p) for p in data.get("positions", [])]
        )

    def student_at(self, position: int) -> Optional[str]:
        """Get the student id seated at a position."""
        for seat in self.seats:
            if seat.position == position:
                return seat.student_id
        return None

    def position_of(self, student_id: str) -> Optional[int]:
        """Get the seat position of a student."""
        for seat in self.seats:
            if seat.student_id == student_id:
                return seat.position
        return None


@dataclass
class ColumnMapping:
    """Mapping from spreadsheet columns to student fields."""
    id_column: str = ""  # Optional: ids are generated when empty
    name_column: str = ""
    primary_language_column: str = ""
    secondary_languages_column: str = ""
    skill_level_column: str = ""
    works_well_with_column: str = ""
    avoid_pairing_column: str = ""
    notes_column: str = ""

    def to_dict(self) -> dict:
        return {
            "id_column": self.id_column,
            "name_column": self.name_column,
            "primary_language_column": self.primary_language_column,
            "secondary_languages_column": self.secondary_languages_column,
            "skill_level_column": self.skill_level_column,
            "works_well_with_column": self.works_well_with_column,
            "avoid_pairing_column": self.avoid_pairing_column,
            "notes_column": self.notes_column
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ColumnMapping":
        return cls(
            id_column=data.get("id_column", ""),
            name_column=data.get("name_column", ""),
            primary_language_column=data.get("primary_language_column", ""),
            secondary_languages_column=data.get("secondary_languages_column", ""),
            skill_level_column=data.get("skill_level_column", ""),
            works_well_with_column=data.get("works_well_with_column", ""),
            avoid_pairing_column=data.get("avoid_pairing_column", ""),
            notes_column=data.get("notes_column", "")
        )

    def used_columns(self) -> list[str]:
        """Columns the mapping refers to, in field order."""
        return [c for c in self.to_dict().values() if c]
