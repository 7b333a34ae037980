"""Arrangement strategies: turn a roster into a linear seating order.

Every strategy is total: each input student appears in the result exactly
once. Position 0 is the front of the room for every layout, so strategies
that care about the front place those students first.

Conflict-aware strategies share ``GreedyPlacement``, which checks a
candidate against the last few placed students (the lookback window) and
can defer or space out a candidate that would sit next to someone they
should avoid. This is a heuristic, not a solver: residual conflicts are
reported by the validator afterwards.
"""

import logging
import random
from typing import Callable, Iterable, Optional

from .constraints import conflicts_with_any, find_student_by_name, has_avoid_conflict
from .models import SkillLevel, Student, StrategyKind

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared greedy placement with a lookback window
# ---------------------------------------------------------------------------

class GreedyPlacement:
    """An ordered placement of students that tracks who is already seated."""

    def __init__(self) -> None:
        self.order: list[Student] = []
        self._placed: set[str] = set()

    def __len__(self) -> int:
        return len(self.order)

    def is_placed(self, student: Student) -> bool:
        return student.id in self._placed

    def recent(self, window: int) -> list[Student]:
        return self.order[-window:] if window > 0 else []

    def conflicts_with_recent(self, candidate: Student, window: int) -> bool:
        return conflicts_with_any(candidate, self.recent(window))

    def place(self, student: Student) -> bool:
        if self.is_placed(student):
            return False
        self.order.append(student)
        self._placed.add(student.id)
        return True

    def try_place(self, student: Student, window: int) -> bool:
        """Append *student* unless they conflict with the last *window* placed."""
        if self.is_placed(student) or self.conflicts_with_recent(student, window):
            return False
        return self.place(student)

    def insert_back(self, student: Student, offset: int) -> bool:
        """Insert *student* *offset* positions back from the tail."""
        if self.is_placed(student):
            return False
        index = max(0, len(self.order) - offset)
        self.order.insert(index, student)
        self._placed.add(student.id)
        return True

    def place_with_spacing(self, student: Student, window: int, offset: int) -> bool:
        """Append, or insert *offset* back if appending would create a conflict."""
        if self.conflicts_with_recent(student, window):
            return self.insert_back(student, offset)
        return self.place(student)

    def place_remaining(
        self,
        students: Iterable[Student],
        window: int = 0,
        offset: int = 0,
    ) -> None:
        """Place every not-yet-placed student, in the given order."""
        for student in students:
            if self.is_placed(student):
                continue
            if window and offset:
                self.place_with_spacing(student, window, offset)
            else:
                self.place(student)


def _unique(students: Iterable[Student]) -> list[Student]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for student in students:
        if student.id not in seen:
            seen.add(student.id)
            result.append(student)
    return result


def _by_skill(students: list[Student], level: SkillLevel) -> list[Student]:
    return [s for s in students if s.skill_level == level]


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def mixed_ability(students: list[Student]) -> list[Student]:
    """Alternate advanced, beginner and intermediate students.

    A candidate that conflicts with either of the last two placed students is
    skipped during the round-robin and appended at the end.
    """
    buckets = [
        _by_skill(students, SkillLevel.ADVANCED),
        _by_skill(students, SkillLevel.BEGINNER),
        _by_skill(students, SkillLevel.INTERMEDIATE),
    ]
    placement = GreedyPlacement()
    for i in range(max(len(b) for b in buckets)):
        for bucket in buckets:
            if i < len(bucket):
                placement.try_place(bucket[i], window=2)

    placement.place_remaining(students)
    return placement.order


def skill_clustering(students: list[Student]) -> list[Student]:
    """Beginners, then intermediates, then advanced. Ignores avoid-pairing."""
    return (
        _by_skill(students, SkillLevel.BEGINNER)
        + _by_skill(students, SkillLevel.INTERMEDIATE)
        + _by_skill(students, SkillLevel.ADVANCED)
    )


def language_support(students: list[Student]) -> list[Student]:
    """Seat speakers of a shared language next to each other."""
    speakers: dict[str, list[Student]] = {}
    for student in students:
        for language in dict.fromkeys(student.languages):
            if language:
                speakers.setdefault(language, []).append(student)

    placement = GreedyPlacement()
    for group in speakers.values():
        if len(group) < 2:
            continue
        for student in group:
            placement.try_place(student, window=2)

    placement.place_remaining(students, window=2, offset=2)
    return placement.order


def collaborative_pairs(students: list[Student]) -> list[Student]:
    """Seat each student with a works-well-with list right before their partners."""
    placement = GreedyPlacement()
    for student in students:
        if placement.is_placed(student) or not student.works_well_with:
            continue
        placement.place(student)

        for partner_name in student.works_well_with:
            placed_ids = [s.id for s in placement.order]
            partner = find_student_by_name(partner_name, students, exclude_ids=placed_ids)
            if partner is None or has_avoid_conflict(partner, student):
                continue
            placement.place(partner)

    placement.place_remaining(students, window=2, offset=2)
    return placement.order


def needs_attention(student: Student) -> bool:
    """Beginners, and students whose notes ask for attention or support."""
    if student.skill_level == SkillLevel.BEGINNER:
        return True
    notes = student.notes.lower()
    return "attention" in notes or "support" in notes


def attention_zone(students: list[Student]) -> list[Student]:
    """Students needing attention first (front of room), advanced students last."""
    attention = [s for s in students if needs_attention(s)]
    rest = [s for s in students if not needs_attention(s)]
    advanced = [s for s in rest if s.skill_level == SkillLevel.ADVANCED]
    other = [s for s in rest if s.skill_level != SkillLevel.ADVANCED]
    return attention + other + advanced


def behavior_management(students: list[Student]) -> list[Student]:
    """Separate students with avoid-pairing lists using unconstrained buffers."""
    constrained = [s for s in students if s.avoid_pairing]
    unconstrained = [s for s in students if not s.avoid_pairing]

    placement = GreedyPlacement()
    for candidate in constrained:
        if not placement.try_place(candidate, window=3):
            continue
        for buffer in unconstrained:
            if not placement.is_placed(buffer) and not has_avoid_conflict(buffer, candidate):
                placement.place(buffer)
                break

    for candidate in constrained:
        placement.insert_back(candidate, offset=3)

    placement.place_remaining(unconstrained)
    return placement.order


def shuffle(students: list[Student], rng: Optional[random.Random] = None) -> list[Student]:
    """Fisher-Yates shuffle. Without *rng* a fresh OS-seeded generator is used."""
    rng = rng or random.Random()
    shuffled = list(students)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


STRATEGIES: dict[StrategyKind, Callable[[list[Student]], list[Student]]] = {
    StrategyKind.MIXED_ABILITY: mixed_ability,
    StrategyKind.SKILL_CLUSTERING: skill_clustering,
    StrategyKind.LANGUAGE_SUPPORT: language_support,
    StrategyKind.COLLABORATIVE_PAIRS: collaborative_pairs,
    StrategyKind.ATTENTION_ZONE: attention_zone,
    StrategyKind.BEHAVIOR_MANAGEMENT: behavior_management,
    StrategyKind.RANDOM: shuffle,
}


def arrange_students(
    students: Iterable[Student],
    strategy: "str | StrategyKind",
    total_seats: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[Student]:
    """Order *students* with the named strategy (unknown names use random).

    If *total_seats* is given the result is cut to that many students.
    """
    kind = StrategyKind.parse(strategy)
    roster = _unique(students)
    logger.debug(f"Arranging {len(roster)} students with strategy {kind.value} (requested {strategy!r})")

    if kind == StrategyKind.RANDOM:
        arrangement = shuffle(roster, rng)
    else:
        arrangement = STRATEGIES[kind](roster)

    if total_seats is not None:
        arrangement = arrangement[:max(0, total_seats)]
    return arrangement
