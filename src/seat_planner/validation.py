"""Constraint checking and effectiveness scoring for a finished chart.

Adjacency is derived from the generated room geometry: two seats are
neighbours when they are at most ``ADJACENCY_DISTANCE`` apart. Layout names
that are not known fall back to a square grid guessed from the seat count.
Neither the validator nor the scorer ever blocks chart generation.
"""

import logging
import math
from typing import Iterator, Optional

from .constraints import avoids
from .layouts import front_zone, generate_layout
from .models import (
    EffectivenessReport, LayoutKind, Seat, SkillLevel, StrategyKind, Student,
    ValidationResult,
)
from .translations import tr

logger = logging.getLogger(__name__)

ADJACENCY_DISTANCE = 125

VIOLATION_PENALTY = 10
MIXING_BONUS = 10
ATTENTION_ZONE_ADJUSTMENT = 15
ATTENTION_ZONE_GOOD = 0.5
ATTENTION_ZONE_POOR = 0.25


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------

def grid_adjacent_positions(position: int, total_seats: int) -> list[int]:
    """Left, right, above and below neighbours on a square-ish grid."""
    if total_seats <= 0 or not 0 <= position < total_seats:
        return []
    cols = math.ceil(math.sqrt(total_seats))
    row, col = divmod(position, cols)
    last_row = (total_seats - 1) // cols

    adjacent = []
    if col > 0:
        adjacent.append(position - 1)
    if col < cols - 1 and position + 1 < total_seats:
        adjacent.append(position + 1)
    if row > 0:
        adjacent.append(position - cols)
    if row < last_row and position + cols < total_seats:
        adjacent.append(position + cols)
    return adjacent


def build_adjacency(layout: "str | LayoutKind", total_seats: int) -> dict[int, list[int]]:
    """Map every seat index to the indices of its neighbouring seats."""
    if not LayoutKind.is_known(layout):
        return {i: grid_adjacent_positions(i, total_seats) for i in range(total_seats)}

    positions = generate_layout(layout, total_seats)
    adjacency: dict[int, list[int]] = {p.position: [] for p in positions}
    for i, a in enumerate(positions):
        for b in positions[i + 1:]:
            if math.dist((a.x, a.y), (b.x, b.y)) <= ADJACENCY_DISTANCE:
                adjacency[a.position].append(b.position)
                adjacency[b.position].append(a.position)
    return {k: sorted(v) for k, v in adjacency.items()}


def adjacent_positions(position: int, total_seats: int, layout: "str | LayoutKind") -> list[int]:
    return build_adjacency(layout, total_seats).get(position, [])


def _neighbouring_students(
    seats: list[Seat],
    lookup: dict[str, Student],
    adjacency: dict[int, list[int]],
) -> Iterator[tuple[Student, Student]]:
    """Yield each pair of seated neighbours once, lower position first."""
    occupant: dict[int, Student] = {}
    for seat in seats:
        student = lookup.get(seat.student_id) if seat.student_id else None
        if student is not None:
            occupant[seat.position] = student

    for position in sorted(occupant):
        for other in adjacency.get(position, []):
            if other > position and other in occupant:
                yield occupant[position], occupant[other]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_seating_arrangement(
    seats: list[Seat],
    students: list[Student],
    layout: "str | LayoutKind",
    adjacency: Optional[dict[int, list[int]]] = None,
) -> ValidationResult:
    """Report every neighbouring pair where one student avoids the other.

    Both directions are checked; a mutual avoidance yields two messages.
    """
    lookup = {s.id: s for s in students}
    if adjacency is None:
        adjacency = build_adjacency(layout, len(seats))

    violations: list[str] = []
    for a, b in _neighbouring_students(seats, lookup, adjacency):
        for student, neighbour in ((a, b), (b, a)):
            if avoids(student, neighbour):
                violations.append(
                    tr("{student} should not sit next to {neighbour}").format(
                        student=student.name, neighbour=neighbour.name)
                )

    if violations:
        logger.info(f"{len(violations)} avoid-pairing violation(s) in chart")
    return ValidationResult(is_valid=not violations, violations=violations)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def assess_seating_effectiveness(
    seats: list[Seat],
    students: list[Student],
    layout: "str | LayoutKind",
    strategy: "str | StrategyKind | None" = None,
) -> EffectivenessReport:
    """Score an arrangement from 0 to 100 and explain the score.

    - 10 points off per avoid-pairing violation
    - mixed-ability charts earn up to 10 points for neighbours of different skill
    - beginners in the front zone move the score by 15 either way
    """
    lookup = {s.id: s for s in students}
    adjacency = build_adjacency(layout, len(seats))
    insights: list[str] = []

    result = validate_seating_arrangement(seats, students, layout, adjacency)
    score = 100 - VIOLATION_PENALTY * len(result.violations)
    if result.violations:
        insights.append(tr("{count} seating conflict(s) detected").format(count=len(result.violations)))
    else:
        insights.append(tr("No seating conflicts detected"))

    if strategy is not None and StrategyKind.parse(strategy) == StrategyKind.MIXED_ABILITY:
        pairs = list(_neighbouring_students(seats, lookup, adjacency))
        if pairs:
            mixed = sum(1 for a, b in pairs if a.skill_level != b.skill_level)
            ratio = mixed / len(pairs)
            score += round(ratio * MIXING_BONUS)
            insights.append(
                tr("{percent}% of neighbouring students have different skill levels").format(
                    percent=round(ratio * 100))
            )

    seated = {seat.student_id: seat.position for seat in seats if seat.student_id in lookup}
    beginners = [sid for sid in seated if lookup[sid].skill_level == SkillLevel.BEGINNER]
    zone = set(front_zone(layout, len(seats)))
    reachable = min(len(beginners), len(zone))
    if reachable:
        in_zone = sum(1 for sid in beginners if seated[sid] in zone)
        utilization = in_zone / reachable
        if utilization >= ATTENTION_ZONE_GOOD:
            score += ATTENTION_ZONE_ADJUSTMENT
            insights.append(
                tr("{count} of {total} beginners sit in the front attention zone").format(
                    count=in_zone, total=len(beginners))
            )
        elif utilization < ATTENTION_ZONE_POOR:
            score -= ATTENTION_ZONE_ADJUSTMENT
            insights.append(
                tr("Only {count} of {total} beginners sit in the front attention zone").format(
                    count=in_zone, total=len(beginners))
            )

    return EffectivenessReport(score=max(0, min(100, score)), insights=insights)
