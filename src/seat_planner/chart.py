"""Seat assignment: zip a strategy's ordering into numbered seats."""

import logging
import random
from typing import Optional

from .layouts import generate_layout, resolve_seat_count
from .models import LayoutKind, Seat, SeatingChart, Student, StrategyKind
from .strategies import _unique, arrange_students, shuffle

logger = logging.getLogger(__name__)


def generate_seating_chart(
    students: list[Student],
    strategy: "str | StrategyKind",
    total_seats: int,
    rng: Optional[random.Random] = None,
) -> list[Seat]:
    """Assign students to exactly *total_seats* seats.

    Seats past the end of the arrangement stay empty; students past the last
    seat are left out. Unknown strategies use random.
    """
    total_seats = max(0, total_seats)
    seats = [Seat(position=i) for i in range(total_seats)]
    if not students:
        return seats

    arrangement = arrange_students(students, strategy, rng=rng)
    if len(arrangement) > total_seats:
        logger.warning(f"{len(arrangement) - total_seats} student(s) did not fit into {total_seats} seats")

    for seat, student in zip(seats, arrangement):
        seat.student_id = student.id
    return seats


def build_seating_chart(
    students: list[Student],
    strategy: "str | StrategyKind",
    layout: "str | LayoutKind",
    name: str = "",
    rng: Optional[random.Random] = None,
) -> SeatingChart:
    """Size, fill and place a complete chart for *layout*."""
    total_seats = resolve_seat_count(layout, len(students))
    kind = LayoutKind.parse(layout)
    return SeatingChart(
        name=name,
        layout=kind,
        strategy=StrategyKind.parse(strategy),
        seats=generate_seating_chart(students, strategy, total_seats, rng=rng),
        positions=generate_layout(kind, total_seats),
    )


def move_student(seats: list[Seat], student_id: str, target_position: int) -> list[Seat]:
    """Move a student to another seat, swapping with whoever sits there.

    A student who was not seated yet replaces the occupant. Returns a new
    list; *seats* is left untouched. Unknown targets are ignored.
    """
    result = [Seat(position=s.position, student_id=s.student_id) for s in seats]
    target = next((s for s in result if s.position == target_position), None)
    if target is None:
        return result

    source = next((s for s in result if s.student_id == student_id), None)
    if source is not None:
        source.student_id = target.student_id
    target.student_id = student_id
    return result


def shuffle_chart(
    seats: list[Seat],
    students: list[Student],
    rng: Optional[random.Random] = None,
) -> list[Seat]:
    """Reshuffle the whole roster into the existing seats.

    Positions are kept; seats past the end of the roster become empty and
    students past the last seat are left out. With no students the seats are
    returned unchanged. Returns a new list.
    """
    if not students:
        return [Seat(position=s.position, student_id=s.student_id) for s in seats]

    shuffled = shuffle(_unique(students), rng)
    return [
        Seat(position=seat.position, student_id=shuffled[i].id if i < len(shuffled) else None)
        for i, seat in enumerate(seats)
    ]
