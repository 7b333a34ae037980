"""Seat counts and room geometry for the supported layouts.

Coordinates are room-relative units (roughly pixels). The room is
``ROOM_WIDTH`` wide, the teacher area is at the top, so lower ``y`` means
closer to the front. Position 0 is always the first seat generated for the
front of the room.
"""

import logging
import math

from .models import LayoutKind, SeatPosition

logger = logging.getLogger(__name__)

ROOM_WIDTH = 1000
HEADER_CLEARANCE = 100  # whiteboard / teacher area above the first row
ROW_SPACING = 100
COLUMN_SPACING = 120

SEATS_PER_ROW = 5
STADIUM_ROW_PATTERN = [5, 6, 7, 6]
STADIUM_ROW_SPACING = 120
STADIUM_ANGLE_STEP = 20   # degrees added per row
STADIUM_ROTATION = 5

ARC_CENTER = (500, 250)
HORSESHOE_RADIUS = 180
DOUBLE_HORSESHOE_RADII = (140, 220)
DOUBLE_HORSESHOE_RING_STEP = 80   # radius added for every ring beyond the second
DOUBLE_HORSESHOE_RING_SEATS = 16
CIRCLE_RADIUS = 160

GROUP_SIZE = 4
GROUP_COLUMNS = 3
GROUP_COLUMN_X = [250, 500, 750]
GROUP_FIRST_ROW_Y = 150
GROUP_ROW_SPACING = 200
GROUP_SEAT_OFFSETS = [(-40, -30), (40, -30), (-40, 30), (40, 30)]
BASE_GROUP_COUNT = 6  # 2 rows x 3 columns fit the room without scrolling

PAIR_COLUMNS = 3
PAIR_SEAT_SPACING = 80
PAIR_COLUMN_SPACING = 280

# Reserved teacher desk in the top-left corner: (x0, y0, x1, y1)
TEACHER_DESK = (0, 0, 160, 90)
TEACHER_DESK_MARGIN = 10

SEAT_CAPACITY = {
    LayoutKind.TRADITIONAL_ROWS: 30,
    LayoutKind.STADIUM: 28,
    LayoutKind.HORSESHOE: 20,
    LayoutKind.DOUBLE_HORSESHOE: 32,
    LayoutKind.CIRCLE: 16,
    LayoutKind.PAIRS: 20,
}
DEFAULT_CAPACITY = 24

# Number of lowest position indices treated as the front "action zone"
FRONT_ZONE_SIZE = {
    LayoutKind.TRADITIONAL_ROWS: SEATS_PER_ROW,
    LayoutKind.STADIUM: STADIUM_ROW_PATTERN[0],
    LayoutKind.HORSESHOE: 6,
    LayoutKind.DOUBLE_HORSESHOE: 8,
    LayoutKind.CIRCLE: 4,
    LayoutKind.GROUPS: 2 * GROUP_SIZE,
    LayoutKind.PAIRS: 2 * PAIR_COLUMNS,
}


# ---------------------------------------------------------------------------
# Seat count
# ---------------------------------------------------------------------------

def resolve_seat_count(layout: "str | LayoutKind", student_count: int) -> int:
    """Number of seats to render for *student_count* students.

    Groups always show complete tables of four; every other layout shows one
    seat per student up to its capacity.
    """
    student_count = max(0, student_count)
    if not LayoutKind.is_known(layout):
        return min(student_count, DEFAULT_CAPACITY)

    kind = LayoutKind.parse(layout)
    if kind == LayoutKind.GROUPS:
        return math.ceil(student_count / GROUP_SIZE) * GROUP_SIZE
    return min(student_count, SEAT_CAPACITY.get(kind, DEFAULT_CAPACITY))


def front_zone(layout: "str | LayoutKind", seat_count: int) -> list[int]:
    """Position indices of the front seats for *layout*."""
    kind = LayoutKind.parse(layout)
    return list(range(min(FRONT_ZONE_SIZE[kind], max(0, seat_count))))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def clear_teacher_desk(x: float, y: float) -> tuple[float, float]:
    """Push a point out of the teacher desk area across its nearest edge."""
    x0, y0, x1, y1 = TEACHER_DESK
    if not (x0 <= x < x1 and y0 <= y < y1):
        return x, y
    if x1 - x <= y1 - y:
        return x1 + TEACHER_DESK_MARGIN, y
    return x, y1 + TEACHER_DESK_MARGIN


def _seat(position: int, x: float, y: float, rotation: float | None = None) -> SeatPosition:
    x, y = clear_teacher_desk(x, y)
    if rotation is not None:
        rotation = round(rotation, 2)
    return SeatPosition(position=position, x=round(x, 2), y=round(y, 2), rotation=rotation)


def _centered_start(seats_in_row: int, spacing: float) -> float:
    return (ROOM_WIDTH - (seats_in_row - 1) * spacing) / 2


def _arc(first_position: int, count: int, radius: float) -> list[SeatPosition]:
    """Seats evenly spread over the lower half circle, left to right."""
    cx, cy = ARC_CENTER
    if count == 1:
        angles = [math.pi / 2]
    else:
        step = math.pi / (count - 1)
        angles = [math.pi - i * step for i in range(count)]

    return [
        _seat(
            first_position + i,
            cx + math.cos(angle) * radius,
            cy + math.sin(angle) * radius,
            math.degrees(angle - math.pi / 2),
        )
        for i, angle in enumerate(angles)
    ]


# ---------------------------------------------------------------------------
# Layout generators
# ---------------------------------------------------------------------------

def _traditional_rows(seat_count: int) -> list[SeatPosition]:
    positions = []
    for row_start in range(0, seat_count, SEATS_PER_ROW):
        seats_in_row = min(SEATS_PER_ROW, seat_count - row_start)
        start_x = _centered_start(seats_in_row, COLUMN_SPACING)
        y = HEADER_CLEARANCE + (row_start // SEATS_PER_ROW) * ROW_SPACING
        for col in range(seats_in_row):
            positions.append(_seat(row_start + col, start_x + col * COLUMN_SPACING, y))
    return positions


def _stadium(seat_count: int) -> list[SeatPosition]:
    """Angled rows; the row pattern repeats for classes larger than one cycle."""
    positions = []
    position = 0
    row = 0
    while position < seat_count:
        pattern_row = row % len(STADIUM_ROW_PATTERN)
        seats_in_row = min(STADIUM_ROW_PATTERN[pattern_row], seat_count - position)
        start_x = _centered_start(seats_in_row, COLUMN_SPACING)
        angle_offset = pattern_row * STADIUM_ANGLE_STEP
        center_col = (seats_in_row - 1) / 2
        y = HEADER_CLEARANCE + row * STADIUM_ROW_SPACING

        for col in range(seats_in_row):
            from_center = col - center_col
            rotation = 0.0
            if angle_offset and from_center:
                rotation = math.copysign(STADIUM_ROTATION, from_center)
            x = start_x + col * COLUMN_SPACING + from_center * angle_offset
            positions.append(_seat(position, x, y, rotation))
            position += 1
        row += 1
    return positions


def _horseshoe(seat_count: int) -> list[SeatPosition]:
    if seat_count == 0:
        return []
    return _arc(0, seat_count, HORSESHOE_RADIUS)


def _double_horseshoe(seat_count: int) -> list[SeatPosition]:
    """Inner ring gets the larger half, outer ring the rest, 16 seats max each.

    Seats beyond two full rings continue on further rings further out.
    """
    inner = min(math.ceil(seat_count / 2), DOUBLE_HORSESHOE_RING_SEATS)
    outer = min(seat_count - inner, DOUBLE_HORSESHOE_RING_SEATS)
    rings = [inner, outer]
    remaining = seat_count - inner - outer
    while remaining > 0:
        rings.append(min(remaining, DOUBLE_HORSESHOE_RING_SEATS))
        remaining -= rings[-1]

    positions: list[SeatPosition] = []
    for index, count in enumerate(rings):
        if count == 0:
            continue
        if index < len(DOUBLE_HORSESHOE_RADII):
            radius = DOUBLE_HORSESHOE_RADII[index]
        else:
            radius = DOUBLE_HORSESHOE_RADII[-1] + (index - 1) * DOUBLE_HORSESHOE_RING_STEP
        positions.extend(_arc(len(positions), count, radius))
    return positions


def _circle(seat_count: int) -> list[SeatPosition]:
    cx, cy = ARC_CENTER
    positions = []
    for i in range(seat_count):
        angle = i * 2 * math.pi / seat_count - math.pi / 2  # start at the top
        positions.append(_seat(
            i,
            cx + math.cos(angle) * CIRCLE_RADIUS,
            cy + math.sin(angle) * CIRCLE_RADIUS,
            math.degrees(angle) + 90,
        ))
    return positions


def group_center(group_index: int) -> tuple[float, float]:
    """Centre of the n-th table of four; rows of three tables, top to bottom."""
    row, col = divmod(group_index, GROUP_COLUMNS)
    return GROUP_COLUMN_X[col], GROUP_FIRST_ROW_Y + row * GROUP_ROW_SPACING


def _groups(seat_count: int) -> list[SeatPosition]:
    positions = []
    for position in range(seat_count):
        group_index, seat_index = divmod(position, GROUP_SIZE)
        cx, cy = group_center(group_index)
        dx, dy = GROUP_SEAT_OFFSETS[seat_index]
        positions.append(_seat(position, cx + dx, cy + dy, 0.0))

    groups_used = math.ceil(seat_count / GROUP_SIZE)
    if groups_used > BASE_GROUP_COUNT:
        logger.debug(f"Groups layout extended to {groups_used} tables")
    return positions


def _pairs(seat_count: int) -> list[SeatPosition]:
    block_width = (PAIR_COLUMNS - 1) * PAIR_COLUMN_SPACING + PAIR_SEAT_SPACING
    start_x = (ROOM_WIDTH - block_width) / 2
    seats_per_row = PAIR_COLUMNS * 2

    positions = []
    for position in range(seat_count):
        row, within = divmod(position, seats_per_row)
        pair_col, seat = divmod(within, 2)
        positions.append(_seat(
            position,
            start_x + pair_col * PAIR_COLUMN_SPACING + seat * PAIR_SEAT_SPACING,
            HEADER_CLEARANCE + row * ROW_SPACING,
            0.0,
        ))
    return positions


_GENERATORS = {
    LayoutKind.TRADITIONAL_ROWS: _traditional_rows,
    LayoutKind.STADIUM: _stadium,
    LayoutKind.HORSESHOE: _horseshoe,
    LayoutKind.DOUBLE_HORSESHOE: _double_horseshoe,
    LayoutKind.CIRCLE: _circle,
    LayoutKind.GROUPS: _groups,
    LayoutKind.PAIRS: _pairs,
}


def generate_layout(layout: "str | LayoutKind", seat_count: int) -> list[SeatPosition]:
    """Place *seat_count* seats for *layout*; unknown layouts use traditional rows.

    Returns exactly one position per index ``0 .. seat_count - 1``.
    """
    kind = LayoutKind.parse(layout)
    return _GENERATORS[kind](max(0, seat_count))
