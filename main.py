import sys
import os
import logging
import random

from seat_planner.catalog import layout_name, strategy_name
from seat_planner.chart import build_seating_chart
from seat_planner.config import get_system_language, save_chart
from seat_planner.roster import default_mapping, import_students, read_roster_columns
from seat_planner.translations import set_language, tr
from seat_planner.validation import assess_seating_effectiveness, validate_seating_arrangement

USAGE = (
    "main.py ROSTER [--strategy NAME] [--layout NAME] [--lang CODE]"
    " [--seed N] [--output CHART.json] [--verbose]"
)


def get_option(argv: list[str], name: str, default: str | None = None) -> str | None:
    """Return the value following *name* in argv, if any."""
    if name in argv:
        idx = argv.index(name)
        if idx + 1 < len(argv):
            return argv[idx + 1]
    return default


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=logging.DEBUG if "--verbose" in argv else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Language: --lang beats SEAT_PLANNER_LANG beats the locale
    set_language(get_option(argv, "--lang") or get_system_language())

    if not argv or argv[0].startswith("--"):
        print(f"{tr('Usage:')} {USAGE}")
        return 2

    roster_path = argv[0]
    strategy = get_option(argv, "--strategy", "mixed-ability")
    layout = get_option(argv, "--layout", "traditional-rows")
    seed = get_option(argv, "--seed")
    try:
        rng = random.Random(int(seed)) if seed is not None else None
    except ValueError:
        print(f"{tr('Invalid seed:')} {seed}", file=sys.stderr)
        return 2

    try:
        mapping = default_mapping(read_roster_columns(roster_path))
        students = import_students(roster_path, mapping)
    except (OSError, ValueError) as e:
        print(f"{tr('Import failed:')} {e}", file=sys.stderr)
        return 1

    chart = build_seating_chart(students, strategy, layout, name=os.path.basename(roster_path), rng=rng)
    names = {s.id: s.name for s in students}

    print(f"{tr('Seating Chart')}: {chart.name}")
    print(f"{tr('Layout')}: {layout_name(chart.layout)}")
    print(f"{tr('Strategy')}: {strategy_name(chart.strategy)}")
    for seat, pos in zip(chart.seats, chart.positions):
        occupant = names.get(seat.student_id, tr('empty'))
        print(f"  {tr('Seat')} {seat.position + 1:>2}  ({pos.x:>7.1f}, {pos.y:>7.1f})  {occupant}")

    result = validate_seating_arrangement(chart.seats, students, chart.layout)
    report = assess_seating_effectiveness(chart.seats, students, chart.layout, chart.strategy)

    print(f"\n{tr('Score')}: {report.score}/100")
    if result.violations:
        print(f"{tr('Violations')}:")
        for violation in result.violations:
            print(f"  - {violation}")
    print(f"{tr('Insights')}:")
    for insight in report.insights:
        print(f"  - {insight}")

    output = get_option(argv, "--output")
    if output:
        save_chart(chart, output)
        print(f"\n{tr('Saved chart to:')} {output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
