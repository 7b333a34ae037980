"""Chart save/load and language configuration."""

import json
import os
from pathlib import Path

from .models import SeatingChart

LANGUAGE_ENV_VAR = "SEAT_PLANNER_LANG"


def save_chart(chart: SeatingChart, path: str | Path) -> None:
    """Save a seating chart to a JSON file."""
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(chart.to_dict(), f, indent=2, ensure_ascii=False)


def load_chart(path: str | Path) -> SeatingChart:
    """Load a seating chart from a JSON file."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return SeatingChart.from_dict(data)


def get_system_language() -> str:
    """Detect the UI language from the environment."""
    override = os.environ.get(LANGUAGE_ENV_VAR)
    if override:
        return override
    # Check common locale environment variables
    for var in ('LC_ALL', 'LC_MESSAGES', 'LANG', 'LANGUAGE'):
        value = os.environ.get(var, '')
        if value.startswith('de'):
            return 'de'
    return 'en'
