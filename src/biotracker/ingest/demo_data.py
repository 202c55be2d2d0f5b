"""
Synthetic demo data for the tracker dashboard.

Generates one entry per day for the most recent N days (default 31: today
and the 30 days before it):
1. Sleep drifts around 5 with a slow trend plus noise
2. Mood follows the previous day's Sleep (x0.7) with noise
3. Energy follows the previous day's Sleep (x0.5), boosted on Thu/Fri
4. Digestion and Mind are uniform integers in [3, 8]

All values are clipped to [1, 10] and rounded to 0.1. The exact
distribution is not part of any contract; pass ``rng`` for repeatable output.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

import numpy as np

from biotracker.common.biomarkers import MAX_SCORE, MIN_SCORE, Biomarker
from biotracker.common.config import get_config
from biotracker.store.records import Entry, RecordStore

log = logging.getLogger(__name__)

# Score used for the lagged biomarkers on the first generated day
NEUTRAL_SCORE = 5.0
WEEKEND_BOOST = 1.5
WEEKEND_DAYS = {3, 4}  # date.weekday(): Thursday, Friday


def _clip(value: float) -> float:
    return round(float(np.clip(value, MIN_SCORE, MAX_SCORE)), 1)


def generate_demo_entries(
    days: int = 31,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> list[Entry]:
    """
    Build demo entries, oldest first.

    Args:
        days: Number of consecutive days ending today
        today: Last day to generate (default: date.today())
        rng: Random generator (default: fresh unseeded generator)

    Returns:
        List of ``days`` entries, ascending by date
    """
    if days <= 0:
        return []

    today = today or date.today()
    rng = rng or np.random.default_rng()

    entries: list[Entry] = []
    prev_sleep: Optional[float] = None

    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)

        sleep = _clip(NEUTRAL_SCORE + offset / 6 + rng.uniform(-1, 1))

        mood_base = prev_sleep * 0.7 if prev_sleep is not None else NEUTRAL_SCORE
        energy_base = prev_sleep * 0.5 if prev_sleep is not None else NEUTRAL_SCORE
        boost = WEEKEND_BOOST if day.weekday() in WEEKEND_DAYS else 0.0

        values = {
            Biomarker.SLEEP: sleep,
            Biomarker.MOOD: _clip(mood_base + rng.uniform(-1.5, 1.5)),
            Biomarker.ENERGY: _clip(energy_base + boost + rng.uniform(-1, 1)),
            Biomarker.DIGESTION: float(rng.integers(3, 9)),
            Biomarker.MIND: float(rng.integers(3, 9)),
        }
        entries.append(Entry(date=day, values=values))
        prev_sleep = sleep

    log.debug(f"Generated {len(entries)} demo entries ending {today.isoformat()}")
    return entries


def build_demo_store(
    days: Optional[int] = None,
    today: Optional[date] = None,
    seed: Optional[int] = None,
) -> RecordStore:
    """
    RecordStore seeded with demo entries.

    ``days`` and ``seed`` fall back to the demo.* config values.
    """
    config = get_config()
    days = days if days is not None else config.get_demo_days()
    seed = seed if seed is not None else config.get_demo_seed()

    store = RecordStore(generate_demo_entries(days, today=today, rng=np.random.default_rng(seed)))
    log.info(f"Seeded store with {len(store)} demo entries (seed={seed})")
    return store
