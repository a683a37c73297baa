# pokeview/identifiers.py
# Which Pokémon id each trigger asks for. No I/O here.

import random
from datetime import date

from pokeview import config


def random_id(total: int, rng: random.Random | None = None) -> int:
    """Uniform pick in [1, total]."""
    return (rng or random).randint(1, total)


def daily_id(day: date) -> int:
    """
    weekday (Mon=1..Sun=7) * day of month * quarter (1..4).

    The weekday is ISO numbering on purpose: Sunday is 7, not 0, so every day
    yields a usable id. Do not switch to a Sunday=0 convention; that changes
    which Pokémon each day gets.

    Changes from day to day and roughly repeats yearly; it is not uniform and
    different days can collide. Range is 1..868.
    """
    quarter = (day.month - 1) // 3 + 1
    return day.isoweekday() * day.day * quarter


def favorite_id() -> int:
    return config.FAVORITE_POKEMON_ID


def clamp_id(pid: int, total: int) -> int:
    return min(max(1, pid), total)
