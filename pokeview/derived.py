# pokeview/derived.py
# Presentation metadata computed from a Pokemon record

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence, Tuple

from pokeview.models import SpriteSet, ThemePair, TypeSlot

# (inclusive upper id, label)
GENERATIONS = [
    (151, "Generation I (Kanto)"),
    (251, "Generation II (Johto)"),
    (386, "Generation III (Hoenn)"),
    (493, "Generation IV (Sinnoh)"),
    (649, "Generation V (Unova)"),
    (721, "Generation VI (Kalos)"),
    (809, "Generation VII (Alola)"),
    (905, "Generation VIII (Galar)"),
    (1021, "Generation IX (Paldea)"),
]

LBS_PER_HECTOGRAM = Decimal("0.22046226")
INCHES_PER_DECIMETER = Decimal("3.93700787")


def theme_pair(types: Sequence[TypeSlot]) -> ThemePair:
    """Main theme from slot 1; sub theme from slot 2, or the main theme again."""
    if not types:
        raise ValueError("a Pokémon has at least one type")
    ordered = sorted(types, key=lambda t: t.slot)
    main = ordered[0].name
    sub = ordered[1].name if len(ordered) > 1 else main
    return ThemePair(main=main, sub=sub)


def generation_label(pid: int) -> Optional[str]:
    """Era label for an id; None past the last known bucket."""
    for upper, label in GENERATIONS:
        if pid <= upper:
            return label
    return None


def format_weight(hectograms: int) -> Tuple[Decimal, Decimal]:
    """(kg, lbs), both to one decimal; lbs rounded half-up."""
    hg = Decimal(hectograms)
    kg = (hg / 10).quantize(Decimal("0.1"))
    lbs = (hg * LBS_PER_HECTOGRAM).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return kg, lbs


def format_height(decimeters: int) -> Tuple[int, int]:
    """(cm, inches) with inches rounded up."""
    return decimeters * 10, math.ceil(Decimal(decimeters) * INCHES_PER_DECIMETER)


def has_distinct_gender_sprites(sprites: SpriteSet) -> bool:
    return bool(sprites.front_female)


def best_sprite(sprites: SpriteSet) -> Optional[str]:
    """return the best available sprite url"""
    return (
        sprites.artwork
        or sprites.front_default
        or sprites.dream_world
        or sprites.home
    )


# consistent labels for stats/types
def labelize(s: str) -> str:
    s = (s or "").replace("-", " ")
    overrides = {"hp": "HP", "sp atk": "Sp. Atk", "sp def": "Sp. Def",
                 "special attack": "SpAtk", "special defense": "SpDef"}
    t = s.strip().title()
    return overrides.get(s.strip().lower(), overrides.get(t.lower(), t))


# stat heat color (0→red, 128→yellow, 256→green)
def stat_color(value: int) -> str:
    value = min(max(value, 0), 256)
    if value <= 128:
        r, g = 255, int((value / 128) * 255)
    else:
        r, g = int((1 - ((value - 128) / 128)) * 255), 255
    return f'rgb({r},{g},0)'


def wiki_name(item_name: str) -> str:
    """Bulbapedia page name for an item: 'choice-band' -> 'choice_Band'."""
    return re.sub(r"-(.)", lambda m: "_" + m.group(1).upper(), item_name)
