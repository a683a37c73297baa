# pokeview/models.py
# Immutable value types built from catalog payloads

from dataclasses import dataclass, field
from typing import Optional, Tuple

TYPES = [
    "normal","fire","water","electric","grass","ice","fighting","poison","ground",
    "flying","psychic","bug","rock","ghost","dragon","dark","steel","fairy"
]

STATS = ["hp", "attack", "defense", "special-attack", "special-defense", "speed"]


@dataclass(frozen=True)
class TypeSlot:
    slot: int
    name: str


@dataclass(frozen=True)
class StatEntry:
    name: str
    base_stat: int


@dataclass(frozen=True)
class SpriteSet:
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    front_female: Optional[str] = None
    front_shiny_female: Optional[str] = None
    back_default: Optional[str] = None
    back_shiny: Optional[str] = None
    back_female: Optional[str] = None
    back_shiny_female: Optional[str] = None
    artwork: Optional[str] = None
    artwork_shiny: Optional[str] = None
    dream_world: Optional[str] = None
    home: Optional[str] = None


@dataclass(frozen=True)
class HeldItemReference:
    url: str


@dataclass(frozen=True)
class ResolvedHeldItem:
    name: str
    sprite: Optional[str]


@dataclass(frozen=True)
class ThemePair:
    main: str
    sub: str


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    types: Tuple[TypeSlot, ...]
    stats: Tuple[StatEntry, ...]
    weight: int
    height: int
    sprites: SpriteSet
    held_items: Tuple[HeldItemReference, ...] = field(default_factory=tuple)


# --------------------------------------------------------------------------- #
# Payload parsing (raises ValueError on anything missing or out of shape)
# --------------------------------------------------------------------------- #

def _require(data: dict, key: str, kind):
    if not isinstance(data, dict) or key not in data:
        raise ValueError(f"missing field '{key}'")
    value = data[key]
    # bool is an int subclass; never a valid count or id here
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field '{key}' has unexpected type {type(value).__name__}")
    return value


def _name_of(entry: dict, key: str) -> str:
    return _require(_require(entry, key, dict), "name", str)


def parse_sprites(s: dict) -> SpriteSet:
    other = s.get("other") or {}
    return SpriteSet(
        front_default=s.get("front_default"),
        front_shiny=s.get("front_shiny"),
        front_female=s.get("front_female"),
        front_shiny_female=s.get("front_shiny_female"),
        back_default=s.get("back_default"),
        back_shiny=s.get("back_shiny"),
        back_female=s.get("back_female"),
        back_shiny_female=s.get("back_shiny_female"),
        artwork=(other.get("official-artwork") or {}).get("front_default"),
        artwork_shiny=(other.get("official-artwork") or {}).get("front_shiny"),
        dream_world=(other.get("dream_world") or {}).get("front_default"),
        home=(other.get("home") or {}).get("front_default"),
    )


def parse_pokemon(data: dict) -> Pokemon:
    """Build a Pokemon from a /pokemon/{id} payload."""
    pid = _require(data, "id", int)
    if pid < 1:
        raise ValueError(f"invalid id {pid}")
    name = _require(data, "name", str)

    types = []
    for t in _require(data, "types", list):
        tname = _name_of(t, "type")
        if tname not in TYPES:
            raise ValueError(f"unknown type '{tname}'")
        types.append(TypeSlot(slot=_require(t, "slot", int), name=tname))
    if not types:
        raise ValueError("no types")
    types.sort(key=lambda t: t.slot)

    stats = []
    for s in _require(data, "stats", list):
        sname = _name_of(s, "stat")
        if sname not in STATS:
            raise ValueError(f"unknown stat '{sname}'")
        stats.append(StatEntry(name=sname, base_stat=_require(s, "base_stat", int)))
    if not stats:
        raise ValueError("no stats")

    held = [
        HeldItemReference(url=_require(_require(h, "item", dict), "url", str))
        for h in (data.get("held_items") or [])
    ]

    return Pokemon(
        id=pid,
        name=name,
        types=tuple(types),
        stats=tuple(stats),
        weight=_require(data, "weight", int),
        height=_require(data, "height", int),
        sprites=parse_sprites(_require(data, "sprites", dict)),
        held_items=tuple(held),
    )


def parse_item(data: dict) -> ResolvedHeldItem:
    """Build a ResolvedHeldItem from an /item/{id} payload; the sprite may be null."""
    name = _require(data, "name", str)
    sprites = data.get("sprites") or {}
    return ResolvedHeldItem(name=name, sprite=sprites.get("default"))
