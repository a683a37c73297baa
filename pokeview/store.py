# pokeview/store.py
# Holds the currently displayed Pokémon and sequences fetch -> derive -> resolve

import dataclasses
import logging
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from enum import Enum
from typing import Callable, Optional, Tuple

from pokeview import config
from pokeview.derived import generation_label, theme_pair
from pokeview.errors import FetchError, HeldItemsError
from pokeview.identifiers import clamp_id, daily_id, favorite_id, random_id
from pokeview.logger import log_action
from pokeview.models import Pokemon, ResolvedHeldItem, ThemePair
from pokeview.pokeapi import get_pokemon, get_species_count
from pokeview.resolver import resolve_all


class HeldItemsStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True)
class Snapshot:
    """What the page renders. ``cycle`` is 0 until the first record commits."""
    record: Optional[Pokemon] = None
    theme: Optional[ThemePair] = None
    generation: Optional[str] = None
    held_items: Tuple[ResolvedHeldItem, ...] = ()
    held_items_status: Optional[HeldItemsStatus] = None
    cycle: int = 0

    @property
    def is_empty(self) -> bool:
        return self.record is None

    def to_dict(self) -> dict:
        if self.record is None:
            return {"record": None, "theme": None, "generation": None,
                    "held_items": [], "held_items_status": None, "cycle": self.cycle}
        return {
            "record": dataclasses.asdict(self.record),
            "theme": dataclasses.asdict(self.theme),
            "generation": self.generation,
            "held_items": [dataclasses.asdict(i) for i in self.held_items],
            "held_items_status": self.held_items_status.value,
            "cycle": self.cycle,
        }


class PokemonStore:
    """
    Long-lived state holder for the session.

    Every fetch takes a ticket when issued. A fetched record commits only if no
    later-issued fetch has committed already, and held items resolved for a
    ticket commit only while that ticket is still the current one. Anything
    else is a stale result and is dropped.
    """

    def __init__(
        self,
        fetch_pokemon: Callable[[object], Pokemon] | None = None,
        resolve_items: Callable | None = None,
        executor=None,
        rng: random.Random | None = None,
        today: Callable[[], date] | None = None,
        species_count: Callable[[], int] | None = None,
        favorite: int | None = None,
    ):
        self._fetch_pokemon = fetch_pokemon or get_pokemon
        self._resolve_items = resolve_items or resolve_all
        self._executor = executor or ThreadPoolExecutor(
            max_workers=config.HELD_ITEM_WORKERS, thread_name_prefix="held-items"
        )
        self._rng = rng or random.Random()
        self._today = today or date.today
        self._species_count = species_count or get_species_count
        self._favorite = favorite if favorite is not None else favorite_id()

        self._lock = threading.Lock()
        self._snapshot = Snapshot()
        self._issued = 0
        self._committed = 0
        self._total: int | None = None

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot

    # ---- triggers --------------------------------------------------------- #

    def request_random(self) -> bool:
        return self.load(random_id(self.catalog_size(), self._rng))

    def request_of_the_day(self) -> bool:
        return self.load(clamp_id(daily_id(self._today()), self.catalog_size()))

    def request_favorite(self) -> bool:
        return self.load(self._favorite)

    def catalog_size(self) -> int:
        """Species count N, fetched once; falls back to config.DEFAULT_SPECIES_COUNT."""
        if self._total is not None:
            if config.ENABLE_VERBOSE_LOGGING:
                log_action(f"CACHE HIT: species count {self._total}")
            return self._total
        try:
            total = self._species_count()
        except FetchError as e:
            log_action(f"ERROR fetching species count, using {config.DEFAULT_SPECIES_COUNT}: {e}",
                       logging.ERROR)
            return config.DEFAULT_SPECIES_COUNT
        self._total = total
        return total

    # ---- transitions ------------------------------------------------------ #

    def load(self, name_or_id) -> bool:
        """
        Fetch a record and commit it. Returns False when the fetch failed or a
        newer fetch already committed; the current snapshot is left untouched.
        """
        with self._lock:
            self._issued += 1
            ticket = self._issued

        try:
            record = self._fetch_pokemon(name_or_id)
        except FetchError as e:
            log_action(f"ERROR fetching pokemon {e.identifier!r}: {e}", logging.ERROR)
            return False

        with self._lock:
            if ticket < self._committed:
                if config.ENABLE_VERBOSE_LOGGING:
                    log_action(f"STALE: pokemon {record.name} (ticket {ticket} < {self._committed})")
                return False
            self._committed = ticket
            self._snapshot = Snapshot(
                record=record,
                theme=theme_pair(record.types),
                generation=generation_label(record.id),
                held_items=(),
                held_items_status=HeldItemsStatus.PENDING if record.held_items else HeldItemsStatus.READY,
                cycle=ticket,
            )
        log_action(f"Loaded #{record.id} {record.name} ({len(record.held_items)} held item refs)")

        if record.held_items:
            self._executor.submit(self._resolve_held_items, ticket, record.held_items)
        return True

    def _resolve_held_items(self, ticket: int, references) -> None:
        try:
            items = self._resolve_items(references)
        except HeldItemsError as e:
            if self._commit_held_items(ticket, (), HeldItemsStatus.FAILED):
                log_action(f"held items unavailable for cycle {ticket}: {e}", logging.WARNING)
            return
        except Exception as e:
            log_action(f"ERROR resolving held items for cycle {ticket}: {e!r}", logging.ERROR)
            self._commit_held_items(ticket, (), HeldItemsStatus.FAILED)
            return
        self._commit_held_items(ticket, tuple(items), HeldItemsStatus.READY)

    def _commit_held_items(self, ticket: int, items, status: HeldItemsStatus) -> bool:
        with self._lock:
            if ticket != self._committed:
                if config.ENABLE_VERBOSE_LOGGING:
                    log_action(f"STALE: held items for cycle {ticket}, current is {self._committed}")
                return False
            self._snapshot = dataclasses.replace(
                self._snapshot, held_items=items, held_items_status=status
            )
            return True
