# pokeview/resolver.py
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List, Sequence

from pokeview.errors import PartialFailure
from pokeview.models import HeldItemReference, ResolvedHeldItem
from pokeview.pokeapi import get_item


def resolve_all(
    references: Sequence[HeldItemReference],
    fetch_item: Callable[[str], ResolvedHeldItem] | None = None,
) -> List[ResolvedHeldItem]:
    """
    Fetch every held item concurrently and return them in reference order.

    All or nothing: waits for every lookup, then raises PartialFailure if any
    of them failed. An empty input returns [] without touching the network.
    """
    if not references:
        return []
    fetch_item = fetch_item or get_item

    with ThreadPoolExecutor(max_workers=len(references), thread_name_prefix="held-item") as pool:
        futures = [pool.submit(fetch_item, ref.url) for ref in references]
        wait(futures)

    failures = []
    for i, (ref, fut) in enumerate(zip(references, futures)):
        err = fut.exception()
        if err is not None:
            failures.append((i, ref.url, err))
    if failures:
        raise PartialFailure(failures)
    return [fut.result() for fut in futures]
