from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

from m3u_shuffle import logger as logger_mod

log = logger_mod.get_logger()

T = TypeVar("T")


def default_rng() -> random.Random:
    """OS-entropy backed source; every run gets a different order."""
    return random.SystemRandom()


def shuffle_entries(
    entries: Sequence[T], rng: Optional[random.Random] = None
) -> List[T]:
    """Return a new list holding a uniform random permutation of `entries`.

    Fisher-Yates: for i from n-1 down to 1, swap i with a uniform j in [0, i].
    The input sequence is never modified. Pass a seeded `random.Random` for
    repeatable output (tests).
    """
    out = list(entries)
    if len(out) < 2:
        return out

    rng = rng or default_rng()
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]

    log.debug(f"Shuffled {len(out)} entries")
    return out
