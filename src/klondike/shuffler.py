# shuffler.py - in-place uniform shuffle used by the deck
import random
from typing import MutableSequence, Optional


def shuffle(seq: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Fisher-Yates shuffle of ``seq`` in place.

    Walks from the last index down to 1 and swaps each slot with a uniformly
    chosen slot at or before it. ``rng`` defaults to the module generator.
    """
    rand = rng if rng is not None else random
    for i in range(len(seq) - 1, 0, -1):
        j = rand.randint(0, i)
        seq[i], seq[j] = seq[j], seq[i]
