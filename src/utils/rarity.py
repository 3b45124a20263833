import logging
import random
from typing import Any, Iterable, List, Protocol, Sequence, Tuple

from models.models import RarityTier
from utils.constants import RARITY_TIERS

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


def validate_tier_table(tiers: Sequence[RarityTier]) -> List[RarityTier]:
    """Reject a tier table that cannot be sampled from."""
    if not tiers:
        raise ValueError("Rarity table must contain at least one tier.")
    ids = [tier.id for tier in tiers]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Rarity table contains duplicate tier ids: {ids}")
    if any(tier.weight < 0 for tier in tiers):
        raise ValueError("Rarity weights must be non-negative.")
    if sum(tier.weight for tier in tiers) <= 0:
        raise ValueError("Rarity table must have a positive total weight.")
    return list(tiers)


def weighted_choice(
    entries: Sequence[Tuple[str, float]], rng: RandomSource = random
) -> str:
    """
    Pick one identifier from an ordered list of (identifier, weight) pairs.

    The draw is uniform in [0, total). Entries are walked in order, subtracting
    each weight from the draw; the first entry that brings the remainder to
    zero or below is returned. Zero-weight entries are never selected. If the
    walk runs off the end, the last positive-weight entry is returned.

    Args:
        entries: Ordered (identifier, weight) pairs with a positive total weight.
        rng: Any object with a ``random()`` method returning a float in [0, 1).

    Returns:
        str: The selected identifier.
    """
    positive = [(key, weight) for key, weight in entries if weight > 0]
    if not positive:
        raise ValueError("weighted_choice needs at least one positive weight")
    total = sum(weight for _, weight in positive)
    remainder = rng.random() * total
    for key, weight in positive:
        remainder -= weight
        if remainder <= 0:
            return key
    return positive[-1][0]


def load_default_tiers(raw: Iterable[Any] = RARITY_TIERS) -> List[RarityTier]:
    return validate_tier_table([RarityTier(**tier) for tier in raw])


class RarityRoller:
    """Assigns a rarity tier to each newly generated question."""

    def __init__(
        self,
        tiers: Sequence[RarityTier] | None = None,
        rng: RandomSource = random,
    ):
        self.tiers = validate_tier_table(
            tiers if tiers is not None else load_default_tiers()
        )
        self.rng = rng
        self._by_id = {tier.id: tier for tier in self.tiers}

    def roll(self) -> RarityTier:
        tier_id = weighted_choice(
            [(tier.id, tier.weight) for tier in self.tiers], rng=self.rng
        )
        logger.info(f"Rolled rarity tier: {tier_id}")
        return self._by_id[tier_id]

    def tier(self, tier_id: str) -> RarityTier:
        return self._by_id[tier_id]
