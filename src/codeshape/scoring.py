"""Consistency scoring over naming stats and detected patterns."""

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import numpy as np

from .naming.conventions import NamingConvention, NamingStat
from .patterns.models import ArchitecturalPatternResult


@dataclass(frozen=True)
class ConsistencyMetrics:
    """Consistency scores on a 0-100 scale."""

    overall: int = 0
    naming: int = 0
    architecture: int = 0


def naming_consistency(stats: Iterable[NamingStat]) -> int:
    """Mean share of the dominant convention, over categories that have one.

    Categories with no names or a ``mixed`` dominant are left out.
    """
    shares = [
        stat.share(stat.dominant)
        for stat in stats
        if stat.dominant is not None and stat.dominant != NamingConvention.MIXED
    ]
    if not shares:
        return 0
    return int(round(100 * float(np.mean(shares))))


def score_consistency(
    naming_stats: Mapping[object, NamingStat],
    patterns: Sequence[ArchitecturalPatternResult],
) -> ConsistencyMetrics:
    """Combine naming and architecture consistency.

    ``architecture`` is the confidence of the top pattern and ``overall``
    is the mean of the non-zero components.
    """
    naming = naming_consistency(naming_stats.values())
    architecture = int(patterns[0].confidence) if patterns else 0

    components = np.array([naming, architecture], dtype=float)
    nonzero = components[components > 0]
    overall = int(round(float(nonzero.mean()))) if nonzero.size else 0

    return ConsistencyMetrics(overall=overall, naming=naming, architecture=architecture)
