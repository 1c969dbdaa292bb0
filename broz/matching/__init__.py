"""
Broz Kink Matching Layer

Given kink selections, what is compatible, and what should surface first?

- matchable_trait_ids: selection -> ids it is compatible with (directed relation)
- partition_by_preference: candidate kinks -> (looked-for, other), order kept
- kink_overlap_score: pairwise overlap used by live matching

PRINCIPLE: Kinks never block a match. They only inform and order.

Version: kink_matching_v1
"""

from .match import (
    kink_overlap_score,
    matchable_trait_ids,
    matchable_trait_ids_for_labels,
    partition_by_preference,
)

__all__ = [
    "kink_overlap_score",
    "matchable_trait_ids",
    "matchable_trait_ids_for_labels",
    "partition_by_preference",
]

__version__ = "kink_matching_v1"
