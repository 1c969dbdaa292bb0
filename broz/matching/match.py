"""
Kink Matching Core Logic

This module implements:
1. Matchable kinks: which kink ids a selection is compatible with
2. Preference partition: a candidate's kinks split into what the viewer
   is looking for and the rest, order preserved
3. Kink overlap score used by the live-matching scorer

All functions are pure and deterministic. Unknown ids or labels never
raise: stored selections may reference kinks that were since removed.

Version: kink_matching_v1
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from broz.taxonomy import KinkTaxonomy, get_taxonomy, normalize_label

logger = logging.getLogger(__name__)


def _require_collection(name: str, value) -> None:
    """Reject a bare string or a non-iterable where a list of labels/ids is expected."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"{name} must be a list of strings, got {type(value).__name__}")


def matchable_trait_ids(
    selected_ids: Iterable[str],
    taxonomy: Optional[KinkTaxonomy] = None
) -> Set[str]:
    """
    Union of the compatibility relation over a selection.

    For each selected id, every id it is declared compatible with is added.
    Ids with no relation, and ids not in the catalog, add nothing.

    Args:
        selected_ids: Kink ids the user selected
        taxonomy: Catalog to use (defaults to the shared one)

    Returns:
        Set of kink ids the selection is compatible with
    """
    _require_collection("selected_ids", selected_ids)
    if taxonomy is None:
        taxonomy = get_taxonomy()

    matchable: Set[str] = set()
    for kink_id in selected_ids:
        if kink_id not in taxonomy:
            logger.debug(f"Skipping unknown kink id: '{kink_id}'")
            continue
        matchable.update(taxonomy.compatible_ids(kink_id))

    return matchable


def matchable_trait_ids_for_labels(
    labels: Iterable[str],
    taxonomy: Optional[KinkTaxonomy] = None
) -> Set[str]:
    """
    Same as matchable_trait_ids, starting from persisted profile labels.

    Labels are resolved through the catalog's label index; labels that do
    not resolve are inert.
    """
    _require_collection("labels", labels)
    if taxonomy is None:
        taxonomy = get_taxonomy()
    return matchable_trait_ids(taxonomy.labels_to_ids(labels), taxonomy)


def partition_by_preference(
    candidate_kinks: Sequence[str],
    looking_for: Optional[Sequence[str]] = None
) -> Tuple[List[str], List[str]]:
    """
    Split a candidate's kinks into those the viewer is looking for and the rest.

    - No candidate kinks: ([], [])
    - No preferences: nothing is highlighted, ([], candidate_kinks)
    - Otherwise labels are compared case-folded and trimmed; both outputs
      keep the candidate's original order.

    This compares labels to labels. It does not consult the compatibility
    relation.

    Args:
        candidate_kinks: Kink labels shown on the candidate's profile
        looking_for: Kink labels from the viewer's filters

    Returns:
        (matching, other)
    """
    _require_collection("candidate_kinks", candidate_kinks)
    if looking_for is not None:
        _require_collection("looking_for", looking_for)

    candidate_kinks = list(candidate_kinks)
    if not candidate_kinks:
        return [], []

    if not looking_for:
        return [], candidate_kinks

    wanted = {normalize_label(label) for label in looking_for}

    matching: List[str] = []
    other: List[str] = []
    for kink in candidate_kinks:
        if normalize_label(kink) in wanted:
            matching.append(kink)
        else:
            other.append(kink)

    return matching, other


def kink_overlap_score(
    kinks_a: Sequence[str],
    kinks_b: Sequence[str]
) -> float:
    """
    Kink overlap between two users, in [0, 1].

    Score = (entries of A also in B) / max(len(A), len(B), 1)

    Two users with no kinks at all score a neutral 0.5. Labels are compared
    exactly, as stored.
    """
    _require_collection("kinks_a", kinks_a)
    _require_collection("kinks_b", kinks_b)

    kinks_a = list(kinks_a)
    kinks_b = list(kinks_b)
    if not kinks_a and not kinks_b:
        return 0.5

    in_b = set(kinks_b)
    intersection = sum(1 for kink in kinks_a if kink in in_b)
    max_len = max(len(kinks_a), len(kinks_b), 1)
    return intersection / max_len
