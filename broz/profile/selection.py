"""
Profile Kink Selection

The profile collaborator persists kinks as display labels, replaced
wholesale on save. This module enforces the selection caps:
- profile kinks: KINK_PROFILE_MAX (10 by default)
- "looking for" filter kinks: KINK_FILTER_MAX (5 by default)

Labels that are not in the catalog are kept; they are inert for matching.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from broz import config
from broz.taxonomy import KinkTaxonomy, get_taxonomy, normalize_label

logger = logging.getLogger(__name__)


class SelectionLimitError(ValueError):
    """Raised when a kink selection would exceed its cap."""

    def __init__(self, message: str, limit: int):
        super().__init__(message)
        self.limit = limit


def validate_kink_selection(
    labels: Sequence[str],
    limit: int,
    taxonomy: Optional[KinkTaxonomy] = None
) -> List[str]:
    """
    Validate a full selection before it replaces the stored one.

    Duplicates are dropped before the cap is checked. Labels that differ only
    by case or surrounding whitespace count as one kink; the first spelling
    is kept.

    Raises:
        TypeError: if labels is a bare string
        SelectionLimitError: if more than limit distinct labels remain
    """
    if isinstance(labels, str):
        raise TypeError("labels must be a list of kink labels, not a string")

    deduped: List[str] = []
    seen = set()
    for label in labels:
        key = normalize_label(label)
        if key not in seen:
            seen.add(key)
            deduped.append(label)

    if len(deduped) > limit:
        raise SelectionLimitError(
            f"Maximum {limit} kinks, got {len(deduped)}",
            limit=limit,
        )

    if taxonomy is None:
        taxonomy = get_taxonomy()
    known = {normalize_label(label) for label in taxonomy.all_labels()}
    for label in deduped:
        if normalize_label(label) not in known:
            logger.debug(f"Kink label not in catalog, kept as inert: '{label}'")

    return deduped


def toggle_kink(selected: Sequence[str], label: str, limit: int) -> List[str]:
    """
    Toggle a kink label in a selection, returning a new list.

    Present -> removed. Absent -> appended, unless the selection is full.

    Raises:
        SelectionLimitError: if adding would exceed limit
    """
    current = list(selected)
    if label in current:
        return [k for k in current if k != label]

    if len(current) >= limit:
        raise SelectionLimitError(f"Maximum {limit} kinks", limit=limit)

    return current + [label]


class UserKinkProfile(BaseModel):
    """
    The part of a user record this subsystem reads: the persisted kink labels.
    """
    kinks: List[str] = Field(
        default_factory=list,
        description="Kink labels, in the order the user picked them"
    )

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("kinks")
    @classmethod
    def check_profile_cap(cls, v):
        return validate_kink_selection(v, config.KINK_PROFILE_MAX)

    def replace_kinks(self, labels: Sequence[str]) -> "UserKinkProfile":
        """Wholesale replacement, as done on profile save."""
        return self.model_copy(update={"kinks": validate_kink_selection(labels, config.KINK_PROFILE_MAX)})

    def toggle(self, label: str) -> "UserKinkProfile":
        return self.model_copy(update={"kinks": toggle_kink(self.kinks, label, config.KINK_PROFILE_MAX)})


class LookingForFilter(BaseModel):
    """The viewer's "looking for" kinks from the discovery filters."""
    kinks: List[str] = Field(
        default_factory=list,
        description="Kink labels the viewer wants highlighted"
    )

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("kinks")
    @classmethod
    def check_filter_cap(cls, v):
        return validate_kink_selection(v, config.KINK_FILTER_MAX)

    def toggle(self, label: str) -> "LookingForFilter":
        return self.model_copy(update={"kinks": toggle_kink(self.kinks, label, config.KINK_FILTER_MAX)})
