"""
Kink Matching Models

Request/response models for the matching endpoints.

Version: kink_matching_v1
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class MatchableRequest(BaseModel):
    """Selection to expand through the compatibility relation."""
    selected_ids: List[str] = Field(
        default_factory=list,
        description="Kink ids, e.g. ['actif', 'no_face']"
    )
    selected_labels: List[str] = Field(
        default_factory=list,
        description="Persisted kink labels, e.g. ['Actif', 'No Face']"
    )

    class Config:
        extra = "forbid"


class MatchableResponse(BaseModel):
    success: bool = True
    resolved_ids: List[str] = Field(
        description="Selected kink ids found in the catalog, in input order"
    )
    ignored: List[str] = Field(
        default_factory=list,
        description="Selected ids/labels not in the catalog"
    )
    matchable_ids: List[str] = Field(
        description="Kink ids the selection is compatible with, in catalog order"
    )


class PartitionRequest(BaseModel):
    """A candidate's kinks and the viewer's "looking for" kinks."""
    candidate_kinks: List[str] = Field(
        description="Kink labels on the candidate's profile"
    )
    looking_for: Optional[List[str]] = Field(
        default=None,
        description="Kink labels from the viewer's filters"
    )

    class Config:
        extra = "forbid"


class PartitionResponse(BaseModel):
    success: bool = True
    matching: List[str]
    other: List[str]


class OverlapRequest(BaseModel):
    kinks_a: List[str] = Field(default_factory=list)
    kinks_b: List[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"


class OverlapResponse(BaseModel):
    success: bool = True
    score: float = Field(ge=0.0, le=1.0)


class ToggleRequest(BaseModel):
    """Toggle one kink in a profile or filter selection."""
    selected: List[str] = Field(default_factory=list)
    label: str
    target: Literal["profile", "filter"] = Field(
        default="profile",
        description="Which cap applies: profile (10) or filter (5)"
    )

    class Config:
        extra = "forbid"


class ToggleResponse(BaseModel):
    success: bool = True
    selected: List[str]
    count: int
    limit: int


class MatchingHealthResponse(BaseModel):
    """Health check response for the matching module."""
    status: str = "ok"
    module: str = "kink_matching"
    version: str = "kink_matching_v1"
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
