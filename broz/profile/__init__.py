"""
Broz Profile Kink Selection

Selection rules shared by the profile editor and the "looking for" filter:
caps, toggling, wholesale replacement on save.
"""

from .selection import (
    LookingForFilter,
    SelectionLimitError,
    UserKinkProfile,
    toggle_kink,
    validate_kink_selection,
)

__all__ = [
    "LookingForFilter",
    "SelectionLimitError",
    "UserKinkProfile",
    "toggle_kink",
    "validate_kink_selection",
]
