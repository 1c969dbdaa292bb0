"""
Broz Kink Catalog
Version 1.0.0

This module contains KINK_CATEGORIES: the compiled-in vocabulary of
selectable kinks, grouped by category, with the declared compatibility
relation between kink ids.

Order matters: categories and kinks are listed in the order the selection
grid shows them (Actif, Passif, Versatile before Dominateur, Soumis).

"match_with" is directed. A kink pointing at another does not imply the
reverse (Chasteté points at Dominateur only). None means the kink takes no
part in compatibility matching.
"""

from typing import Any, Dict, List

# ============================================================================
# KINK CATEGORIES
# ============================================================================

KINK_CATEGORIES: List[Dict[str, Any]] = [
    # ===== ROLES =====
    {
        "key": "roles",
        "label": "Rôles & dynamiques",
        "emoji": "🔥",
        "kinks": [
            {"id": "actif", "label": "Actif", "match_with": ["passif", "versatile"]},
            {"id": "passif", "label": "Passif", "match_with": ["actif", "versatile"]},
            {"id": "versatile", "label": "Versatile", "match_with": ["actif", "passif", "versatile"]},
            {"id": "dominateur", "label": "Dominateur", "match_with": ["soumis"]},
            {"id": "soumis", "label": "Soumis", "match_with": ["dominateur"]},
        ],
    },

    # ===== ORIENTATION =====
    {
        "key": "orientation",
        "label": "Orientation",
        "emoji": "🌈",
        "kinks": [
            {"id": "hetero", "label": "Hétéro", "match_with": None},
            {"id": "heteroflexible", "label": "Hétéroflexible", "match_with": None},
            {"id": "bi", "label": "Bi", "match_with": None},
            {"id": "gay", "label": "Gay", "match_with": None},
        ],
    },

    # ===== PROFILES & ATTRACTION =====
    {
        "key": "profils",
        "label": "Profils & attirances",
        "emoji": "💪",
        "kinks": [
            {"id": "masculin", "label": "Masculin", "match_with": None},
            {"id": "twink", "label": "Twink", "match_with": None},
            {"id": "minet", "label": "Minet", "match_with": None},
            {"id": "bear", "label": "Bear", "match_with": None},
            {"id": "femboy", "label": "Femboy", "match_with": None},
            {"id": "trans", "label": "Trans", "match_with": None},
            {"id": "bien_monte", "label": "Bien monté", "match_with": None},
        ],
    },

    # ===== VISIBILITY =====
    {
        "key": "visibilite",
        "label": "Visibilité",
        "emoji": "👀",
        "kinks": [
            {"id": "no_face", "label": "No Face", "match_with": ["no_face", "discret"]},
            {"id": "discret", "label": "Discret", "match_with": ["no_face", "discret"]},
            {"id": "avec_visage", "label": "Avec visage", "match_with": ["avec_visage"]},
        ],
    },

    # ===== PRACTICES =====
    {
        "key": "pratiques",
        "label": "Pratiques & kinks",
        "emoji": "🎭",
        "kinks": [
            {"id": "bdsm", "label": "BDSM", "match_with": ["bdsm"]},
            {"id": "branle_bros", "label": "Branle entre Bros", "match_with": ["branle_bros"]},
            {"id": "jeu_roles", "label": "Jeu de rôles", "match_with": ["jeu_roles"]},
            {"id": "edging", "label": "Edging", "match_with": ["edging"]},
            {"id": "exhib", "label": "Exhib", "match_with": ["exhib"]},
            {"id": "jouet", "label": "Jouet", "match_with": ["jouet"]},
            {"id": "brutal", "label": "Brutal", "match_with": ["brutal"]},
            {"id": "pig", "label": "Pig", "match_with": ["pig"]},
            {"id": "chastete", "label": "Chasteté", "match_with": ["dominateur"]},
            {"id": "dirty_talk", "label": "Dirty talk", "match_with": ["dirty_talk"]},
            {"id": "verbal", "label": "Verbal", "match_with": ["verbal"]},
        ],
    },

    # ===== FETISHES =====
    {
        "key": "fetishes",
        "label": "Fétiches",
        "emoji": "👃",
        "kinks": [
            {"id": "odeurs", "label": "Odeurs", "match_with": ["odeurs"]},
            {"id": "aisselles", "label": "Aisselles", "match_with": ["aisselles"]},
            {"id": "pieds", "label": "Pieds", "match_with": ["pieds"]},
            {"id": "uro", "label": "Uro", "match_with": ["uro"]},
        ],
    },
]
