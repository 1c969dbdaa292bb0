"""
Broz Canonical Hashing
Deterministic fingerprints for compiled-in catalogs.
"""

import hashlib
import json
from typing import Any


def canonicalize(obj: Any) -> str:
    """
    Convert object to canonical JSON string.
    Deterministic: same input always produces same output.

    Tuples are emitted as lists and dict keys are sorted. Non-ASCII text
    (accented trait labels, emoji) is kept as-is and hashed as UTF-8.
    """
    def _clean(o: Any) -> Any:
        if isinstance(o, dict):
            return {str(k): _clean(v) for k, v in sorted(o.items())}
        elif isinstance(o, (list, tuple)):
            return [_clean(i) for i in o]
        elif isinstance(o, (set, frozenset)):
            return sorted(_clean(i) for i in o)
        return o

    cleaned = _clean(obj)
    return json.dumps(cleaned, sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def canonicalize_and_hash(obj: Any) -> str:
    """
    Hash the canonical form of obj.
    Returns: "sha256:<64-char-hex>"
    """
    canonical = canonicalize(obj)
    digest = hashlib.sha256(canonical.encode('utf-8')).hexdigest()
    return f"sha256:{digest}"
