"""Canonical JSON serialization and digests for generated artifacts.

One serializer is used for CLI JSON output, validation reports and
artifact digests, so two runs over the same definition emit the same bytes.
"""

import hashlib
import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Compact separators (",", ":")
    - Lists keep their order; field order inside an artifact is meaningful

    Args:
        obj: JSON-compatible Python object

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def canonical_sha256(obj: Any) -> str:
    """SHA256 of the canonical JSON form, prefixed with "sha256:"."""
    digest = hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"
