"""Document model — the single persisted entity.

A ``SettingsDocument`` is a flat mapping of setting names to
JSON-representable values. Secure values are hex strings when encryption
was available at write time; the document itself does not record which
keys are secure.
"""

from __future__ import annotations

from typing import Any, Dict

StoredValue = Any
SettingsDocument = Dict[str, StoredValue]


def empty_document() -> SettingsDocument:
    """Return a fresh, empty document."""
    return {}
