"""Dataset key to guestinfo key mapping."""

from __future__ import annotations

GUESTINFO_PREFIX = "guestinfo"


def guestinfo_key(dataset: str, key: str) -> str:
    """Return the flat guestinfo key for one dataset entry.

    Separators are not escaped, so ``("a.b", "c")`` and ``("a", "b.c")`` map
    to the same key. The legacy protocol has no way to tell them apart.
    """

    return f"{GUESTINFO_PREFIX}.{dataset}.{key}"
