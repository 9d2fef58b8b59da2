"""Deterministic colour assignment for rendering placed pieces.

Colours are a presentation side-channel only; they never influence where
a piece is placed.
"""

from __future__ import annotations

import hashlib


def color_for_key(key: str) -> str:
    """Derive a stable ``#rrggbb`` colour from a dimension key.

    The colour is seeded from the key's MD5 digest, so the same key maps to
    the same colour across runs and processes. Each channel is lifted into
    the upper half of its range to keep text readable on top of it.

    Args:
        key: Dimension key such as ``"4x2"``.

    Returns:
        Hex colour string.
    """
    digest = hashlib.md5(key.encode()).digest()
    r, g, b = (0x60 + digest[i] % 0xA0 for i in range(3))
    return f"#{r:02x}{g:02x}{b:02x}"


class ColorMap:
    """Lazily populated mapping from dimension key to colour.

    One instance is created per packing run and never shared.
    """

    def __init__(self) -> None:
        self._colors: dict[str, str] = {}

    def color_for(self, key: str) -> str:
        """Return the colour for ``key``, assigning one on first use."""
        if key not in self._colors:
            self._colors[key] = color_for_key(key)
        return self._colors[key]

    def __contains__(self, key: object) -> bool:
        return key in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def as_dict(self) -> dict[str, str]:
        """Snapshot of assigned colours in first-use order."""
        return dict(self._colors)
