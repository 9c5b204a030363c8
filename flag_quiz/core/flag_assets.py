"""Lookup of the packaged flag images."""

from __future__ import annotations

from pathlib import Path

FLAGS_DIR = Path(__file__).resolve().parent.parent / "data" / "flags"


def flag_path(country: str) -> Path | None:
    """Return the SVG file for ``country``, or None when no image is shipped."""
    # Country names also arrive from HTTP paths; only plain file names are allowed.
    if not country or Path(country).name != country or country in (".", ".."):
        return None
    candidate = FLAGS_DIR / f"{country}.svg"
    if not candidate.is_file():
        return None
    return candidate
