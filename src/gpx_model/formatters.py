"""Formatting utilities for display."""

from gpx_model.geometry import geodesic_length
from gpx_model.models import Document, Track


def format_distance(meters: float) -> str:
    """Format meters as 'X.XX km (Y.YY mi)'."""
    km = meters / 1000
    mi = km * 0.621371
    return f"{km:.2f} km ({mi:.2f} mi)"


def format_track(index: int, track: Track) -> list[str]:
    lines = [f"Track {index}: {track.name or '(unnamed)'}"]
    for seg_index, line in enumerate(track.multilinestring(), start=1):
        lines.append(
            f"  Segment {seg_index}: {len(line)} points, "
            f"{format_distance(geodesic_length(line))}"
        )
    return lines


def format_summary(doc: Document) -> str:
    """Human-readable summary of a document and its track geometry."""
    lines = ["=== GPX Document ==="]
    lines.append(f"Version:  {doc.version or 'unknown'}")
    if doc.metadata is not None and doc.metadata.name:
        lines.append(f"Name:     {doc.metadata.name}")
    lines.append(f"Tracks:   {len(doc.tracks)}")
    for index, track in enumerate(doc.tracks, start=1):
        lines.extend(format_track(index, track))
    return "\n".join(lines)
