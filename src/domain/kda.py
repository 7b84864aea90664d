"""Kills-to-deaths ratio shared by per-match and global rankings."""

from __future__ import annotations


def calculate_kda(kills: int, deaths: int) -> float:
    """Return ``kills`` when there are no deaths, else ``kills / deaths`` to 2 decimals."""
    if deaths == 0:
        return kills
    return round(kills / deaths, 2)
