"""Grapheme clusters - user-perceived characters with a display width."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterator

from wcwidth import wcswidth, wcwidth


def _is_extending(char: str) -> bool:
    """Whether char attaches to the preceding character instead of standing alone."""
    if char in ('\u200d', '\ufe0e', '\ufe0f'):  # ZWJ and variation selectors
        return True
    return unicodedata.combining(char) != 0 or wcwidth(char) == 0


def iter_clusters(text: str) -> Iterator[str]:
    """
    Split text into grapheme clusters.

    A cluster is a base character followed by any combining marks,
    variation selectors, or zero-width-joined characters.
    """
    current = ''
    join_next = False
    for char in text:
        if current and (join_next or _is_extending(char)):
            current += char
            join_next = char == '\u200d'
            continue
        if current:
            yield current
        current = char
        join_next = False
    if current:
        yield current


def text_width(text: str) -> int:
    """Display width of text in terminal columns (non-printables count as 0)."""
    return sum(GraphemeCluster._measure(cluster) for cluster in iter_clusters(text))


@dataclass(frozen=True, slots=True)
class GraphemeCluster:
    """
    A single printable grapheme cluster.

    Used as the fill content for separators and as the unit the cursor
    writes into cells. Wide (e.g. CJK) clusters occupy two columns.
    """
    text: str

    def __post_init__(self) -> None:
        clusters = list(iter_clusters(self.text))
        if len(clusters) != 1:
            raise ValueError(f"Expected exactly one grapheme cluster, got {self.text!r}")
        if self._measure(self.text) <= 0:
            raise ValueError(f"Grapheme cluster {self.text!r} is not printable")

    @staticmethod
    def _measure(cluster: str) -> int:
        width = wcswidth(cluster)
        if width < 0:
            # Emoji ZWJ sequences and similar: fall back to the base character
            width = wcwidth(cluster[0])
        return max(width, 0)

    @classmethod
    def space(cls) -> "GraphemeCluster":
        return cls(' ')

    @property
    def width(self) -> int:
        """Number of terminal columns this cluster occupies."""
        return self._measure(self.text)

    def __str__(self) -> str:
        return self.text
