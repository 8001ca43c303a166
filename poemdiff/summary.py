"""
Revision-level statistics built on top of the word diff.

The diff engine itself knows nothing about revisions. This module turns its
segments into the numbers a revision history shows (words added and removed,
word and line counts) and into a coarse change type.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional
from .engine import calculate_diff
from .models import Classification, Segment

# Default Configuration
DEFAULT_CONFIG = {
    "MAJOR_CHANGE_RATIO": 0.3,
    "MAJOR_LINE_DELTA": 4,
}


class ChangeType(Enum):
    """Revision tag as stored alongside each saved version."""
    INITIAL = "initial"
    MINOR = "minor"
    MAJOR = "major"
    REGENERATION = "regeneration"
    MANUAL = "manual"


@dataclass(frozen=True)
class DiffSummary:
    words_added: int
    words_deleted: int
    words_unchanged: int

    @classmethod
    def from_segments(cls, segments: List[Segment]) -> "DiffSummary":
        totals = {c: 0 for c in Classification}
        for segment in segments:
            totals[segment.classification] += segment.word_count
        return cls(
            words_added=totals[Classification.ADDED],
            words_deleted=totals[Classification.DELETED],
            words_unchanged=totals[Classification.UNCHANGED],
        )

    @property
    def has_changes(self) -> bool:
        return bool(self.words_added or self.words_deleted)

    def to_dict(self) -> Dict:
        return {
            "words_added": self.words_added,
            "words_deleted": self.words_deleted,
            "words_unchanged": self.words_unchanged,
            "has_changes": self.has_changes,
        }


@dataclass(frozen=True)
class RevisionStats:
    """Word and line counts of a single stored version."""
    word_count: int
    line_count: int

    @classmethod
    def from_text(cls, content: str) -> "RevisionStats":
        if not content:
            return cls(word_count=0, line_count=0)
        return cls(word_count=len(content.split()), line_count=len(content.splitlines()))


def _validated(config: Optional[Dict]) -> Dict:
    merged = dict(DEFAULT_CONFIG)
    if config:
        merged.update(config)
    for key in ("MAJOR_CHANGE_RATIO", "MAJOR_LINE_DELTA"):
        if merged[key] < 0:
            raise ValueError(f"{key} must not be negative, got {merged[key]}")
    return merged


def classify_change(old_text: Optional[str], new_text: str,
                    segments: Optional[List[Segment]] = None,
                    config: Optional[Dict] = None) -> ChangeType:
    """
    Tags a new revision as INITIAL, MINOR or MAJOR.

    Args:
        old_text (str, optional): The previous revision, None for the first one.
        new_text (str): The new revision.
        segments (List[Segment], optional): Precomputed diff of the two texts.
        config (Dict, optional): Overrides for DEFAULT_CONFIG.

    Returns:
        ChangeType: REGENERATION and MANUAL are never returned; they describe
        where a revision came from and are set by the caller.
    """
    config = _validated(config)
    if old_text is None:
        return ChangeType.INITIAL

    if segments is None:
        segments = calculate_diff(old_text, new_text)
    summary = DiffSummary.from_segments(segments)

    old_stats = RevisionStats.from_text(old_text)
    new_stats = RevisionStats.from_text(new_text)

    changed_ratio = (summary.words_added + summary.words_deleted) / max(old_stats.word_count, 1)
    line_delta = abs(new_stats.line_count - old_stats.line_count)

    if changed_ratio >= config["MAJOR_CHANGE_RATIO"] or line_delta >= config["MAJOR_LINE_DELTA"]:
        return ChangeType.MAJOR
    return ChangeType.MINOR
