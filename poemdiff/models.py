from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class Classification(Enum):
    """Change tag applied to a token or a segment."""
    UNCHANGED = "unchanged"
    ADDED = "added"
    DELETED = "deleted"


@dataclass(frozen=True)
class Token:
    """
    A single word plus the whitespace that follows it.

    Attributes:
        text (str): The raw substring, whitespace included.
        key (str): The text with surrounding whitespace stripped. Used for matching.
    """
    text: str
    key: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "key", self.text.strip())

    @property
    def leading(self) -> str:
        """Whitespace before the word (only ever non-empty on the first token)."""
        if not self.key:
            return ""
        return self.text[:self.text.index(self.key)]

    @property
    def trailing(self) -> str:
        if not self.key:
            return self.text
        return self.text[len(self.leading) + len(self.key):]


@dataclass(frozen=True)
class ClassifiedToken:
    """One step of the aligner's walk."""
    text: str
    classification: Classification
    word_count: int = 1


@dataclass(frozen=True)
class Segment:
    """
    A maximal run of text sharing one classification.

    Attributes:
        text (str): Concatenated token texts, whitespace preserved.
        classification (Classification): The shared tag.
        word_count (int): Number of tokens in the run (not characters).
    """
    text: str
    classification: Classification
    word_count: int

    def to_dict(self) -> Dict:
        return {
            "text": self.text,
            "classification": self.classification.value,
            "word_count": self.word_count,
        }
