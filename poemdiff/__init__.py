"""
poemdiff Package
================

Word-level diffing for successive drafts of a poem. Both texts are split into
word tokens, aligned against their longest common subsequence, and the
classified tokens are merged into unchanged / added / deleted segments that
can be rendered directly.

Modules:
    - tokenizer: Splits text into whitespace-carrying word tokens.
    - engine: LCS alignment and the calculate_diff entry point.
    - merger: Folds classified tokens into segments.
    - models: Data structures (Token, Segment, Classification).
    - summary: Word/line statistics and change-type classification.
    - input_controller: Loads texts from files.
    - visualizer: HTML and terminal rendering.
"""
from .engine import DiffInvariantError, align, calculate_diff
from .merger import merge_segments
from .models import Classification, ClassifiedToken, Segment, Token
from .tokenizer import tokenize

__all__ = [
    "Classification",
    "ClassifiedToken",
    "DiffInvariantError",
    "Segment",
    "Token",
    "align",
    "calculate_diff",
    "merge_segments",
    "tokenize",
]
