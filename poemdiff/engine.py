import logging
from typing import List
from .merger import merge_segments
from .models import Classification, ClassifiedToken, Segment, Token
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class DiffInvariantError(RuntimeError):
    """Raised when the aligner reaches a state that valid input cannot produce."""


class WordDiffEngine:
    """
    Word-level diff engine: LCS backbone plus a greedy lockstep walk.
    """

    def __init__(self, old_tokens: List[Token], new_tokens: List[Token]):
        self.old_tokens = old_tokens
        self.new_tokens = new_tokens
        self.lcs: List[str] = []

        # Only build the table if both sides have content
        if old_tokens and new_tokens:
            self.lcs = self._longest_common_subsequence()

    def _longest_common_subsequence(self) -> List[str]:
        """Builds the DP table over token keys and backtracks the matched keys."""
        old_keys = [t.key for t in self.old_tokens]
        new_keys = [t.key for t in self.new_tokens]
        m, n = len(old_keys), len(new_keys)

        table = [[0] * (n + 1) for _ in range(m + 1)]
        for i in range(1, m + 1):
            for j in range(1, n + 1):
                if old_keys[i - 1] == new_keys[j - 1]:
                    table[i][j] = table[i - 1][j - 1] + 1
                else:
                    table[i][j] = max(table[i - 1][j], table[i][j - 1])

        lcs = []
        i, j = m, n
        while i > 0 and j > 0:
            if old_keys[i - 1] == new_keys[j - 1]:
                lcs.append(old_keys[i - 1])
                i -= 1
                j -= 1
            elif table[i - 1][j] > table[i][j - 1]:
                i -= 1
            else:
                j -= 1
        lcs.reverse()

        if len(lcs) != table[m][n]:
            raise DiffInvariantError(
                f"LCS backtrack produced {len(lcs)} keys, table says {table[m][n]}")

        logger.debug("LCS of %d old / %d new tokens has %d anchors", m, n, len(lcs))
        return lcs

    def run(self) -> List[ClassifiedToken]:
        """
        Walks both token sequences against the LCS and classifies every token.

        Returns:
            List[ClassifiedToken]: Steps in reading order. Skipping ADDED steps
            rebuilds the old text; skipping DELETED steps rebuilds the new text.
        """
        old, new, lcs = self.old_tokens, self.new_tokens, self.lcs
        steps: List[ClassifiedToken] = []
        old_index = new_index = lcs_index = 0

        while old_index < len(old) or new_index < len(new):
            if old_index >= len(old):
                steps.extend(ClassifiedToken(t.text, Classification.ADDED) for t in new[new_index:])
                break
            if new_index >= len(new):
                steps.extend(ClassifiedToken(t.text, Classification.DELETED) for t in old[old_index:])
                break

            old_token, new_token = old[old_index], new[new_index]
            anchor = lcs[lcs_index] if lcs_index < len(lcs) else None
            old_hit = anchor is not None and old_token.key == anchor
            new_hit = anchor is not None and new_token.key == anchor

            if old_hit and new_hit:
                steps.extend(_anchor_steps(old_token, new_token))
                old_index += 1
                new_index += 1
                lcs_index += 1
            elif old_hit:
                # Pure insertion before the next anchor
                steps.append(ClassifiedToken(new_token.text, Classification.ADDED))
                new_index += 1
            elif new_hit:
                steps.append(ClassifiedToken(old_token.text, Classification.DELETED))
                old_index += 1
            else:
                # Substitution
                steps.append(ClassifiedToken(old_token.text, Classification.DELETED))
                steps.append(ClassifiedToken(new_token.text, Classification.ADDED))
                old_index += 1
                new_index += 1

        return steps


def _anchor_steps(old_token: Token, new_token: Token) -> List[ClassifiedToken]:
    """
    Emits a matched pair. Whitespace that differs between the two sides is
    split off as zero-word DELETED/ADDED fragments around the shared part.
    """
    if old_token.text == new_token.text:
        return [ClassifiedToken(old_token.text, Classification.UNCHANGED)]

    if not old_token.key:
        # Whitespace-only tokens share nothing visible
        return [
            ClassifiedToken(old_token.text, Classification.DELETED),
            ClassifiedToken(new_token.text, Classification.ADDED),
        ]

    steps = []
    shared_lead = old_token.leading
    if old_token.leading != new_token.leading:
        shared_lead = ""
        steps.extend(_whitespace_steps(old_token.leading, new_token.leading))

    old_trail, new_trail = old_token.trailing, new_token.trailing
    common = 0
    while (common < min(len(old_trail), len(new_trail))
           and old_trail[common] == new_trail[common]):
        common += 1

    steps.append(ClassifiedToken(
        shared_lead + old_token.key + old_trail[:common], Classification.UNCHANGED))
    steps.extend(_whitespace_steps(old_trail[common:], new_trail[common:]))
    return steps


def _whitespace_steps(old_ws: str, new_ws: str) -> List[ClassifiedToken]:
    steps = []
    if old_ws:
        steps.append(ClassifiedToken(old_ws, Classification.DELETED, word_count=0))
    if new_ws:
        steps.append(ClassifiedToken(new_ws, Classification.ADDED, word_count=0))
    return steps


def align(old_tokens: List[Token], new_tokens: List[Token]) -> List[ClassifiedToken]:
    """Classifies every token of both sequences as unchanged, added or deleted."""
    return WordDiffEngine(old_tokens, new_tokens).run()


def calculate_diff(old_text: str, new_text: str) -> List[Segment]:
    """
    Computes the word-level diff between two texts.

    Args:
        old_text (str): The previous version.
        new_text (str): The current version.

    Returns:
        List[Segment]: Merged, display-ready segments.
    """
    old_tokens = tokenize(old_text)
    new_tokens = tokenize(new_text)
    logger.debug("Diffing %d old tokens against %d new tokens", len(old_tokens), len(new_tokens))
    return merge_segments(align(old_tokens, new_tokens))
