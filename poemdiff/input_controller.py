import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class InputParser(ABC):
    """Abstract base class for input parsers."""

    @abstractmethod
    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        """
        Reads the input source(s) into the old and new text.

        Args:
            source_a (str): The first source path.
            source_b (str, optional): The second source path.

        Returns:
            Tuple[str, str]: (old_text, new_text)
        """

    def read_text(self, filepath: str) -> str:
        """Reads a whole file verbatim. A missing file reads as empty text."""
        try:
            with open(filepath, 'r', encoding='utf-8', errors='replace', newline='') as f:
                return f.read()
        except FileNotFoundError:
            logger.warning("File not found: %s", filepath)
            return ""


class RawFileParser(InputParser):
    """Reads two separate text files, old then new."""
    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        if not source_b:
            raise ValueError("RawFileParser requires two files.")
        return self.read_text(source_a), self.read_text(source_b)


class CombinedFileParser(InputParser):
    """Reads a single file holding both versions separated by delimiter lines."""
    DELIMITER_OLD = "--- OLD TEXT ---"
    DELIMITER_NEW = "--- NEW TEXT ---"

    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        sections = {"OLD": [], "NEW": []}
        current_section = None
        found_old = False
        found_new = False

        for line in self.read_text(source_a).splitlines(keepends=True):
            stripped = line.strip()
            if stripped == self.DELIMITER_OLD:
                current_section = "OLD"
                found_old = True
                continue
            elif stripped == self.DELIMITER_NEW:
                current_section = "NEW"
                found_new = True
                continue

            if current_section:
                sections[current_section].append(line)

        if not found_old or not found_new:
            logger.warning("Missing delimiters in %s. Found OLD: %s, NEW: %s",
                           source_a, found_old, found_new)

        old_text = "".join(sections["OLD"])
        # The line break before the NEW delimiter only separates the sections
        if old_text.endswith("\r\n"):
            old_text = old_text[:-2]
        elif old_text.endswith("\n"):
            old_text = old_text[:-1]
        return old_text, "".join(sections["NEW"])


class InputController:
    """
    Picks a parser for the given sources and returns the two texts to diff.
    """

    def load(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        """
        Args:
            source_a (str): Old text file, or a combined file.
            source_b (str, optional): New text file.

        Returns:
            Tuple[str, str]: (old_text, new_text)
        """
        parser = self._get_parser(source_b)
        return parser.parse(source_a, source_b)

    def _get_parser(self, source_b: Optional[str] = None) -> InputParser:
        if source_b:
            return RawFileParser()
        return CombinedFileParser()
