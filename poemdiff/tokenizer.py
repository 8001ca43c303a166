from typing import List
from .models import Token


def tokenize(text: str) -> List[Token]:
    """
    Splits text into word tokens, each carrying its trailing whitespace.

    Joining the texts of the returned tokens gives back the input exactly.
    Whitespace before the first word becomes the prefix of the first token,
    and whitespace-only input yields one token holding all of it.

    Args:
        text (str): The raw text.

    Returns:
        List[Token]: Tokens in reading order.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str, got {type(text).__name__}")

    chunks: List[str] = []
    word = ""
    whitespace = ""

    for char in text:
        if char.isspace():
            if word:
                chunks.append(word)
                word = ""
            whitespace += char
            continue

        if whitespace:
            if chunks:
                chunks[-1] += whitespace
            else:
                # Leading whitespace: keep it in front of the first word
                word = whitespace
            whitespace = ""
        word += char

    if word:
        chunks.append(word + whitespace)
    elif whitespace:
        if chunks:
            chunks[-1] += whitespace
        else:
            chunks.append(whitespace)

    return [Token(chunk) for chunk in chunks]
