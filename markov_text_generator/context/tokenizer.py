# markov_text_generator/context/tokenizer.py
# corpus tokenizer: lowercase words made of letters, digits, apostrophes and underscores.

from pathlib import Path
from typing import List, Union


class CorpusReadError(OSError):
    """Raised when a corpus file cannot be read."""

    def __init__(self, path, reason: str = "") -> None:
        self.path = str(path)
        msg = f"cannot read corpus {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def _is_word_char(ch: str) -> bool:
    # letters and decimal digits only; combining marks, other numerics
    # (e.g. '½') and connector punctuation other than '_' separate tokens
    return ch.isalpha() or ch.isdecimal() or ch == "'" or ch == "_"


def tokenize(text: str) -> List[str]:
    """
    Return the lowercase tokens of text. Any character that is not a letter,
    digit, apostrophe or underscore separates tokens; no empty tokens.
    """
    if not text:
        return []
    out = []
    word = []
    for ch in text.lower():
        if _is_word_char(ch):
            word.append(ch)
        elif word:
            out.append("".join(word))
            word = []
    if word:
        out.append("".join(word))
    return out


def read_tokens(path: Union[str, Path]) -> List[str]:
    """Read a UTF-8 corpus file and tokenize it."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusReadError(path, str(e)) from e
    return tokenize(text)
