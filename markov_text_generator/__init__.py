# markov_text_generator - build a word transition model from a corpus and generate text from it.

from .core import TransitionGraph, SequenceGenerator, build, generate
from .context import tokenize, read_tokens, CorpusReadError

__all__ = [
    "TransitionGraph",
    "SequenceGenerator",
    "build",
    "generate",
    "tokenize",
    "read_tokens",
    "CorpusReadError",
]

__version__ = "0.1.0"
