from .tokenizer import tokenize, read_tokens, CorpusReadError

__all__ = ["tokenize", "read_tokens", "CorpusReadError"]
