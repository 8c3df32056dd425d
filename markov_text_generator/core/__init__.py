"""
markov_text_generator.core

The model layer:
 - word transition graph with counts and normalized probabilities (TransitionGraph)
 - next-word selection policies and the sequence walk (SequenceGenerator)
"""

from .transition_graph import Edge, Vertex, TransitionGraph, build
from .sequence_generator import (
    SequenceGenerator,
    generate,
    resolve_mode,
    PROBABLE,
    RANDOM,
    DETERMINISTIC,
)

__all__ = [
    "Edge",
    "Vertex",
    "TransitionGraph",
    "build",
    "SequenceGenerator",
    "generate",
    "resolve_mode",
    "PROBABLE",
    "RANDOM",
    "DETERMINISTIC",
]
