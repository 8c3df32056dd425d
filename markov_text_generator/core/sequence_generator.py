# sequence_generator.py
"""
SequenceGenerator - walks a normalized TransitionGraph to produce word sequences.

Modes:
 - "probable": one-shot top-k of the start word's successors (no walk)
 - "random": probability-weighted sampling at every step
 - "deterministic": arg-max at every step, ties broken by ascending word
   (also the default for any unrecognized mode string)

Dead ends (unknown word or no outgoing edges) reset the walk to the start
word instead of stopping, so a walk always emits `length` words.
"""

from __future__ import annotations

from typing import List, Optional, Tuple
import logging
import random

from .transition_graph import Edge, TransitionGraph, Vertex, Word

logger = logging.getLogger(__name__)

PROBABLE = "probable"
RANDOM = "random"
DETERMINISTIC = "deterministic"
MODES = (PROBABLE, RANDOM, DETERMINISTIC)


def resolve_mode(mode: Optional[str]) -> str:
    """Map a user mode string onto a known mode; anything else is deterministic."""
    m = mode.strip().lower() if isinstance(mode, str) else ""
    return m if m in MODES else DETERMINISTIC


def edge_sort_key(edge: Edge) -> Tuple[float, Word]:
    # probability desc, then destination word asc
    return (-edge.probability, edge.destination)


# ----------------------------------------------------------------------
# Selection policies
# ----------------------------------------------------------------------
def most_probable(graph: TransitionGraph, word: Word, k: int) -> List[Word]:
    """
    Up to k successor words of `word`, most probable first.
    Unknown word or k <= 0 -> empty list.
    """
    vertex = graph.get_vertex(word)
    if vertex is None or k <= 0:
        return []
    ranked = sorted(vertex.outgoing_edges, key=edge_sort_key)
    return [e.destination for e in ranked[:k]]


def pick_random(vertex: Vertex, rng: random.Random) -> Word:
    """
    Weighted draw over the vertex's edges in stored order. Falls back to the
    first edge if rounding leaves the cumulative sum short of the draw.
    """
    edges = vertex.outgoing_edges
    r = rng.random()
    cumulative = 0.0
    for edge in edges:
        cumulative += edge.probability
        if cumulative >= r:
            return edge.destination
    return edges[0].destination


def pick_deterministic(vertex: Vertex) -> Word:
    """Most probable successor; equal probabilities resolve to the smaller word."""
    if vertex.is_dead_end:
        return vertex.word
    best = min(vertex.outgoing_edges, key=edge_sort_key)
    return best.destination


class SequenceGenerator:
    """
    Produces word sequences from a frozen graph.
    Owns a single random source; pass seed (or an rng) for reproducible output.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random(seed)

    def generate(self, graph: TransitionGraph, start_word: Word, length: int,
                 mode: Optional[str] = DETERMINISTIC) -> List[Word]:
        mode = resolve_mode(mode)
        if not graph.is_normalized:
            logger.warning("generating from a graph that was never normalized; probabilities read as zero")

        if mode == PROBABLE:
            return most_probable(graph, start_word, length)

        output = [start_word]
        current = start_word
        for _ in range(1, length):
            vertex = graph.get_vertex(current)
            if vertex is None or vertex.is_dead_end:
                current = start_word
            elif mode == RANDOM:
                current = pick_random(vertex, self.rng)
            else:
                current = pick_deterministic(vertex)
            output.append(current)
        return output


def generate(graph: TransitionGraph, start_word: Word, length: int,
             mode: Optional[str] = DETERMINISTIC, seed: Optional[int] = None) -> List[Word]:
    """Convenience wrapper: one-off SequenceGenerator per call."""
    return SequenceGenerator(seed=seed).generate(graph, start_word, length, mode)
