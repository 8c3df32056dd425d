# transition_graph.py
# first-order word transition graph: vertices are words, edges carry
# occurrence counts and (after normalize()) transition probabilities.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)

Word = str


@dataclass
class Edge:
    """
    Directed transition source -> destination.
    destination is the word key of the target vertex in the owning graph.
    """
    destination: Word
    occurrence_count: int = 1
    probability: float = 0.0

    def __str__(self) -> str:
        return self.destination


class Vertex:
    """
    A single distinct word and its outgoing transitions.
    outgoing_edges keeps first-occurrence order of each destination,
    total_outgoing_count counts every observed follower (duplicates included).
    """

    __slots__ = ("_word", "outgoing_edges", "total_outgoing_count", "_by_dest")

    def __init__(self, word: Word) -> None:
        self._word = word
        self.outgoing_edges: List[Edge] = []
        self.total_outgoing_count = 0
        self._by_dest: Dict[Word, Edge] = {}

    @property
    def word(self) -> Word:
        return self._word

    def add_edge(self, dest_word: Word) -> Edge:
        """
        Record one more observation of this word followed by dest_word.
        An existing edge is matched by destination word and its count bumped,
        otherwise a new edge is appended.
        """
        edge = self._by_dest.get(dest_word)
        if edge is not None:
            edge.occurrence_count += 1
        else:
            edge = Edge(dest_word)
            self._by_dest[dest_word] = edge
            self.outgoing_edges.append(edge)
        self.total_outgoing_count += 1
        return edge

    def edge_to(self, word: Word) -> Optional[Edge]:
        return self._by_dest.get(word)

    @property
    def out_degree(self) -> int:
        return len(self.outgoing_edges)

    @property
    def is_dead_end(self) -> bool:
        return not self.outgoing_edges

    def __str__(self) -> str:
        dests = " ".join(str(e) for e in self.outgoing_edges)
        return f"Vertex {self._word} has edge(s) to vertice(s) {dests}".rstrip()

    def __repr__(self) -> str:
        return f"Vertex({self._word!r}, out_degree={self.out_degree})"


class TransitionGraph:
    """
    Weighted directed graph of word transitions.

    Lifecycle:
      - add_transition() for every adjacent token pair
      - normalize() once, turning counts into probabilities
      - read-only afterwards; safe to share between generation calls
    """

    def __init__(self) -> None:
        self._vertices: Dict[Word, Vertex] = {}
        self._normalized = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _ensure_vertex(self, word: Word) -> Vertex:
        vertex = self._vertices.get(word)
        if vertex is None:
            vertex = Vertex(word)
            self._vertices[word] = vertex
        return vertex

    def add_transition(self, source_word: Word, dest_word: Word) -> None:
        """Observe dest_word immediately following source_word."""
        src = self._ensure_vertex(source_word)
        self._ensure_vertex(dest_word)
        src.add_edge(dest_word)
        self._normalized = False

    def normalize(self) -> None:
        """
        Set probability = occurrence_count / total_outgoing_count on every edge.
        Idempotent; dead-end vertices are left untouched.
        """
        for vertex in self._vertices.values():
            total = vertex.total_outgoing_count
            if not total:
                continue
            for edge in vertex.outgoing_edges:
                edge.probability = edge.occurrence_count / total
        self._normalized = True
        logger.debug(
            "normalized graph: %d vertices, %d edges",
            len(self._vertices), self.edge_count(),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get_vertex(self, word: Word) -> Optional[Vertex]:
        """Return the vertex for word, or None if it was never observed."""
        return self._vertices.get(word)

    @property
    def is_normalized(self) -> bool:
        return self._normalized

    def words(self) -> List[Word]:
        return list(self._vertices)

    def vertices(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def edge_count(self) -> int:
        return sum(v.out_degree for v in self._vertices.values())

    def __contains__(self, word: object) -> bool:
        return word in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_dot(self, name: str = "markov") -> str:
        """Render the graph as Graphviz DOT, edges labelled with probability."""
        lines = [f"digraph {name} {{"]
        for vertex in self._vertices.values():
            src = _dot_quote(vertex.word)
            if vertex.is_dead_end:
                lines.append(f"  {src};")
                continue
            for edge in vertex.outgoing_edges:
                lines.append(
                    f"  {src} -> {_dot_quote(edge.destination)} "
                    f"[label=\"{edge.probability:.3f}\"];"
                )
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return "\n".join(str(v) for v in self._vertices.values())


def _dot_quote(word: Word) -> str:
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build(tokens: Iterable[Word]) -> TransitionGraph:
    """
    Build a ready-to-query graph from an ordered token stream:
    one transition per adjacent pair, then a single normalization pass.
    """
    graph = TransitionGraph()
    prev: Optional[Word] = None
    for tok in tokens:
        if prev is not None:
            graph.add_transition(prev, tok)
        prev = tok
    graph.normalize()
    return graph
