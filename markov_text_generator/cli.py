"""
cli.py - command line text generator
Features:
- Builds the transition graph from a corpus file
- Generates text in probable / random / deterministic mode
- Optional transition table for the start word and DOT export of the graph
- Defaults read from a JSON config, overridden by arguments
- Uses Rich for tables and formatting
"""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from markov_text_generator.context.tokenizer import read_tokens, CorpusReadError
from markov_text_generator.core.transition_graph import TransitionGraph, build
from markov_text_generator.core.sequence_generator import (
    SequenceGenerator,
    edge_sort_key,
    resolve_mode,
)
from markov_text_generator.utils.config_manager import Config
from markov_text_generator.utils.logger_utils import setup_logging, time_block

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Generate text from a word transition model built on a corpus file.",
    )
    parser.add_argument("file", help="corpus text file")
    parser.add_argument("start_word", help="word to start generation from")
    parser.add_argument("length", nargs="?", type=int, default=None,
                        help="number of words to generate (k for probable mode)")
    parser.add_argument("mode", nargs="?", default=None,
                        help="probable, random or deterministic (anything else is deterministic)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible random mode")
    parser.add_argument("--config", default="markov_textgen.json", help="JSON config with defaults")
    parser.add_argument("--dot", action="store_true", help="print the graph in Graphviz DOT format and exit")
    parser.add_argument("--table", action="store_true", help="show the start word's transitions")
    parser.add_argument("-v", "--verbose", action="store_true", help="log timings and graph stats")
    return parser


def show_transitions(console: Console, graph: TransitionGraph, word: str) -> None:
    """Display the outgoing transitions of word, most probable first."""
    vertex = graph.get_vertex(word)
    if vertex is None or vertex.is_dead_end:
        console.print(f"[dim](no transitions from '{escape(word)}')[/dim]")
        return

    table = Table(title=f"Transitions from '{escape(word)}'", box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Probability", justify="right", style="magenta")

    for i, edge in enumerate(sorted(vertex.outgoing_edges, key=edge_sort_key), 1):
        table.add_row(str(i), edge.destination, str(edge.occurrence_count), f"{edge.probability:.3f}")
    table.caption = f"{vertex.total_outgoing_count} observed followers"
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    err_console = Console(stderr=True)

    cfg = Config(args.config)
    level = "INFO" if args.verbose else cfg.get("log_level", "WARNING")
    setup_logging(level, console=err_console)

    length = args.length if args.length is not None else cfg.get("length", 20)
    mode = resolve_mode(args.mode if args.mode is not None else cfg.get("mode"))
    seed = args.seed if args.seed is not None else cfg.get("seed")
    start = args.start_word.lower()

    try:
        with time_block("build graph"):
            graph = build(read_tokens(args.file))
    except CorpusReadError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return 1
    logger.info("graph has %d words, %d transitions", len(graph), graph.edge_count())

    if args.dot:
        console.print(graph.to_dot(), soft_wrap=True, highlight=False, markup=False)
        return 0

    if args.table:
        show_transitions(console, graph, start)

    words = SequenceGenerator(seed=seed).generate(graph, start, length, mode)
    console.print(" ".join(words), soft_wrap=True, highlight=False, markup=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
