# tests/test_sequence_generator.py
# walk modes, tie-breaking and dead-end fallback

import random

import pytest

from markov_text_generator.core.transition_graph import TransitionGraph, build
from markov_text_generator.core.sequence_generator import (
    SequenceGenerator,
    generate,
    most_probable,
    pick_deterministic,
    pick_random,
    resolve_mode,
)


@pytest.fixture
def story():
    # the->cat, the->dog, cat->sat, dog->sat; "sat" is a dead end
    g = TransitionGraph()
    for a, b in [("the", "cat"), ("cat", "sat"), ("the", "dog"), ("dog", "sat")]:
        g.add_transition(a, b)
    g.normalize()
    return g


@pytest.fixture
def tie():
    g = TransitionGraph()
    g.add_transition("a", "cat")
    g.add_transition("a", "car")
    g.normalize()
    return g


def test_resolve_mode():
    assert resolve_mode("probable") == "probable"
    assert resolve_mode("RANDOM") == "random"
    assert resolve_mode("whatever") == "deterministic"
    assert resolve_mode(None) == "deterministic"


def test_end_to_end_deterministic(story):
    assert generate(story, "the", 3, "deterministic") == ["the", "cat", "sat"]


def test_end_to_end_probable(story):
    assert generate(story, "the", 2, "probable") == ["cat", "dog"]


def test_unknown_mode_defaults_to_deterministic(story):
    assert generate(story, "the", 3, "banana") == ["the", "cat", "sat"]


def test_deterministic_tie_break(tie):
    assert pick_deterministic(tie.get_vertex("a")) == "car"
    assert generate(tie, "a", 2, "deterministic") == ["a", "car"]


def test_probable_tie_break(tie):
    assert generate(tie, "a", 2, "probable") == ["car", "cat"]


def test_probable_orders_by_probability_first():
    g = build(["x", "b", "x", "b", "x", "a"])
    # x->b twice, x->a once
    assert most_probable(g, "x", 5) == ["b", "a"]


def test_probable_truncation(tie):
    assert len(generate(tie, "a", 5, "probable")) == 2
    assert generate(tie, "a", 1, "probable") == ["car"]


def test_probable_unknown_start_is_empty(story):
    assert generate(story, "xyz", 3, "probable") == []


def test_probable_dead_end_start_is_empty(story):
    assert generate(story, "sat", 3, "probable") == []


def test_dead_end_falls_back_to_start(story):
    # the -> cat -> sat (dead end) -> the -> cat
    assert generate(story, "the", 5, "deterministic") == ["the", "cat", "sat", "the", "cat"]
    out = generate(story, "the", 4, "random", seed=7)
    assert out[2] == "sat"
    assert out[3] == "the"


def test_unknown_start_repeats(story):
    assert generate(story, "xyz", 3, "deterministic") == ["xyz", "xyz", "xyz"]
    assert generate(story, "xyz", 3, "random", seed=1) == ["xyz", "xyz", "xyz"]


@pytest.mark.parametrize("length", [1, 0, -4])
def test_short_lengths_yield_start_only(story, length):
    assert generate(story, "the", length, "deterministic") == ["the"]
    assert generate(story, "the", length, "random") == ["the"]


def test_output_length(story):
    assert len(generate(story, "the", 10, "random", seed=3)) == 10


def test_random_is_reproducible_with_seed(story):
    a = generate(story, "the", 20, "random", seed=42)
    b = generate(story, "the", 20, "random", seed=42)
    assert a == b


def test_random_only_emits_observed_successors(story):
    out = SequenceGenerator(seed=0).generate(story, "the", 50, "random")
    for prev, nxt in zip(out, out[1:]):
        if prev == "sat":
            assert nxt == "the"
        else:
            assert story.get_vertex(prev).edge_to(nxt) is not None


class _FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


def test_pick_random_uses_cumulative_order():
    g = build(["s", "a", "s", "b", "s", "b", "s", "c"])
    # stored order a(0.25), b(0.5), c(0.25)
    v = g.get_vertex("s")
    assert pick_random(v, _FixedRandom(0.0)) == "a"
    assert pick_random(v, _FixedRandom(0.25)) == "a"
    assert pick_random(v, _FixedRandom(0.5)) == "b"
    assert pick_random(v, _FixedRandom(0.9)) == "c"


def test_pick_random_falls_back_to_first_edge():
    g = TransitionGraph()
    g.add_transition("s", "a")
    g.add_transition("s", "b")
    # not normalized: every probability reads 0.0
    assert pick_random(g.get_vertex("s"), _FixedRandom(0.5)) == "a"


def test_generate_before_normalize_warns(caplog):
    g = TransitionGraph()
    g.add_transition("s", "a")
    with caplog.at_level("WARNING"):
        out = generate(g, "s", 2, "random", seed=1)
    assert out == ["s", "a"]
    assert "never normalized" in caplog.text


def test_shared_generator_reused_across_calls(story):
    gen = SequenceGenerator(rng=random.Random(5))
    first = gen.generate(story, "the", 6, "random")
    second = gen.generate(story, "the", 6, "random")
    assert len(first) == len(second) == 6


def test_resolve_mode_non_string_is_deterministic():
    assert resolve_mode(3) == "deterministic"
    assert resolve_mode(["random"]) == "deterministic"
