import random
from collections import Counter

from grid_pieces.pieces import Piece
from grid_pieces.selector import make_selector, random_piece


def test_random_piece_returns_catalog_piece() -> None:
    assert random_piece(random.Random(3)) in set(Piece)


def test_seeded_selectors_are_deterministic() -> None:
    first = make_selector(7)
    second = make_selector(7)
    assert [first() for _ in range(50)] == [second() for _ in range(50)]


def test_injected_source_is_deterministic() -> None:
    a = [random_piece(random.Random(11)) for _ in range(5)]
    b = [random_piece(random.Random(11)) for _ in range(5)]
    assert a == b


def test_selection_is_uniform() -> None:
    draws = 50_000
    rng = random.Random(1234)
    counts = Counter(random_piece(rng) for _ in range(draws))
    expected = draws / len(Piece)
    assert set(counts) == set(Piece)
    # Standard deviation per bucket is ~89; allow well over 5 sigma.
    for piece in Piece:
        assert abs(counts[piece] - expected) < 500, (piece, counts[piece])
    chi_square = sum((counts[p] - expected) ** 2 / expected for p in Piece)
    assert chi_square < 30


def test_selection_leaves_global_random_state_alone() -> None:
    state = random.getstate()
    random_piece(random.Random(1))
    select = make_selector()
    [select() for _ in range(10)]
    assert random.getstate() == state
