import pytest

from algo_tracker.algorithms.graph import breadth_first_search
from algo_tracker.generator import InputKind, TestDataGenerator


def test_same_seed_same_data() -> None:
    a = TestDataGenerator(11)
    b = TestDataGenerator(11)
    assert a.random_array(50) == b.random_array(50)
    assert a.random_graph(10, 20).adjacency_list == b.random_graph(10, 20).adjacency_list


def test_array_shapes() -> None:
    gen = TestDataGenerator(5)
    rnd = gen.random_array(200, 10, 20)
    assert len(rnd) == 200 and all(10 <= v < 20 for v in rnd)
    srt = gen.sorted_array(100)
    assert srt == sorted(srt)
    rev = gen.reversed_array(100)
    assert rev == sorted(rev, reverse=True)
    dup = gen.duplicates_array(300, unique_values=4)
    assert set(dup) <= {0, 1, 2, 3}
    assert len(set(dup)) < len(dup)


def test_nearly_sorted_is_permutation_of_sorted_values() -> None:
    gen = TestDataGenerator(2)
    arr = gen.nearly_sorted_array(100, swap_factor=0.05)
    assert len(arr) == 100
    no_swaps = TestDataGenerator(0).nearly_sorted_array(50, swap_factor=0.0)
    assert no_swaps == sorted(no_swaps)


@pytest.mark.parametrize("kind", list(InputKind))
def test_array_dispatch(kind: InputKind) -> None:
    gen = TestDataGenerator(9)
    assert len(gen.array(kind, 30)) == 30
    assert gen.array(kind.value, 0) == []


def test_random_graph_connected_from_zero() -> None:
    gen = TestDataGenerator(4)
    g = gen.random_graph(25, 60, max_weight=5)
    assert sorted(breadth_first_search(g, 0)) == list(range(25))
    for v in range(g.vertices):
        for e in g.adjacency_list[v]:
            assert e.source == v
            assert 1 <= e.weight <= 5
    # chain edges are always first for vertices 0..n-2
    assert all(g.adjacency_list[v][0].destination == v + 1 for v in range(24))
    assert all(e.source != e.destination for edges in g.adjacency_list for e in edges)


@pytest.mark.parametrize(
    "call",
    [
        lambda g: g.random_array(-1),
        lambda g: g.random_array(5, 3, 3),
        lambda g: g.duplicates_array(5, 0),
        lambda g: g.nearly_sorted_array(5, swap_factor=1.5),
        lambda g: g.random_graph(0, 0),
        lambda g: g.array("zigzag", 5),
    ],
)
def test_invalid_arguments(call) -> None:
    with pytest.raises(ValueError):
        call(TestDataGenerator(0))
