import pytest

from judgesolvers.graphs import (
    UnionFind,
    dark_roads_savings,
    heavy_cycle_edges,
    mice_escaping,
    run,
    shortest_path,
    transportation,
)


def test_union_find_joins_sets():
    uf = UnionFind(4)
    uf.unite(0, 1)
    uf.unite(1, 2)
    assert uf.same(0, 2)
    assert not uf.same(0, 3)
    assert uf.components == len({uf.find(i) for i in range(4)})


def test_union_find_repeat_union_keeps_count():
    uf = UnionFind(5)
    uf.unite(3, 4)
    before = uf.components
    uf.unite(4, 3)
    assert uf.components == before


def test_shortest_path_single_edge():
    assert shortest_path(2, [(0, 1, 7)], 0, 1) == 7


def test_shortest_path_prefers_two_hops():
    edges = [(0, 1, 2), (1, 2, 3), (0, 2, 10)]
    via = shortest_path(3, edges, 0, 1) + shortest_path(3, edges, 1, 2)
    assert shortest_path(3, edges, 0, 2) == via


def test_shortest_path_is_symmetric():
    edges = [(0, 1, 4), (1, 2, 6), (2, 3, 1), (0, 3, 20)]
    assert shortest_path(4, edges, 0, 3) == shortest_path(4, edges, 3, 0)


def test_shortest_path_unreachable():
    assert shortest_path(3, [(0, 1, 5)], 0, 2) is None


def test_shortest_path_same_node():
    assert shortest_path(2, [(0, 1, 5)], 1, 1) == 0


def test_mice_count_grows_with_limit():
    passages = [(2, 1, 4), (3, 2, 4)]
    counts = [mice_escaping(3, 1, limit, passages) for limit in (0, 4, 100)]
    assert counts == sorted(counts)
    assert counts[-1] == 3


def test_mice_passages_are_one_way():
    assert mice_escaping(2, 1, 100, [(1, 2, 1)]) == mice_escaping(2, 1, 0, [])


def test_transportation_generous_threshold_is_one_state():
    cities = [(0, 0), (3, 4), (10, 0), (7, 7)]
    states, _, railroads = transportation(cities, 1000)
    assert states == 1
    assert railroads == 0


def test_transportation_zero_threshold_all_separate():
    cities = [(0, 0), (3, 4), (10, 0)]
    states, roads, _ = transportation(cities, 0)
    assert states == len(cities)
    assert roads == 0


def test_transportation_total_length_independent_of_threshold():
    cities = [(0, 0), (3, 4), (10, 0), (7, 7), (20, 20)]
    assert transportation(cities, 1000)[1] == transportation(cities, 0)[2]


def test_dark_roads_tree_saves_nothing():
    assert dark_roads_savings(3, [(0, 1, 4), (1, 2, 6)]) == 0


def test_dark_roads_drops_heaviest_cycle_edge():
    assert dark_roads_savings(3, [(0, 1, 4), (1, 2, 6), (0, 2, 9)]) == 9


def test_heavy_cycle_edges_triangle():
    assert heavy_cycle_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)]) == [3]


def test_heavy_cycle_edges_forest():
    assert heavy_cycle_edges(4, [(0, 1, 1), (2, 3, 2)]) == []


def test_run_unreachable_message():
    assert run("10986", "1\n2 0 0 1\n") == "Case #1: unreachable\n"


def test_run_forest_message():
    assert run("11747", "2 1\n0 1 5\n0 0\n") == "forest\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("1", "")