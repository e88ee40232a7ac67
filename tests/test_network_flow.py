import pytest

from algokit.network_flow import FlowResult, ford_fulkerson


def _matrix(size, edges):
    graph = [[0] * size for _ in range(size)]
    for u, v, w in edges:
        graph[u][v] = w
    return graph


SAMPLE = _matrix(
    6,
    [(0, 1, 4), (0, 3, 3), (1, 2, 4), (2, 3, 3), (2, 5, 2), (3, 4, 6), (4, 5, 6)],
)


def test_sample_network():
    result = ford_fulkerson(SAMPLE, 0, 5)
    assert result.max_flow == 7


def test_paths_run_from_source_to_sink_along_edges():
    result = ford_fulkerson(SAMPLE, 0, 5)
    assert result.augmenting_paths
    for path in result.augmenting_paths:
        assert path[0] == 0
        assert path[-1] == 5
        assert len(set(path)) == len(path)


def test_flow_bounded_by_source_capacity():
    result = ford_fulkerson(SAMPLE, 0, 5)
    assert result.max_flow <= sum(SAMPLE[0])
    assert result.max_flow <= sum(row[5] for row in SAMPLE)


def test_input_is_not_modified():
    graph = [list(row) for row in SAMPLE]
    ford_fulkerson(graph, 0, 5)
    assert graph == SAMPLE


def test_single_edge_carries_its_capacity():
    result = ford_fulkerson(_matrix(2, [(0, 1, 9)]), 0, 1)
    assert result == FlowResult(9, [[0, 1]])


def test_disconnected_sink_gets_nothing():
    result = ford_fulkerson(_matrix(3, [(0, 1, 5)]), 0, 2)
    assert result.max_flow == 0
    assert result.augmenting_paths == []


def test_invalid_inputs():
    with pytest.raises(ValueError):
        ford_fulkerson([[0, 1], [0]], 0, 1)
    with pytest.raises(ValueError):
        ford_fulkerson([[0, -1], [0, 0]], 0, 1)
    with pytest.raises(IndexError):
        ford_fulkerson([[0, 1], [0, 0]], 0, 2)