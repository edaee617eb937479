import math
import random

import pytest

from cliquedensity.flow import DinicFlow, FlowNetwork

NETWORK = [
    (0, 1, 3),
    (0, 2, 2),
    (1, 2, 1),
    (1, 3, 2),
    (2, 3, 4),
    (3, 5, 3),
    (2, 4, 2),
    (4, 5, 5),
]


def fill(net, edges):
    for u, v, c in edges:
        net.add_edge(u, v, c)
    return net


def cut_capacity(side, edges):
    return sum(c for u, v, c in edges if u in side and v not in side)


@pytest.mark.parametrize("cls", [FlowNetwork, DinicFlow])
def test_single_edge(cls):
    net = cls(2)
    net.add_edge(0, 1, 7)
    assert net.max_flow(0, 1) == pytest.approx(7)


def test_max_flow_equals_min_cut_edmonds_karp():
    net = fill(FlowNetwork(6), NETWORK)
    value = net.max_flow(0, 5)
    side = net.min_cut(0)
    assert 0 in side and 5 not in side
    assert value == cut_capacity(side, NETWORK)


def test_max_flow_equals_min_cut_dinic():
    net = fill(DinicFlow(6), NETWORK)
    value = net.max_flow(0, 5)
    side = net.reachable(0)
    assert 0 in side and 5 not in side
    assert value == pytest.approx(cut_capacity(side, NETWORK))


def test_solvers_agree_on_random_networks():
    rng = random.Random(1234)
    for _ in range(20):
        n = 8
        edges = {}
        for _ in range(20):
            u, v = rng.sample(range(n), 2)
            edges[(u, v)] = rng.randint(1, 9)
        triples = [(u, v, c) for (u, v), c in edges.items()]
        ek = fill(FlowNetwork(n), triples)
        dn = fill(DinicFlow(n), triples)
        expected = ek.max_flow(0, n - 1)
        assert dn.max_flow(0, n - 1) == pytest.approx(expected)
        assert ek.min_cut(0) == dn.reachable(0)


def test_disconnected_sink_gives_zero():
    net = FlowNetwork(4)
    net.add_edge(0, 1, 5)
    net.add_edge(2, 3, 5)
    assert net.max_flow(0, 3) == 0
    assert net.min_cut(0) == {0, 1}


def test_infinite_middle_edge_is_bounded_by_finite_edges():
    net = FlowNetwork(4)
    net.add_edge(0, 1, 4)
    net.add_edge(1, 2, math.inf)
    net.add_edge(2, 3, 6)
    assert net.max_flow(0, 3) == 4
    assert net.min_cut(0) == {0}


def test_unbounded_flow_raises():
    net = FlowNetwork(2)
    net.add_edge(0, 1, math.inf)
    with pytest.raises(ValueError):
        net.max_flow(0, 1)


def test_add_edge_overwrites_capacity():
    net = FlowNetwork(2)
    net.add_edge(0, 1, 10)
    net.add_edge(0, 1, 3)
    assert net.max_flow(0, 1) == 3


def test_dinic_fractional_capacities():
    net = DinicFlow(4)
    net.add_edge(0, 1, 0.5)
    net.add_edge(0, 2, 0.25)
    net.add_edge(1, 3, 1.0)
    net.add_edge(2, 3, 1.0)
    assert net.max_flow(0, 3) == pytest.approx(0.5 + 0.25)
    assert net.reachable(0) == {0}


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FlowNetwork(-1)
    with pytest.raises(ValueError):
        DinicFlow(-1)