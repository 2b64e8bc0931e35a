"""Tests de intermediación (Brandes) y cuellos de botella."""
import networkx as nx
import pytest

from topology.core.graph import build_adjacency
from topology.analysis import betweenness_centrality, rank_nodes, top_bottlenecks, CentralityAnalyzer


def test_star_hub_dominates(star_adj):
    bc = betweenness_centrality(star_adj)
    assert bc['hub'] == pytest.approx(6.0)
    assert bc['spoke1'] == 0
    assert all(bc['hub'] > bc[f'spoke{i}'] for i in range(1, 5))


def test_bridge_endpoints_have_higher_betweenness(bridge_adj):
    bc = betweenness_centrality(bridge_adj)
    assert bc['A3'] == pytest.approx(6.0)
    assert bc['B1'] == pytest.approx(6.0)
    for node in ('A1', 'A2', 'B2', 'B3'):
        assert bc['A3'] > bc[node]
        assert bc['B1'] > bc[node]


def test_complete_triangle_is_zero(triangle_adj):
    assert betweenness_centrality(triangle_adj) == {'A': 0, 'B': 0, 'C': 0}


def test_simple_graph(simple_adj):
    # C está en los caminos A-D y B-D
    assert betweenness_centrality(simple_adj) == pytest.approx({'A': 0, 'B': 0, 'C': 2, 'D': 0})


def test_split_shortest_paths():
    # Cuadrado A-B-D-C-A: dos caminos mínimos entre A y D
    adj = build_adjacency(['A', 'B', 'C', 'D'], [('A', 'B'), ('A', 'C'), ('B', 'D'), ('C', 'D')])
    assert betweenness_centrality(adj) == pytest.approx({'A': 0.5, 'B': 0.5, 'C': 0.5, 'D': 0.5})


def test_matches_networkx_unnormalized():
    G = nx.relabel_nodes(nx.karate_club_graph(), str)
    adj = build_adjacency(list(G.nodes), list(G.edges))
    expected = nx.betweenness_centrality(G, normalized=False)
    assert betweenness_centrality(adj) == pytest.approx(expected)


def test_empty_graph():
    assert betweenness_centrality(nx.Graph()) == {}


def test_top_bottlenecks(star_adj, bridge_adj):
    assert top_bottlenecks(star_adj, 1) == ['hub']
    assert set(top_bottlenecks(bridge_adj, 2)) == {'A3', 'B1'}


def test_top_bottlenecks_ties_keep_node_order(triangle_adj):
    assert top_bottlenecks(triangle_adj, 2) == ['A', 'B']


def test_top_bottlenecks_bounds(triangle_adj):
    assert top_bottlenecks(triangle_adj, 0) == []
    assert top_bottlenecks(triangle_adj, 10) == ['A', 'B', 'C']


def test_analyzer_metrics(star_adj):
    analyzer = CentralityAnalyzer()
    metrics = analyzer.get_metrics(analyzer.analyze(star_adj, top_n=1))
    assert metrics['max_betweenness'] == pytest.approx(6.0)
    assert metrics['bottlenecks'][0]['node_id'] == 'hub'


def test_analyzer_reports_betweenness_only(star_adj):
    results = CentralityAnalyzer().analyze(star_adj, top_n=2)
    assert set(results) == {'betweenness', 'bottlenecks'}
    assert results['bottlenecks'] == rank_nodes(results['betweenness'], 2)
