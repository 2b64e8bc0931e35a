"""
Motor de análisis de topología para redes de nodos blockchain.

Superficie funcional pura sobre un modelo de adyacencia no dirigido.
"""
from .core.graph import GraphEdge, build_adjacency
from .analysis import (
    degree_distribution,
    degree_centrality,
    local_clustering_coefficient,
    global_clustering_coefficient,
    shortest_path,
    distances_from,
    diameter,
    betweenness_centrality,
    top_bottlenecks,
    find_bridges,
    network_summary,
    NetworkSummary,
)
from .export.graphml import export_graphml

__all__ = [
    'GraphEdge',
    'build_adjacency',
    'degree_distribution',
    'degree_centrality',
    'local_clustering_coefficient',
    'global_clustering_coefficient',
    'shortest_path',
    'distances_from',
    'diameter',
    'betweenness_centrality',
    'top_bottlenecks',
    'find_bridges',
    'network_summary',
    'NetworkSummary',
    'export_graphml',
]
