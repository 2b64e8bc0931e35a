"""
Módulo de análisis de topología - Arquitectura modular siguiendo SOLID.

Exporta:
- Funciones puras sobre la lista de adyacencia
- Analyzers especializados (grado, clustering, caminos, centralidad, puentes)
- Coordinador (TopologyAnalysisCoordinator)
"""

# Analyzers base
from .base import GraphAnalyzer

# Funciones puras y analyzers especializados
from .degree import degree_distribution, degree_centrality, DegreeAnalyzer
from .clustering import (
    local_clustering_coefficient,
    global_clustering_coefficient,
    ClusteringAnalyzer
)
from .paths import shortest_path, distances_from, diameter, is_connected, PathAnalyzer
from .centrality import betweenness_centrality, rank_nodes, top_bottlenecks, CentralityAnalyzer
from .bridges import find_bridges, BridgeAnalyzer
from .summary import NetworkSummary, network_summary, SummaryAnalyzer

# Coordinador
from .analyzers import (
    TopologyAnalysisCoordinator,
    TopologyReport,
    classify_status
)

__all__ = [
    # Base
    'GraphAnalyzer',
    
    # Funciones
    'degree_distribution',
    'degree_centrality',
    'local_clustering_coefficient',
    'global_clustering_coefficient',
    'shortest_path',
    'distances_from',
    'diameter',
    'is_connected',
    'betweenness_centrality',
    'rank_nodes',
    'top_bottlenecks',
    'find_bridges',
    'network_summary',
    'NetworkSummary',
    
    # Analyzers especializados
    'DegreeAnalyzer',
    'ClusteringAnalyzer',
    'PathAnalyzer',
    'CentralityAnalyzer',
    'BridgeAnalyzer',
    'SummaryAnalyzer',
    
    # Coordinador
    'TopologyAnalysisCoordinator',
    'TopologyReport',
    'classify_status'
]
