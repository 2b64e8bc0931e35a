from .config import PATHS, ANALYSIS_CONFIG, API_CONFIG
from .graph import GraphEdge, build_adjacency, node_id

__all__ = [
    'PATHS',
    'ANALYSIS_CONFIG',
    'API_CONFIG',
    'GraphEdge',
    'build_adjacency',
    'node_id',
]
