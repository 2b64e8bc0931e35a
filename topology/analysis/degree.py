"""Métricas de grado: distribución y centralidad de grado normalizada."""
import networkx as nx
from typing import Dict, Any

from .base import GraphAnalyzer
from .centrality import rank_nodes


def degree_distribution(G: nx.Graph) -> Dict[int, int]:
    """Histograma grado -> cantidad de nodos con ese grado."""
    distribution: Dict[int, int] = {}
    
    for _, degree in G.degree():
        distribution[degree] = distribution.get(degree, 0) + 1
    
    return distribution


def degree_centrality(G: nx.Graph) -> Dict[str, float]:
    """
    Centralidad de grado normalizada: grado / (n - 1).
    
    Con n <= 1 la centralidad es 0 (networkx devuelve 1 en ese caso).
    """
    if G.number_of_nodes() <= 1:
        return {node: 0.0 for node in G}
    
    return nx.degree_centrality(G)


class DegreeAnalyzer(GraphAnalyzer):
    """Analiza la distribución de grados de la red."""
    
    def analyze(self, graph: nx.Graph, top_n: int = 5, **kwargs) -> Dict[str, Any]:
        return {
            'distribution': degree_distribution(graph),
            'centrality': degree_centrality(graph),
            'top_n': top_n,
        }
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Distribución ordenada por grado (claves string para JSON)."""
        distribution = results['distribution']
        centrality = results['centrality']
        top = rank_nodes(centrality, results['top_n'])

        return {
            'distribution': {str(k): distribution[k] for k in sorted(distribution)},
            'top_central': [(node, centrality[node]) for node in top],
        }
    
    def print_results(self, results: Dict[str, Any]):
        print(f"\n{'='*60}")
        print("DISTRIBUCIÓN DE GRADOS")
        print(f"{'='*60}")
        
        for degree, count in sorted(results['distribution'].items()):
            print(f"  grado {degree:3d}: {count:4d} nodos {'#' * min(count, 40)}")
