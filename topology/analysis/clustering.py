"""Coeficientes de clustering local y global."""
import networkx as nx
from typing import Dict, Any

from .base import GraphAnalyzer


def local_clustering_coefficient(G: nx.Graph, node: str) -> float:
    """
    Fracción de pares de vecinos de `node` que están conectados entre sí.
    
    Devuelve 0 para grado < 2 y para nodos fuera del grafo.
    """
    if node not in G:
        return 0.0
    return nx.clustering(G, node)


def global_clustering_coefficient(G: nx.Graph) -> float:
    """
    Promedio de coeficientes locales sobre nodos con grado >= 2.
    
    A diferencia de nx.average_clustering, los nodos de grado < 2 no
    cuentan como cero: se excluyen del promedio.
    """
    qualifying = [node for node, degree in G.degree() if degree >= 2]
    if not qualifying:
        return 0.0
    
    coefficients = nx.clustering(G, qualifying)
    return sum(coefficients.values()) / len(qualifying)


class ClusteringAnalyzer(GraphAnalyzer):
    """Analiza la cohesión local de la red."""
    
    def analyze(self, graph: nx.Graph, **kwargs) -> Dict[str, Any]:
        return {
            'local': nx.clustering(graph),
            'global': global_clustering_coefficient(graph),
        }
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return {'global_clustering_coefficient': results['global']}
    
    def print_results(self, results: Dict[str, Any]):
        print(f"Coeficiente de clustering global: {results['global']:.3f}")
