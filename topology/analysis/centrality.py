"""Centralidad de intermediación y cuellos de botella."""
import networkx as nx
from typing import Dict, Any, List

from .base import GraphAnalyzer


def betweenness_centrality(G: nx.Graph) -> Dict[str, float]:
    """
    Centralidad de intermediación no normalizada (algoritmo de Brandes).
    
    En grafos no dirigidos networkx ya divide por 2 el total acumulado,
    porque cada par se visita desde ambos extremos.
    """
    return nx.betweenness_centrality(G, normalized=False)


def rank_nodes(scores: Dict[str, float], top_n: int) -> List[str]:
    """
    Los `top_n` nodos con mayor puntaje, de mayor a menor.
    
    sorted() es estable: en empates se conserva el orden de inserción.
    """
    if top_n <= 0:
        return []
    
    ranked = sorted(scores.items(), key=lambda x: x[1], reverse=True)
    return [node for node, _ in ranked[:top_n]]


def top_bottlenecks(G: nx.Graph, top_n: int) -> List[str]:
    """Los `top_n` nodos con mayor intermediación."""
    return rank_nodes(betweenness_centrality(G), top_n)


class CentralityAnalyzer(GraphAnalyzer):
    """Analiza intermediación para identificar nodos críticos de la red."""
    
    def analyze(self, graph: nx.Graph, top_n: int = 5, **kwargs) -> Dict[str, Any]:
        betweenness = betweenness_centrality(graph)
        
        return {
            'betweenness': betweenness,
            'bottlenecks': rank_nodes(betweenness, top_n),
        }
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        betweenness = results['betweenness']
        return {
            'max_betweenness': max(betweenness.values(), default=0.0),
            'bottlenecks': [
                {'node_id': node, 'betweenness': betweenness[node]}
                for node in results['bottlenecks']
            ]
        }
    
    def print_results(self, results: Dict[str, Any]):
        print(f"\n{'='*60}")
        print("CUELLOS DE BOTELLA CRÍTICOS")
        print(f"{'='*60}")
        
        if not results['bottlenecks']:
            print("No se detectaron cuellos de botella")
        
        for i, node in enumerate(results['bottlenecks'], 1):
            print(f"{i:2d}. {node}: intermediación {results['betweenness'][node]:.2f}")
