"""Caminos mínimos no ponderados, distancias y diámetro de la red."""
import math
import networkx as nx
from typing import Dict, Any, List, Optional, Union

from .base import GraphAnalyzer


Distance = Union[int, float]  # float solo para math.inf


def shortest_path(G: nx.Graph, source: str, target: str) -> Optional[List[str]]:
    """
    Camino mínimo (BFS bidireccional) entre dos nodos.
    
    Returns:
        Lista de ids incluyendo ambos extremos, o None si no hay camino
        o alguno de los extremos no está en el grafo.
    """
    if source == target:
        return [source]
    
    try:
        return nx.bidirectional_shortest_path(G, source, target)
    except (nx.NodeNotFound, nx.NetworkXNoPath):
        return None


def distances_from(G: nx.Graph, source: str) -> Dict[str, Distance]:
    """Distancia BFS desde `source` a cada nodo (math.inf si no es alcanzable)."""
    distances: Dict[str, Distance] = {node: math.inf for node in G}
    
    if source in G:
        distances.update(nx.single_source_shortest_path_length(G, source))
    
    return distances


def is_connected(G: nx.Graph) -> bool:
    """True si todos los nodos son alcanzables entre sí (grafo vacío: True)."""
    if G.number_of_nodes() == 0:
        return True
    return nx.is_connected(G)


def diameter(G: nx.Graph) -> Distance:
    """
    Diámetro de la red: el mayor camino mínimo entre cualquier par.
    
    math.inf si la red está desconectada; 0 con uno o ningún nodo.
    """
    if G.number_of_nodes() <= 1:
        return 0
    if not nx.is_connected(G):
        return math.inf
    return nx.diameter(G)


class PathAnalyzer(GraphAnalyzer):
    """Analiza alcanzabilidad y longitudes de caminos."""
    
    def analyze(self, graph: nx.Graph, source: str = None,
                target: str = None, **kwargs) -> Dict[str, Any]:
        results = {'diameter': diameter(graph), 'is_connected': is_connected(graph)}
        
        if source is not None and target is not None:
            results['path'] = shortest_path(graph, source, target)
        
        return results
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """El diámetro infinito se reporta como None (no representable en JSON)."""
        metrics = {
            'diameter': None if results['diameter'] == math.inf else results['diameter'],
            'is_connected': results['is_connected'],
        }
        
        if 'path' in results:
            path = results['path']
            metrics['path'] = path
            metrics['hops'] = len(path) - 1 if path else None
        
        return metrics
    
    def print_results(self, results: Dict[str, Any]):
        print(f"Diámetro: {results['diameter']}")
        print(f"Conectada: {'SI' if results['is_connected'] else 'NO'}")
        
        if 'path' in results:
            path = results['path']
            print(f"Camino: {' -> '.join(path) if path else 'sin camino'}")
