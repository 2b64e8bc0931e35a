"""Detección de aristas puente (cut-edges)."""
import networkx as nx
from typing import Dict, Any, List, Tuple

from .base import GraphAnalyzer


Bridge = Tuple[str, str]


def find_bridges(G: nx.Graph) -> List[Bridge]:
    """
    Aristas cuya eliminación desconecta el grafo.
    
    La búsqueda arranca solo desde el primer nodo del grafo, así que
    únicamente se reportan puentes de su componente.
    """
    if G.number_of_nodes() == 0:
        return []
    
    return list(nx.bridges(G, root=next(iter(G))))


class BridgeAnalyzer(GraphAnalyzer):
    """Analiza puntos únicos de falla en la conectividad."""
    
    def __init__(self, preview: int = 5):
        self.preview = preview
    
    def analyze(self, graph: nx.Graph, **kwargs) -> Dict[str, Any]:
        return {'bridges': find_bridges(graph)}
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        bridges = results['bridges']
        return {
            'num_bridges': len(bridges),
            'bridges': [list(bridge) for bridge in bridges],
        }
    
    def print_results(self, results: Dict[str, Any]):
        bridges = results['bridges']
        
        print(f"\n{'='*60}")
        print(f"ARISTAS PUENTE ({len(bridges)})")
        print(f"{'='*60}")
        
        if not bridges:
            print("Sin aristas puente - la red es resiliente")
            return
        
        for a, b in bridges[:self.preview]:
            print(f"  {a} <-> {b}")
        if len(bridges) > self.preview:
            print(f"  +{len(bridges) - self.preview} más")
