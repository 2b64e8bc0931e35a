"""Resumen agregado de la red."""
import math
import networkx as nx
from dataclasses import dataclass, asdict
from typing import Dict, Any, Union

from .base import GraphAnalyzer
from .clustering import global_clustering_coefficient
from .paths import diameter, is_connected


@dataclass(frozen=True)
class NetworkSummary:
    node_count: int
    edge_count: int
    avg_degree: float
    max_degree: int
    min_degree: int
    diameter: Union[int, float]  # math.inf si la red está desconectada
    global_clustering_coefficient: float
    is_connected: bool
    
    def to_dict(self) -> Dict[str, Any]:
        """Serializable a JSON: diámetro infinito -> None."""
        data = asdict(self)
        if self.diameter == math.inf:
            data['diameter'] = None
        return data


def network_summary(G: nx.Graph) -> NetworkSummary:
    """Estadísticas globales de la red. Grafo vacío: todo en cero y conectado."""
    node_count = G.number_of_nodes()
    
    if node_count == 0:
        return NetworkSummary(0, 0, 0.0, 0, 0, 0, 0.0, True)
    
    degrees = [degree for _, degree in G.degree()]
    
    return NetworkSummary(
        node_count=node_count,
        edge_count=G.number_of_edges(),
        avg_degree=sum(degrees) / node_count,
        max_degree=max(degrees),
        min_degree=min(degrees),
        diameter=diameter(G),
        global_clustering_coefficient=global_clustering_coefficient(G),
        is_connected=is_connected(G),
    )


class SummaryAnalyzer(GraphAnalyzer):
    """Agrega grado, diámetro, clustering y conectividad en un resumen."""
    
    def analyze(self, graph: nx.Graph, **kwargs) -> Dict[str, Any]:
        return {'summary': network_summary(graph)}
    
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return results['summary'].to_dict()
    
    def print_results(self, results: Dict[str, Any]):
        s = results['summary']
        diameter_text = '∞ (desconectada)' if s.diameter == math.inf else s.diameter
        
        print(f"\n{'='*60}")
        print("RESUMEN DE LA RED")
        print(f"{'='*60}")
        print(f"{'Nodos':<24} {s.node_count:>10}")
        print(f"{'Aristas':<24} {s.edge_count:>10}")
        print(f"{'Grado promedio':<24} {s.avg_degree:>10.1f}")
        print(f"{'Grado máx / mín':<24} {f'{s.max_degree} / {s.min_degree}':>10}")
        print(f"{'Diámetro':<24} {diameter_text!s:>10}")
        print(f"{'Clustering global':<24} {s.global_clustering_coefficient:>10.3f}")
        print(f"{'Conectada':<24} {'SI' if s.is_connected else 'NO':>10}")
