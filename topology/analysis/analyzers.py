"""Módulo coordinador de análisis de topología - Patrón Fachada."""
import networkx as nx
from dataclasses import dataclass
from typing import Dict, Any, List

from ..core.config import ANALYSIS_CONFIG, AnalysisConfig
from ..utils.logger import get_logger
from .bridges import Bridge, BridgeAnalyzer
from .centrality import CentralityAnalyzer
from .degree import DegreeAnalyzer
from .summary import NetworkSummary, SummaryAnalyzer

logger = get_logger(__name__)


STATUS_CRITICAL = 'critical'
STATUS_ELEVATED = 'elevated'
STATUS_DEGRADED = 'degraded'
STATUS_NOMINAL = 'nominal'


def classify_status(summary: NetworkSummary,
                    bridges: List[Bridge],
                    clustering_threshold: float = 0.3) -> str:
    """Estado de salud de la topología, del más grave al más leve."""
    if not summary.is_connected:
        return STATUS_CRITICAL
    if bridges:
        return STATUS_ELEVATED
    if summary.global_clustering_coefficient < clustering_threshold:
        return STATUS_DEGRADED
    return STATUS_NOMINAL


@dataclass(frozen=True)
class TopologyReport:
    """Resultado consolidado de un pase de análisis sobre un snapshot."""
    summary: NetworkSummary
    degree_distribution: Dict[int, int]
    bottlenecks: List[str]
    bridges: List[Bridge]
    status: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'summary': self.summary.to_dict(),
            'degree_distribution': {
                str(k): self.degree_distribution[k] for k in sorted(self.degree_distribution)
            },
            'bottlenecks': list(self.bottlenecks),
            'bridges': [list(bridge) for bridge in self.bridges],
            'status': self.status,
        }


class TopologyAnalysisCoordinator:
    """Coordina los analizadores que alimentan el panel de topología (SRP, DIP)."""
    
    def __init__(self, config: AnalysisConfig = ANALYSIS_CONFIG):
        self.config = config
        self.analyzers = {
            'summary': SummaryAnalyzer(),
            'degree': DegreeAnalyzer(),
            'centrality': CentralityAnalyzer(),
            'bridges': BridgeAnalyzer(preview=config.bridges_preview),
        }
    
    def run_all_analyses(self, graph: nx.Graph, verbose: bool = False) -> Dict[str, Dict]:
        """Ejecuta todos los análisis y devuelve resultados crudos por nombre."""
        results = {}
        
        for name, analyzer in self.analyzers.items():
            results[name] = analyzer.analyze(graph, top_n=self.config.top_bottlenecks)
            if verbose:
                analyzer.print_results(results[name])
        
        return results
    
    def get_all_metrics(self, results: Dict[str, Dict]) -> Dict[str, Any]:
        """Extrae métricas esenciales de todos los análisis (para backend)."""
        metrics = {}
        
        for name, analyzer in self.analyzers.items():
            if name in results:
                metrics[name] = analyzer.get_metrics(results[name])
        
        return metrics
    
    def build_report(self, graph: nx.Graph, verbose: bool = False) -> TopologyReport:
        """Pase completo de análisis sobre un snapshot."""
        results = self.run_all_analyses(graph, verbose=verbose)
        
        summary = results['summary']['summary']
        bridges = results['bridges']['bridges']
        status = classify_status(summary, bridges, self.config.clustering_warning_threshold)
        
        logger.info(
            f"Topología analizada: {summary.node_count} nodos, "
            f"{summary.edge_count} aristas, {len(bridges)} puentes, estado={status}"
        )
        
        return TopologyReport(
            summary=summary,
            degree_distribution=results['degree']['distribution'],
            bottlenecks=results['centrality']['bottlenecks'],
            bridges=bridges,
            status=status,
        )
