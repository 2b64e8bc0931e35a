"""Análisis de topología por línea de comandos - resumen y exportación GraphML."""
import argparse
from pathlib import Path

from topology.core.config import PATHS, ANALYSIS_CONFIG
from topology.core.graph import build_adjacency
from topology.data import SnapshotLoader, SnapshotProcessor
from topology.analysis import TopologyAnalysisCoordinator
from topology.export import write_graphml, default_export_name


class TopologyAnalysisApp:
    """Aplicación principal de análisis de snapshots (Patrón Fachada)."""
    
    def __init__(self, snapshot_path: Path = PATHS.snapshot, export_dir: Path = PATHS.exports):
        self.export_dir = export_dir
        self.loader = SnapshotLoader(snapshot_path)
        self.processor = SnapshotProcessor()
        self.coordinator = TopologyAnalysisCoordinator(ANALYSIS_CONFIG)
    
    def run(self, export: bool = True):
        """Ejecuta el análisis."""
        df = self.loader.load()
        
        nodes = self.processor.graph_nodes(df)
        edges = self.processor.graph_edges(df)
        graph = build_adjacency(nodes, edges)
        
        report = self.coordinator.build_report(graph, verbose=True)
        
        print("=" * 60)
        print(f"Estado de la red: {report.status.upper()}")
        
        if export:
            path = write_graphml(
                self.export_dir / default_export_name(),
                self.processor.export_nodes(df),
                edges
            )
            print(f"GraphML: {path}")
        
        return report


def main():
    """Punto de entrada."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('snapshot', nargs='?', type=Path, default=PATHS.snapshot,
                        help='Snapshot JSON del API de métricas de nodos')
    parser.add_argument('--export-dir', type=Path, default=PATHS.exports,
                        help='Directorio de salida para el GraphML')
    parser.add_argument('--no-export', action='store_true',
                        help='Solo imprimir el análisis')
    args = parser.parse_args()
    
    app = TopologyAnalysisApp(args.snapshot, args.export_dir)
    app.run(export=not args.no_export)


if __name__ == '__main__':
    main()
