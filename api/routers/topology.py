"""
Router de Topología

Endpoints para analizar snapshots de la red de pares: resumen estructural,
cuellos de botella, puentes, caminos mínimos y exportación GraphML.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from typing import List, Dict, Optional, Tuple
from pydantic import BaseModel, Field
import pandas as pd
import networkx as nx

from topology.core.config import PATHS, ANALYSIS_CONFIG
from topology.core.graph import GraphEdge, build_adjacency
from topology.data import SnapshotLoader, SnapshotProcessor
from topology.analysis import (
    TopologyAnalysisCoordinator,
    PathAnalyzer,
    CentralityAnalyzer,
    ClusteringAnalyzer,
    degree_centrality,
)
from topology.export import export_graphml, default_export_name
from topology.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# Modelos Pydantic
# ============================================================================

class NodeRecord(BaseModel):
    """Registro de nodo tal como lo reporta el API de métricas."""
    nodeId: str
    peersList: List[str] = Field(default_factory=list)
    nodeName: Optional[str] = None
    peersCount: Optional[int] = None
    client: Optional[str] = None
    bakingCommitteeMember: Optional[str] = None
    consensusBakerId: Optional[int] = None
    finalizedBlockHeight: Optional[int] = None


class SnapshotRequest(BaseModel):
    """Snapshot completo de la red."""
    nodes: List[NodeRecord]


class PathRequest(SnapshotRequest):
    """Snapshot más los extremos del camino buscado."""
    source: str
    target: str


class SummaryModel(BaseModel):
    """Resumen de red; diameter es None si la red está desconectada."""
    node_count: int
    edge_count: int
    avg_degree: float
    max_degree: int
    min_degree: int
    diameter: Optional[int]
    global_clustering_coefficient: float
    is_connected: bool


class AnalysisResponse(BaseModel):
    """Respuesta con el análisis completo de topología."""
    summary: SummaryModel
    degree_distribution: Dict[str, int]
    bottlenecks: List[str]
    bridges: List[List[str]]
    status: str


class PathResponse(BaseModel):
    """Camino mínimo entre dos nodos."""
    source: str
    target: str
    path: Optional[List[str]]
    hops: Optional[int]


class NodeCentrality(BaseModel):
    """Métricas por nodo."""
    node_id: str
    degree: int
    degree_centrality: float
    betweenness: float
    clustering: float


class CentralityResponse(BaseModel):
    """Respuesta con centralidades de todos los nodos."""
    total: int
    nodes: List[NodeCentrality]


# ============================================================================
# Dependencias
# ============================================================================

_loader = None
_processor = None
_coordinator = None


def get_dependencies() -> Tuple[SnapshotLoader, SnapshotProcessor, TopologyAnalysisCoordinator]:
    """Inicializa y retorna dependencias globales."""
    global _loader, _processor, _coordinator
    
    if _loader is None:
        _loader = SnapshotLoader(PATHS.snapshot)
        _processor = SnapshotProcessor()
        _coordinator = TopologyAnalysisCoordinator(ANALYSIS_CONFIG)
        logger.info("Dependencias de topología inicializadas")
    
    return _loader, _processor, _coordinator


def _snapshot_frame(request: SnapshotRequest) -> pd.DataFrame:
    loader, _, _ = get_dependencies()
    return loader.from_records(node.model_dump(exclude_none=True) for node in request.nodes)


def _build_graph(df: pd.DataFrame) -> Tuple[nx.Graph, List[GraphEdge]]:
    _, processor, _ = get_dependencies()
    edges = processor.graph_edges(df)
    return build_adjacency(processor.graph_nodes(df), edges), edges


def _analysis_response(df: pd.DataFrame) -> AnalysisResponse:
    _, _, coordinator = get_dependencies()
    graph, _ = _build_graph(df)
    return AnalysisResponse(**coordinator.build_report(graph).to_dict())


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/topology/analyze", response_model=AnalysisResponse)
async def analyze_topology(request: SnapshotRequest):
    """
    Analiza la topología de un snapshot de la red.
    
    Returns:
        Resumen, distribución de grados, cuellos de botella, puentes y estado
    """
    try:
        return _analysis_response(_snapshot_frame(request))
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error al analizar topología: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al analizar topología: {str(e)}")


@router.get("/topology/snapshot", response_model=AnalysisResponse)
async def analyze_snapshot_file():
    """Analiza el último snapshot persistido en disco."""
    try:
        loader, _, _ = get_dependencies()
        return _analysis_response(loader.load())
    
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error al analizar snapshot: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al analizar snapshot: {str(e)}")


@router.post("/topology/path", response_model=PathResponse)
async def find_path(request: PathRequest):
    """Camino mínimo (en saltos) entre `source` y `target`."""
    try:
        graph, _ = _build_graph(_snapshot_frame(request))
        analyzer = PathAnalyzer()
        metrics = analyzer.get_metrics(
            analyzer.analyze(graph, source=request.source, target=request.target)
        )
        
        return PathResponse(
            source=request.source,
            target=request.target,
            path=metrics['path'],
            hops=metrics['hops']
        )
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error al buscar camino: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al buscar camino: {str(e)}")


@router.post("/topology/centrality", response_model=CentralityResponse)
async def node_centrality(request: SnapshotRequest):
    """Intermediación, centralidad de grado y clustering local por nodo."""
    try:
        graph, _ = _build_graph(_snapshot_frame(request))
        betweenness = CentralityAnalyzer().analyze(graph, top_n=0)["betweenness"]
        degree = degree_centrality(graph)
        clustering = ClusteringAnalyzer().analyze(graph)["local"]
        
        nodes = [
            NodeCentrality(
                node_id=node,
                degree=graph.degree(node),
                degree_centrality=degree[node],
                betweenness=betweenness[node],
                clustering=clustering[node]
            )
            for node in graph
        ]
        nodes.sort(key=lambda n: n.betweenness, reverse=True)
        
        return CentralityResponse(total=len(nodes), nodes=nodes)
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error al calcular centralidad: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al calcular centralidad: {str(e)}")


@router.post("/topology/export/graphml")
async def export_topology_graphml(request: SnapshotRequest):
    """Descarga la topología como documento GraphML con metadatos de nodo."""
    try:
        df = _snapshot_frame(request)
        _, processor, _ = get_dependencies()
        _, edges = _build_graph(df)
        
        graphml = export_graphml(processor.export_nodes(df), edges)
        filename = default_export_name()
        
        return Response(
            content=graphml,
            media_type="application/xml",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'}
        )
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error al exportar GraphML: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al exportar GraphML: {str(e)}")
