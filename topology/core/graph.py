"""Modelo de grafo: construcción del grafo no dirigido de pares."""
from typing import Any, Iterable, Mapping, NamedTuple, Sequence, Union

import networkx as nx


NodeLike = Union[str, Mapping[str, Any]]


class GraphEdge(NamedTuple):
    """Arista no dirigida entre dos nodos."""
    source: str
    target: str


def node_id(node: NodeLike) -> str:
    """Devuelve el id de un nodo dado como string o como mapping con 'id'."""
    if isinstance(node, str):
        return node
    return node['id']


def build_adjacency(nodes: Iterable[NodeLike],
                    edges: Iterable[Sequence[str]]) -> nx.Graph:
    """
    Construye el grafo no dirigido a partir de nodos y aristas.
    
    Todos los nodos aparecen aunque no tengan vecinos; G.adj conserva el
    orden de inserción. Las aristas con un extremo desconocido se descartan.
    """
    G = nx.Graph()
    G.add_nodes_from(node_id(node) for node in nodes)
    
    G.add_edges_from(
        (source, target) for source, target in edges
        if source in G and target in G
    )
    
    return G
