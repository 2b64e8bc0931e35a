"""Transformación de snapshots en nodos/aristas para el motor de topología."""
from typing import Any, Dict, List

import pandas as pd

from ..core.graph import GraphEdge


class SnapshotProcessor:
    """Convierte listas de pares reportadas por cada nodo en un grafo no dirigido (SRP)."""
    
    BAKER_STATUS = 'ActiveInCommittee'
    INT_FIELDS = ('peersCount', 'finalizedBlockHeight')
    
    @staticmethod
    def graph_nodes(df: pd.DataFrame) -> List[str]:
        return [str(node_id) for node_id in df['nodeId']]
    
    @staticmethod
    def graph_edges(df: pd.DataFrame) -> List[GraphEdge]:
        """
        Aristas canónicas (min, max) sin duplicados ni lazos.
        
        Solo se conservan pares presentes en el snapshot; el orden es el de
        primera aparición.
        """
        node_ids = set(SnapshotProcessor.graph_nodes(df))
        seen = set()
        edges: List[GraphEdge] = []
        
        for node_id, peers in zip(df['nodeId'], df['peersList']):
            node_id = str(node_id)
            if not isinstance(peers, (list, tuple)):
                continue
            
            for peer_id in peers:
                peer_id = str(peer_id)
                if peer_id == node_id or peer_id not in node_ids:
                    continue
                
                key = (min(node_id, peer_id), max(node_id, peer_id))
                if key not in seen:
                    seen.add(key)
                    edges.append(GraphEdge(*key))
        
        return edges
    
    def export_nodes(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        """Nodos enriquecidos con metadatos para la exportación GraphML."""
        nodes = []
        
        for record in df.to_dict(orient='records'):
            node_id = str(record['nodeId'])
            node = {
                'id': node_id,
                'label': self._native(record.get('nodeName')) or node_id[:12],
            }
            
            for field in ('peersCount', 'client', 'finalizedBlockHeight'):
                if field in record:
                    node[field] = self._native(record[field])
            
            if 'bakingCommitteeMember' in record:
                node['isBaker'] = (
                    record['bakingCommitteeMember'] == self.BAKER_STATUS
                    and self._native(record.get('consensusBakerId')) is not None
                )
            
            for field in self.INT_FIELDS:
                if node.get(field) is not None:
                    node[field] = int(node[field])
            
            nodes.append({k: v for k, v in node.items() if v is not None})
        
        return nodes
    
    @staticmethod
    def _native(value: Any) -> Any:
        """Valor escalar nativo de Python; NaN/None -> None."""
        if value is None or (not isinstance(value, (list, tuple, dict)) and pd.isna(value)):
            return None
        if hasattr(value, 'item'):
            return value.item()
        return value
