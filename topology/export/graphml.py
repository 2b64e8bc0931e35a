"""
Exportación a GraphML.

GraphML es el formato XML estándar de intercambio de grafos, soportado por
Gephi, yEd, NetworkX y Cytoscape.
"""
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence
from xml.sax.saxutils import escape

from ..core.config import ANALYSIS_CONFIG
from ..utils.helpers import DirectoryManager
from ..utils.logger import get_logger

logger = get_logger(__name__)


GRAPHML_HEADER = [
    '<?xml version="1.0" encoding="UTF-8"?>',
    '<graphml xmlns="http://graphml.graphdrawing.org/xmlns"',
    '  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
    '  xsi:schemaLocation="http://graphml.graphdrawing.org/xmlns',
    '    http://graphml.graphdrawing.org/xmlns/1.0/graphml.xsd">',
]

_XML_ENTITIES = {'"': '&quot;', "'": '&apos;'}


def escape_xml(value: str) -> str:
    """Escapa & < > " ' para texto y atributos XML."""
    return escape(value, _XML_ENTITIES)


def infer_graphml_type(value: Any) -> str:
    # bool antes que int: bool es subclase de int
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'int'
    if isinstance(value, float):
        return 'double'
    return 'string'


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _collect_attribute_types(nodes: Sequence[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Atributos distintos (excepto 'id') en orden de aparición.
    
    El tipo sale del primer valor no nulo visto para cada atributo; si todos
    son nulos queda 'string'.
    """
    types: Dict[str, str] = {}
    typed = set()
    
    for node in nodes:
        for attr, value in node.items():
            if attr == 'id':
                continue
            types.setdefault(attr, 'string')
            if attr not in typed and value is not None:
                types[attr] = infer_graphml_type(value)
                typed.add(attr)
    
    return types


def export_graphml(nodes: Iterable[Mapping[str, Any]],
                   edges: Iterable[Sequence[str]]) -> str:
    """
    Serializa nodos (con atributos escalares arbitrarios) y aristas a GraphML.
    
    Args:
        nodes: Mappings con 'id' y atributos string/number/boolean
        edges: Pares (source, target)
    
    Returns:
        Documento GraphML como string
    """
    nodes = list(nodes)
    attr_types = _collect_attribute_types(nodes)
    lines: List[str] = list(GRAPHML_HEADER)
    
    for attr, attr_type in attr_types.items():
        name = escape_xml(attr)
        lines.append(
            f'  <key id="{name}" for="node" attr.name="{name}" attr.type="{attr_type}"/>'
        )
    
    lines.append('  <graph id="G" edgedefault="undirected">')
    
    for node in nodes:
        lines.append(f'    <node id="{escape_xml(str(node["id"]))}">')
        for attr in attr_types:
            value = node.get(attr)
            if value is not None:
                lines.append(
                    f'      <data key="{escape_xml(attr)}">{escape_xml(_format_value(value))}</data>'
                )
        lines.append('    </node>')
    
    for edge_id, (source, target) in enumerate(edges):
        lines.append(
            f'    <edge id="e{edge_id}" source="{escape_xml(source)}" target="{escape_xml(target)}"/>'
        )
    
    lines.append('  </graph>')
    lines.append('</graphml>')
    
    return '\n'.join(lines)


def default_export_name(day: date = None, prefix: str = ANALYSIS_CONFIG.export_prefix) -> str:
    """Nombre de archivo fechado, e.g. 'concordium-topology-2024-05-01.graphml'."""
    return DirectoryManager.dated_filename(prefix, '.graphml', day)


def write_graphml(path: Path,
                  nodes: Iterable[Mapping[str, Any]],
                  edges: Iterable[Sequence[str]]) -> Path:
    """Escribe el documento GraphML en `path` (UTF-8), creando directorios."""
    path = Path(path)
    DirectoryManager.ensure_exists(path.parent)
    
    path.write_text(export_graphml(nodes, edges), encoding='utf-8')
    logger.info(f"GraphML exportado: {path}")
    
    return path
