from .graphml import export_graphml, write_graphml, default_export_name

__all__ = ['export_graphml', 'write_graphml', 'default_export_name']
