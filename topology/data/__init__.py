"""Data module - Snapshot loading and processing."""

from .loader import SnapshotLoader, NodesValidator
from .processor import SnapshotProcessor

__all__ = ['SnapshotLoader', 'NodesValidator', 'SnapshotProcessor']
