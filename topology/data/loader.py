"""Carga y validación de snapshots de métricas de nodos."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable

import pandas as pd

from ..utils.logger import get_logger

logger = get_logger(__name__)


class DataValidator(ABC):
    @abstractmethod
    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        pass


class NodesValidator(DataValidator):

    REQUIRED_COLS = ['nodeId', 'peersList']  # Columnas obligatorias
    
    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        if df.empty and len(df.columns) == 0:
            return pd.DataFrame(columns=self.REQUIRED_COLS)
        
        missing = set(self.REQUIRED_COLS) - set(df.columns)
        if missing:
            raise ValueError(f"Columnas faltantes en snapshot: {missing}")
        
        if df['nodeId'].isnull().any():
            raise ValueError("Nodos sin nodeId encontrados")
        
        if df['nodeId'].duplicated().any():
            raise ValueError("IDs de nodos duplicados encontrados")
        
        return df


class SnapshotLoader:
    """Carga snapshots del API de métricas (array JSON de registros de nodo)."""

    def __init__(self, snapshot_path: Path = None, validator: DataValidator = None):
        self.snapshot_path = snapshot_path
        self.validator = validator or NodesValidator()
    
    def load(self) -> pd.DataFrame:
        if self.snapshot_path is None:
            raise ValueError("No se configuró la ruta del snapshot")
        
        path = Path(self.snapshot_path)
        if not path.exists():
            raise FileNotFoundError(f"Archivo no encontrado: {path}")

        try:
            df = pd.read_json(path, orient='records', dtype=False)
        except Exception as e:
            raise ValueError(f"Error cargando {path}: {str(e)}")
        
        df = self.validator.validate(df)
        logger.info(f"Snapshot cargado: {path} ({len(df)} nodos)")
        
        return df
    
    def from_records(self, records: Iterable[Dict[str, Any]]) -> pd.DataFrame:
        """Valida registros ya en memoria (e.g. body de un request)."""
        return self.validator.validate(pd.DataFrame.from_records(list(records)))
