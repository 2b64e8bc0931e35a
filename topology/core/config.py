"""Configuración inmutable del motor de topología y de la API."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Paths:

    DATA_DIR: Path = Path('data')
    OUTPUT_DIR: Path = Path('output')
    
    @property
    def snapshot(self) -> Path:
        return self.DATA_DIR / 'nodes.json'
    
    @property
    def exports(self) -> Path:
        return self.OUTPUT_DIR / 'graphml'


@dataclass(frozen=True)
class AnalysisConfig:

    top_bottlenecks: int = 5
    clustering_warning_threshold: float = 0.3  # Por debajo: red 'degraded'
    bridges_preview: int = 5
    export_prefix: str = 'concordium-topology'


@dataclass(frozen=True)
class ApiConfig:

    title: str = 'Topology Analysis API'
    description: str = 'API REST de análisis estructural de la topología de pares'
    version: str = '1.0.0'
    cors_origins: Tuple[str, ...] = ('http://localhost:3000', 'http://127.0.0.1:3000')


# Singleton instances
PATHS = Paths()
ANALYSIS_CONFIG = AnalysisConfig()
API_CONFIG = ApiConfig()
