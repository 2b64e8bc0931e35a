"""Utilidades compartidas: logging y manejo de directorios."""
from .logger import get_logger, setup_logger
from .helpers import DirectoryManager

__all__ = ['get_logger', 'setup_logger', 'DirectoryManager']
