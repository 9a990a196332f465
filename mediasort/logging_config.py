"""
Configuration du logging de l'application via loguru.

- Console (stderr) : colorée ; en DEBUG, le format inclut l'emplacement
  de l'appel pour suivre les événements reçus par la surveillance
- Fichier (optionnel) : JSON avec rotation, pour l'analyse historique
- Les logs de la bibliothèque standard (watchdog) sont redirigés vers loguru
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

DEBUG_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Handler logging standard qui transmet chaque enregistrement à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    log_level = log_level.upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=DEBUG_CONSOLE_FORMAT if log_level == "DEBUG" else CONSOLE_FORMAT,
        colorize=True,
    )

    # watchdog journalise via le module logging standard
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.WARNING, force=True)

    if log_file is not None:
        _add_file_handler(log_file, rotation_size, retention_count)


def _add_file_handler(log_file: Path, rotation_size: str, retention_count: int) -> None:
    """Ajoute la sortie JSON avec rotation (tous niveaux)."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Le thread watchdog journalise aussi
    )
    logger.debug(f"Logging vers {log_file} (rotation {rotation_size})")
