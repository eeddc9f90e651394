"""
Logging Configuration
Sets up the root logger for the application.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configura el logger raíz: consola (stdout) y opcionalmente un archivo.

    Args:
        level: nivel de logging (logging.DEBUG, logging.INFO, ...)
        log_file: ruta opcional para guardar el log.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama dos veces
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging inicializado.")
