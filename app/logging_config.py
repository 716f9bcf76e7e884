"""Logging-Konfiguration für strukturiertes Logging"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(debug: bool = False, log_file: str = "logs/teslys.log") -> None:
    """
    Konfiguriert das Logging-System mit Console und File Handler.

    Args:
        debug: Wenn True, wird DEBUG-Level verwendet, sonst INFO
        log_file: Pfad zur Log-Datei

    Features:
        - Format mit Timestamp, Level, Module, Message
        - Rotierende Log-Dateien (max 10 MB, 5 Backups)
        - Console-Output für Entwicklung
    """
    level = logging.DEBUG if debug else logging.INFO

    # Format: "2024-01-15 14:30:45 - app.services.booking_validation - WARNING - Booking conflict ..."
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # === Console Handler ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # === File Handler (Rotating) ===
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    # === Root Logger konfigurieren ===
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # === Externe Libraries leiser machen ===
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    root_logger.info(f"Logging initialisiert (Level: {logging.getLevelName(level)})")
    root_logger.info(f"Log-Datei: {log_path.absolute()}")
