from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


class LogManager:
    """
    Gestisce un logger gerarchico 'csvparser.*' con:
    - cartella logs/ creata sempre accanto alla root del progetto,
    - file UTF-8 giornaliero 'csvparser_YYYYMMDD.log',
    - StreamHandler su console,
    - prevenzione handler duplicati,
    - livello default INFO (modificabile con set_level, es. da config.json).
    """

    _configured: bool = False
    _base_logger_name: str = "csvparser"
    _logfile_path: Optional[Path] = None

    def __init__(self, component: str = "app", level: int = logging.INFO) -> None:
        self.component = component.strip() or "app"
        self.level = level
        self._ensure_configured()

    @classmethod
    def _project_root(cls) -> Path:
        # .../core/logger.py -> project_root = parent of 'core'
        return Path(__file__).resolve().parents[1]

    @classmethod
    def _ensure_configured(cls) -> None:
        if cls._configured:
            return

        project_root = cls._project_root()
        logs_dir = project_root / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)

        log_name = f"csvparser_{datetime.now():%Y%m%d}.log"
        cls._logfile_path = logs_dir / log_name

        base_logger = logging.getLogger(cls._base_logger_name)
        base_logger.setLevel(logging.INFO)
        base_logger.propagate = False  # Evita doppie stampe sul root

        # Formati
        common_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        file_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(lineno)d | %(message)s"

        # Evita duplicati controllando gli handler già presenti
        existing_file = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == str(cls._logfile_path)
            for h in base_logger.handlers
        )
        existing_stream = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in base_logger.handlers
        )

        if not existing_file:
            fh = logging.FileHandler(cls._logfile_path, encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(file_fmt))
            base_logger.addHandler(fh)

        if not existing_stream:
            # stderr: stdout resta libero per l'output della CLI
            sh = logging.StreamHandler()
            sh.setLevel(logging.WARNING)
            sh.setFormatter(logging.Formatter(common_fmt))
            base_logger.addHandler(sh)

        cls._configured = True
        base_logger.debug("Logger configurato. File: %s", cls._logfile_path)

    @classmethod
    def set_level(cls, level: Union[int, str]) -> int:
        """Imposta il livello del logger base e dei figli già creati. Ritorna il livello numerico."""
        if isinstance(level, str):
            numeric = logging.getLevelName(level.strip().upper())
            if not isinstance(numeric, int):
                raise ValueError(f"Livello di log non valido: {level!r}")
        else:
            numeric = int(level)

        cls._ensure_configured()
        base = logging.getLogger(cls._base_logger_name)
        base.setLevel(numeric)
        for name, logger in logging.Logger.manager.loggerDict.items():
            if name.startswith(cls._base_logger_name + ".") and isinstance(logger, Logger):
                logger.setLevel(numeric)
        return numeric

    def get_logger(self, level: Optional[int] = None) -> Logger:
        base = logging.getLogger(self._base_logger_name)
        logger = base.getChild(self.component)
        logger.setLevel(level if level is not None else self.level)
        return logger

    @classmethod
    def logfile_path(cls) -> Optional[Path]:
        return cls._logfile_path
