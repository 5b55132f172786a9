from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from .logger import LogManager


log = LogManager("config").get_logger()

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_FILENAME = "config.json"


@dataclass
class AppConfig:
    column_width: int = 15
    skip_header: bool = False
    log_level: str = "INFO"
    sample_file: str = "biostats1.csv"

    def sample_path(self) -> Path:
        path = Path(self.sample_file)
        return path if path.is_absolute() else PROJECT_ROOT / path


def _valid(name: str, value: object) -> bool:
    if name == "column_width":
        # bool è sottoclasse di int: va escluso esplicitamente
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if name == "skip_header":
        return isinstance(value, bool)
    if name == "log_level":
        return isinstance(value, str) and isinstance(logging.getLevelName(value.strip().upper()), int)
    return isinstance(value, str) and bool(value.strip())


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Carica config.json (root del progetto o path esplicito) sopra i default.
    Chiavi sconosciute ignorate; file non valido o valori del tipo sbagliato -> warning e default.
    """
    cfg = AppConfig()
    cfg_path = Path(path) if path is not None else PROJECT_ROOT / CONFIG_FILENAME
    if not cfg_path.exists():
        return cfg

    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Config non valida (%s). Uso defaults.", e)
        return cfg

    if not isinstance(data, dict):
        log.warning("Config non valida (atteso un oggetto JSON). Uso defaults.")
        return cfg

    for f in fields(AppConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        if _valid(f.name, value):
            setattr(cfg, f.name, value)
        else:
            log.warning("Valore non valido per '%s': %r. Uso default %r.", f.name, value, getattr(cfg, f.name))

    log.info("Config caricata: %s", cfg_path)
    return cfg
