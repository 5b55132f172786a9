from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .csv_parser import Table, parse_csv
from .errors import CsvParseError
from .logger import LogManager

log = LogManager("loader").get_logger()

PathLike = Union[str, Path]


def detect_encoding(path_str: PathLike) -> str:
    """Rileva il tipo di encoding in base al BOM (Byte Order Mark)."""
    path = Path(path_str)
    if not path.is_file():
        msg = f"File non trovato: {path}"
        log.error(msg)
        raise FileNotFoundError(msg)

    with open(path, "rb") as f:
        start = f.read(4)

    if start.startswith(b"\xff\xfe"):
        return "utf-16"  # LE; open(..., 'utf-16') va bene
    if start.startswith(b"\xfe\xff"):
        return "utf-16-be"
    if start.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    return "utf-8"


def read_csv_text(path_str: PathLike, encoding: Optional[str] = None) -> str:
    """
    Legge tutto il file in memoria.
    newline="" lascia intatti i '\\r': li rimuove poi clean_field.
    """
    path = Path(path_str)
    enc = encoding or detect_encoding(path)
    with open(path, "r", encoding=enc, newline="") as f:
        text = f.read()
    if enc == "utf-16-be":
        # il codec utf-16-be non scarta il BOM
        text = text.lstrip("\ufeff")
    log.debug("Letti %d caratteri da %s (encoding=%s)", len(text), path.name, enc)
    return text


def load_table(path_str: PathLike, encoding: Optional[str] = None) -> Table:
    """Legge e parsa un file CSV. Errori di lettura/parsing vengono loggati e rilanciati."""
    path = Path(path_str)
    text = read_csv_text(path, encoding=encoding)

    try:
        table = parse_csv(text)
    except CsvParseError:
        log.error("Parsing CSV fallito: %s", path.name)
        raise

    log.info(
        "CSV caricato: %s (record=%d, campi max=%d)",
        path.name,
        len(table),
        max(len(record) for record in table),
    )
    return table
