"""
Eccezioni del parser CSV e delle operazioni derivate.

- CsvParseError: l'input non contiene nemmeno un record/campo riconoscibile.
- IndexOutOfBoundsError: riga o colonna richiesta fuori dai limiti della tabella.
- ParseIntError: un valore della colonna non è un intero valido.
"""

from __future__ import annotations

from typing import Optional

CSV_PARSE_ERROR_MESSAGE = "Error while parsing the CSV"


class CsvError(Exception):
    """Base per tutti gli errori del parser."""
    pass


class CsvParseError(CsvError, ValueError):
    """Fallimento strutturale: messaggio fisso, nessun dettaglio su riga/colonna."""

    def __init__(self, message: str = CSV_PARSE_ERROR_MESSAGE) -> None:
        super().__init__(message)


class IndexOutOfBoundsError(CsvError, IndexError):
    def __init__(self, kind: str, index: int, size: Optional[int] = None) -> None:
        self.kind = kind
        self.index = index
        self.size = size
        if size is None:
            msg = f"{kind} {index} out of bounds"
        else:
            msg = f"{kind} {index} out of bounds (size={size})"
        super().__init__(msg)


class ParseIntError(CsvError, ValueError):
    def __init__(self, value: str, row: int) -> None:
        self.value = value
        self.row = row
        super().__init__(f"invalid digit found in {value!r} (row {row})")
