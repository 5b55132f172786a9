"""
Operazioni di sola lettura costruite sopra parse_csv().

Le varianti *_of lavorano su una tabella già parsata (usate da CLI e TUI),
le funzioni get_line / get_column / sum_column ripartono dal testo grezzo.
Nessun risultato parziale: il primo errore interrompe l'operazione.
"""

from __future__ import annotations

import re
from typing import List

from .csv_parser import Table, parse_csv
from .errors import IndexOutOfBoundsError, ParseIntError

LINE_JOINER = ", "

_INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+")


def line_of(table: Table, line_number: int) -> str:
    if not 0 <= line_number < len(table):
        raise IndexOutOfBoundsError("line", line_number, len(table))
    return LINE_JOINER.join(table[line_number])


def column_of(table: Table, col_number: int) -> List[str]:
    column: List[str] = []
    for record in table:
        if not 0 <= col_number < len(record):
            raise IndexOutOfBoundsError("column", col_number, len(record))
        column.append(record[col_number])
    return column


def parse_int(value: str, row: int) -> int:
    if not _INT_LITERAL_RE.fullmatch(value):
        raise ParseIntError(value, row)
    return int(value)


def sum_of(table: Table, col_number: int, skip_header: bool = False) -> int:
    """Somma intera della colonna; con skip_header la prima riga (intestazione) è esclusa."""
    column = column_of(table, col_number)
    start = 1 if skip_header else 0
    return sum(parse_int(value, row) for row, value in enumerate(column[start:], start=start))


def get_line(text: str, line_number: int) -> str:
    """Riga `line_number` (0-based) con i campi uniti da ', ', es. "Bert, M, 42, 68, 166"."""
    return line_of(parse_csv(text), line_number)


def get_column(text: str, col_number: int) -> List[str]:
    return column_of(parse_csv(text), col_number)


def sum_column(text: str, col_number: int, skip_header: bool = False) -> int:
    return sum_of(parse_csv(text), col_number, skip_header=skip_header)
