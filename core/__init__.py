"""
Core del parser CSV: grammatica, operazioni derivate, stampa e caricamento file.

Copy-on-Write di pandas attivo globalmente: i DataFrame prodotti da
printer.to_dataframe() non vengono copiati finché non sono modificati.
"""

import pandas as pd

# da pandas 3 il Copy-on-Write è sempre attivo e l'opzione è deprecata
if int(pd.__version__.split(".")[0]) < 3:
    pd.options.mode.copy_on_write = True

from .csv_parser import Field, Record, Table, clean_field, parse_csv  # noqa: E402
from .errors import CsvError, CsvParseError, IndexOutOfBoundsError, ParseIntError  # noqa: E402
from .operations import get_column, get_line, sum_column  # noqa: E402
from .printer import pretty_print  # noqa: E402

__all__ = [
    "Field",
    "Record",
    "Table",
    "clean_field",
    "parse_csv",
    "CsvError",
    "CsvParseError",
    "IndexOutOfBoundsError",
    "ParseIntError",
    "get_line",
    "get_column",
    "sum_column",
    "pretty_print",
]
