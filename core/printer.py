from __future__ import annotations

from typing import List, Optional

import pandas as pd

from .config import load_config
from .csv_parser import Table

TITLE = "Pretty CSV display:"
EMPTY_MESSAGE = "The CSV is empty!"
DEFAULT_WIDTH = 15


def format_table(table: Table, width: int = DEFAULT_WIDTH) -> str:
    """
    Allinea ogni cella in uno slot a larghezza fissa:

        Alex            M               41              74              170
    """
    if width < 1:
        raise ValueError(f"width deve essere >= 1: {width}")
    if not table:
        return EMPTY_MESSAGE

    lines: List[str] = [TITLE]
    for record in table:
        lines.append("".join(f"{cell:<{width}} " for cell in record))
    return "\n".join(lines)


def pretty_print(table: Table, width: Optional[int] = None) -> None:
    if width is None:
        width = load_config().column_width
    print(format_table(table, width=width))


def to_dataframe(table: Table, header: bool = False) -> pd.DataFrame:
    """
    Converte la tabella in un DataFrame di stringhe.
    - header=True: il primo record fornisce i nomi colonna.
    - record più corti vengono completati con "".
    """
    if not table:
        return pd.DataFrame(dtype="string")

    n_cols = max(len(record) for record in table)
    rows = [list(record) + [""] * (n_cols - len(record)) for record in table]

    if header:
        names = rows[0]
        # nomi vuoti o duplicati -> Column_i
        seen = set()
        columns = []
        for i, name in enumerate(names):
            if not name or name in seen:
                name = f"Column_{i}"
            seen.add(name)
            columns.append(name)
        rows = rows[1:]
    else:
        columns = [f"Column_{i}" for i in range(n_cols)]

    return pd.DataFrame(rows, columns=columns, dtype="string")
