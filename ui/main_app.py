from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
    Switch,
)

from core.csv_parser import Table
from core.errors import CsvError
from core.loader import load_table
from core.logger import LogManager
from core.operations import column_of, line_of, sum_of
from core.printer import to_dataframe

__all__ = ["CsvViewerApp"]

log = LogManager("tui").get_logger()


class CsvViewerApp(App):
    CSS = """
    #left { width: 34%; min-width: 30%; }
    #right { width: 66%; }
    .box { border: solid #444; padding: 1; margin: 1; }
    """

    BINDINGS = [
        ("q", "quit", "Esci"),
    ]

    def __init__(self, path: str = "") -> None:
        super().__init__()
        self.initial_path = path
        self.table: Optional[Table] = None
        self.status_message = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="left"):
                # --- Sorgente file
                with VerticalScroll(classes="box"):
                    yield Label("Percorso CSV:")
                    yield Input(value=self.initial_path, placeholder="/path/file.csv", id="csv_path")
                    yield Button("Carica", id="btn_load")

                # --- Operazioni
                with VerticalScroll(classes="box"):
                    yield Label("Riga (0-based):")
                    yield Input(placeholder="es. 1", id="line_no")
                    yield Button("Mostra riga", id="btn_line")
                    yield Label("Colonna (0-based):")
                    yield Input(placeholder="es. 4", id="col_no")
                    yield Label("Salta intestazione nella somma")
                    yield Switch(value=False, id="skip_header")
                    with Horizontal():
                        yield Button("Colonna", id="btn_column")
                        yield Button("Somma", id="btn_sum")

            with Vertical(id="right"):
                yield DataTable(id="table")
                yield Static("", id="status")

        yield Footer()

    # ---------- helpers ---------- #
    def _set_status(self, msg: str) -> None:
        self.status_message = msg
        self.query_one("#status", Static).update(Text(msg))

    def _read_index(self, input_id: str) -> Optional[int]:
        raw = self.query_one(f"#{input_id}", Input).value.strip()
        try:
            return int(raw)
        except ValueError:
            self.notify(f"Indice non valido: {raw!r}", severity="warning")
            return None

    def _update_table(self) -> None:
        tbl = self.query_one("#table", DataTable)
        tbl.clear(columns=True)
        if not self.table:
            return
        df = to_dataframe(self.table)
        for i, col in enumerate(df.columns):
            tbl.add_column(str(i), key=col)
        for row in df.itertuples(index=False, name=None):
            tbl.add_row(*row)

    # ---------- events ---------- #
    def on_mount(self) -> None:
        if self.initial_path:
            self._do_load()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_load":
            self._do_load()
        elif event.button.id == "btn_line":
            self._do_line()
        elif event.button.id == "btn_column":
            self._do_column()
        elif event.button.id == "btn_sum":
            self._do_sum()

    # ---------- actions ---------- #
    def _do_load(self) -> None:
        path = self.query_one("#csv_path", Input).value.strip()
        if not path:
            self.notify("Percorso vuoto.", severity="warning")
            return
        try:
            self.table = load_table(path)
        except (OSError, CsvError) as e:
            self.table = None
            self._update_table()
            self._set_status(f"Errore: {e}")
            self.notify(f"Errore caricamento: {e}", severity="error")
            return
        self._update_table()
        self._set_status(f"CSV caricato: {len(self.table)} record.")

    def _do_line(self) -> None:
        if self.table is None:
            self.notify("Nessun CSV caricato.", severity="warning")
            return
        idx = self._read_index("line_no")
        if idx is None:
            return
        try:
            self._set_status(f"Line {idx}: {line_of(self.table, idx)}")
        except CsvError as e:
            self._set_status(f"Errore: {e}")

    def _do_column(self) -> None:
        if self.table is None:
            self.notify("Nessun CSV caricato.", severity="warning")
            return
        idx = self._read_index("col_no")
        if idx is None:
            return
        try:
            self._set_status(f"Column {idx}: {column_of(self.table, idx)}")
        except CsvError as e:
            self._set_status(f"Errore: {e}")

    def _do_sum(self) -> None:
        if self.table is None:
            self.notify("Nessun CSV caricato.", severity="warning")
            return
        idx = self._read_index("col_no")
        if idx is None:
            return
        skip = self.query_one("#skip_header", Switch).value
        try:
            total = sum_of(self.table, idx, skip_header=skip)
        except CsvError as e:
            log.info("Somma colonna %d fallita: %s", idx, e)
            self._set_status(f"Errore: {e}")
            return
        self._set_status(f"Sum of the column {idx}: {total}")
