from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from core.config import load_config
from core.errors import CsvError
from core.loader import load_table
from core.logger import LogManager
from core.operations import column_of, line_of, sum_of
from core.printer import pretty_print


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"intero non valido: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"deve essere >= 1: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Parser CSV: stampa, righe, colonne e somme.")
    p.add_argument("path", nargs="?", help="File CSV (default: sample_file da config.json)")
    p.add_argument("--line", type=int, help="Riga da mostrare (0-based)")
    p.add_argument("--column", type=int, help="Colonna da mostrare (0-based)")
    p.add_argument("--sum", type=int, dest="sum_col", help="Colonna da sommare (0-based)")
    p.add_argument("--skip-header", action="store_true", default=None, help="Esclude la prima riga dalla somma")
    p.add_argument("--width", type=positive_int, help="Larghezza colonne nella stampa")
    p.add_argument("--tui", action="store_true", help="Avvia il viewer Textual")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point CLI. Ritorna l'exit code (0 ok, 1 errore)."""
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exc:
        # argparse ha già scritto l'errore su stderr
        return 0 if exc.code == 0 else 1
    cfg = load_config()
    LogManager.set_level(cfg.log_level)
    logger = LogManager("cli").get_logger()

    path = args.path or str(cfg.sample_path())

    if args.tui:
        from ui.main_app import CsvViewerApp

        try:
            CsvViewerApp(path=path).run()
        except Exception as exc:
            logger.error("Errore critico nella TUI: %s", exc, exc_info=True)
            raise
        return 0

    try:
        table = load_table(path)
    except (OSError, CsvError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    pretty_print(table, width=args.width if args.width is not None else cfg.column_width)

    exit_code = 0
    skip_header = cfg.skip_header if args.skip_header is None else args.skip_header

    if args.line is not None:
        try:
            print(f"Line {args.line}: {line_of(table, args.line)}")
        except CsvError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1

    if args.column is not None:
        try:
            print(f"Column {args.column}: {column_of(table, args.column)}")
        except CsvError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1

    if args.sum_col is not None:
        try:
            total = sum_of(table, args.sum_col, skip_header=skip_header)
            print(f"Sum of the column {args.sum_col}: {total}")
        except CsvError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
