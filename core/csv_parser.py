"""
Parser CSV a discesa ricorsiva.

Grammatica (semplificata):

    csv    := record ("\\n" record)*
    record := field ("," field)*
    field  := [^,\\n]*            -> ripulito da clean_field

Ogni livello lavora su un cursore (offset nel testo originale, mai modificato)
e restituisce ParseResult(cursor, value) in caso di successo oppure None.
Solo parse_csv() trasforma il fallimento in eccezione.

Nota: le virgolette non vengono interpretate. clean_field() le rimuove insieme
a tutto ciò che non è alfanumerico, quindi '"a,b"' produce due campi.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, NamedTuple, Optional

from .errors import CsvParseError

# Nessun handler qui: file e console li configura LogManager negli entry point
log = logging.getLogger("csvparser.parser")

FIELD_SEPARATOR = ","
RECORD_SEPARATOR = "\n"

_FIELD_SPAN_RE = re.compile(r"[^,\n]*")

Field = str
Record = List[Field]
Table = List[Record]


class ParseResult(NamedTuple):
    cursor: int
    value: object


Parser = Callable[[str, int], Optional[ParseResult]]


def clean_field(raw: str) -> Field:
    """Tiene solo i caratteri alfanumerici: " Alex " -> "Alex", "Carl!" -> "Carl"."""
    return "".join(ch for ch in raw if ch.isalnum())


def parse_field(text: str, cursor: int) -> Optional[ParseResult]:
    """
    Consuma la sequenza più lunga di caratteri diversi da ',' e '\\n'.
    Una sequenza vuota è valida (campo ""); fallisce solo a fine input.
    """
    if cursor >= len(text):
        return None
    match = _FIELD_SPAN_RE.match(text, cursor)
    end = match.end()
    return ParseResult(end, clean_field(text[cursor:end]))


def _separated_list1(
    text: str,
    cursor: int,
    separator: str,
    element: Parser,
    following_element: Optional[Parser] = None,
) -> Optional[ParseResult]:
    # Il separatore viene consumato solo se dopo c'è un elemento valido
    following_element = following_element or element
    first = element(text, cursor)
    if first is None:
        return None
    cursor, value = first
    values = [value]
    while text.startswith(separator, cursor):
        following = following_element(text, cursor + len(separator))
        if following is None:
            break
        cursor, value = following
        values.append(value)
    return ParseResult(cursor, values)


def _field_after_separator(text: str, cursor: int) -> Optional[ParseResult]:
    # dopo una virgola il campo esiste sempre, anche vuoto a fine input
    return parse_field(text, cursor) or ParseResult(cursor, "")


def parse_record(text: str, cursor: int) -> Optional[ParseResult]:
    """Uno o più campi separati da virgola; None se non c'è nemmeno un campo."""
    return _separated_list1(text, cursor, FIELD_SEPARATOR, parse_field, _field_after_separator)


def parse_records(text: str, cursor: int = 0) -> Optional[ParseResult]:
    """Uno o più record separati da '\\n'; None se non c'è nemmeno un record."""
    return _separated_list1(text, cursor, RECORD_SEPARATOR, parse_record)


def parse_csv(text: str) -> Table:
    """
    Entry point pubblico: testo CSV completo -> lista di record.

    Esempio:
        >>> parse_csv("Alex,M,41\\nBert,M,42\\n")
        [['Alex', 'M', '41'], ['Bert', 'M', '42']]

    Il contenuto non consumato in coda viene ignorato.

    Raises:
        CsvParseError: se non è possibile riconoscere almeno un record.
    """
    result = parse_records(text)
    if result is None:
        raise CsvParseError()

    if result.cursor < len(text):
        log.debug(
            "Ignored %d trailing characters after offset %d",
            len(text) - result.cursor,
            result.cursor,
        )
    return result.value
