"""Configurazione pytest e fixtures condivise."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Iterator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

SAMPLE_TEXT = "Alex,M,41,74,170\nBert,M,42,68,166\nCarl,F,32,70,155\n"


@pytest.fixture
def sample_text() -> str:
    """Tre record senza intestazione, newline finale."""
    return SAMPLE_TEXT


@pytest.fixture
def biostats_path() -> Path:
    """File di esempio con intestazione e campi quotati."""
    return PROJECT_ROOT / "biostats1.csv"


@pytest.fixture
def temp_csv_path() -> Iterator[Path]:
    """Crea un file CSV temporaneo per i test."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False, encoding='utf-8') as f:
        temp_path = Path(f.name)
    yield temp_path
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()
