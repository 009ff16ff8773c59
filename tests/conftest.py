# tests/conftest.py
import json
import zipfile
from pathlib import Path
from typing import Dict, List

import pytest

from backend.core.vlayout.layout import LayoutLoader, LayoutSchema

SIMPLE_LAYOUT: Dict[str, List[str]] = {
    "C100": ["REG", "A", "B", "C"],
}

ORDERED_LAYOUT: Dict[str, List[str]] = {
    "0000": ["REG", "COD_VER", "NOME"],
    "C100": ["REG", "A", "B", "C"],
    "C170": ["REG", "NUM_ITEM", "COD_ITEM"],
    "9999": ["REG", "QTD_LIN"],
}


@pytest.fixture()
def simple_schema() -> LayoutSchema:
    return LayoutLoader.load(SIMPLE_LAYOUT)


@pytest.fixture()
def ordered_schema() -> LayoutSchema:
    return LayoutLoader.load(ORDERED_LAYOUT)


@pytest.fixture()
def layout_file(tmp_path: Path) -> Path:
    """Layout escrito en disco en latin-1, como lo entrega el cliente."""
    path = tmp_path / "layout_blocos.json"
    path.write_bytes(json.dumps(SIMPLE_LAYOUT, ensure_ascii=False).encode("latin-1"))
    return path


def write_sped(path: Path, lines: List[str]) -> Path:
    """Escribe un archivo SPED en latin-1."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes("\n".join(lines).encode("latin-1") + b"\n")
    return path


def make_zip(path: Path, members: Dict[str, bytes]) -> Path:
    """Crea un .zip con los nombres de entrada tal cual (incluso maliciosos)."""
    with zipfile.ZipFile(path, "w") as archive:
        for name, content in members.items():
            archive.writestr(name, content)
    return path


@pytest.fixture()
def sped_writer():
    return write_sped


@pytest.fixture()
def zip_maker():
    return make_zip
