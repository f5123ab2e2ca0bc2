from typing import List, Sequence, Tuple

import pdfplumber
import pytest

PAGE_HEIGHT = 800.0

Row = Tuple[float, Sequence[Tuple[float, str]]]

SAMPLE_PAGE: List[Row] = [
    (780, [(10, "LISTA"), (60, "DE"), (90, "PRECIOS")]),
    (760, [(10, "CÓDIGO"), (80, "DESCRIPCIÓN"), (300, "PRECIO"), (400, "STOCK")]),
    (740, [(10, "2"), (30, "Nuez")]),
    (728, [(300, "20,956.00"), (10, "Pecan"), (60, "PARTIDA"), (120, "x"), (140, "1Kg"), (400, "15.00")]),
    (716, [(10, "15"), (30, "Aceite"), (80, "de"), (100, "oliva"), (300, "1,250.50"), (400, "8")]),
    (20, [(250, "Página"), (300, "Nro.:"), (340, "1")]),
]


class FakePage:
    def __init__(self, rows: List[Row]):
        self.height = PAGE_HEIGHT
        self.width = 600.0
        self._words = [
            {"x0": float(x), "bottom": PAGE_HEIGHT - float(y), "text": text}
            for y, fragments in rows
            for x, text in fragments
        ]

    def extract_words(self, **kwargs):
        return list(self._words)


class FakePDF:
    def __init__(self, pages: List[List[Row]]):
        self.pages = [FakePage(rows) for rows in pages]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture()
def fake_pdf(monkeypatch):
    """Install a fake ``pdfplumber.open`` serving the given pages."""

    def install(pages: List[List[Row]]):
        monkeypatch.setattr(pdfplumber, "open", lambda *args, **kwargs: FakePDF(pages))

    return install


@pytest.fixture()
def broken_pdf(monkeypatch):
    def _raise(*args, **kwargs):
        raise ValueError("No /Root object! - Is this really a PDF?")

    monkeypatch.setattr(pdfplumber, "open", _raise)


@pytest.fixture()
def sample_page() -> List[Row]:
    return SAMPLE_PAGE
