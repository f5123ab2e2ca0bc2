import fitz
import pytest

from pdf2xlsx import extractor
from pdf2xlsx.extractor import ExtractionError, extract_pages, extract_text


class FakeRect:
    height = 800.0


class FakeMuPage:
    rect = FakeRect()

    def __init__(self, words):
        self._words = words

    def get_text(self, kind):
        assert kind == "words"
        return self._words


class FakeMuDoc:
    def __init__(self, pages):
        self._pages = pages

    @property
    def page_count(self):
        return len(self._pages)

    def load_page(self, idx):
        return FakeMuPage(self._pages[idx])

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_pdfplumber_fragments_use_upward_y(fake_pdf, sample_page):
    fake_pdf([sample_page])
    pages = extract_pages(b"%PDF-1.4 fake")
    assert len(pages) == 1
    first = pages[0][0]
    assert (first.x, first.y, first.text) == (10.0, 780.0, "LISTA")


def test_extract_text_renders_rows(fake_pdf, sample_page):
    fake_pdf([sample_page, [(700, [(10, "3"), (30, "Maní"), (200, "99.00"), (300, "1")])]])
    text = extract_text(b"%PDF-1.4 fake")
    assert text.splitlines() == [
        "LISTA DE PRECIOS",
        "CÓDIGO DESCRIPCIÓN PRECIO STOCK",
        "2 Nuez",
        "Pecan PARTIDA x 1Kg 20,956.00 15.00",
        "15 Aceite de oliva 1,250.50 8",
        "Página Nro.: 1",
        "3 Maní 99.00 1",
    ]


def test_pymupdf_engine(monkeypatch):
    words = [
        (10.0, 50.0, 20.0, 60.0, "2", 0, 0, 0),
        (30.0, 50.0, 80.0, 60.0, "Nuez", 0, 0, 1),
        (30.0, 70.0, 80.0, 80.0, "  ", 0, 1, 0),
        (30.0, 70.0, 80.0),
    ]
    monkeypatch.setattr(fitz, "open", lambda *args, **kwargs: FakeMuDoc([words]))
    pages = extract_pages(b"%PDF-1.4 fake", engine="pymupdf")
    assert [(f.x, f.y, f.text) for f in pages[0]] == [(10.0, 740.0, "2"), (30.0, 740.0, "Nuez")]


def test_unknown_engine_is_rejected():
    with pytest.raises(ValueError):
        extract_pages(b"%PDF", engine="ocr")


def test_engine_failures_become_extraction_errors(broken_pdf):
    with pytest.raises(ExtractionError) as excinfo:
        extract_pages(b"not a pdf")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_empty_document_is_an_extraction_error():
    with pytest.raises(ExtractionError):
        extract_pages(b"")


def test_engines_listed():
    assert extractor.ENGINES == ("pdfplumber", "pymupdf")
