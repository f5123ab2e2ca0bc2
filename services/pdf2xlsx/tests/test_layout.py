import pytest

from pdf2xlsx.layout import group_rows, reconstruct_pages, render_text, row_key
from pdf2xlsx.models import PositionedFragment as F


def test_group_rows_orders_top_down_and_left_to_right():
    page = [
        F(200, 700.2, "20,956.00"),
        F(10, 700.4, "2"),
        F(50, 699.8, "Nuez"),
        F(10, 720, "LISTA DE PRECIOS"),
    ]
    assert group_rows(page) == ["LISTA DE PRECIOS", "2 Nuez 20,956.00"]


def test_row_key_rounds_half_up():
    assert row_key(0.5) == 1
    assert row_key(1.5) == 2
    assert row_key(2.5) == 3
    assert row_key(-0.4) == 0


def test_tolerance_widens_row_membership():
    page = [F(10, 701, "Aceite"), F(5, 699, "15")]
    assert group_rows(page) == ["Aceite", "15"]
    assert group_rows(page, tolerance=4) == ["15 Aceite"]


def test_row_key_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        row_key(10, tolerance=0)


def test_rendering_collapses_whitespace_and_drops_blank_rows():
    page = [F(0, 10, "Aceite  de"), F(5, 10, " oliva "), F(0, 30, "   ")]
    assert group_rows(page) == ["Aceite de oliva"]


def test_same_x_keeps_extraction_order():
    page = [F(10, 50, "Nuez"), F(10, 50, "Pecan")]
    assert group_rows(page) == ["Nuez Pecan"]


def test_pages_are_concatenated_in_order():
    pages = [
        [F(0, 100, "1 Aceite 10.00 2"), F(0, 200, "LISTA DE PRECIOS")],
        [],
        [F(0, 300, "2 Vinagre 5.00 1")],
    ]
    assert reconstruct_pages(pages) == ["LISTA DE PRECIOS", "1 Aceite 10.00 2", "2 Vinagre 5.00 1"]
    assert render_text(pages) == "LISTA DE PRECIOS\n1 Aceite 10.00 2\n2 Vinagre 5.00 1\n"


def test_empty_input_yields_no_rows():
    assert group_rows([]) == []
    assert render_text([]) == ""
