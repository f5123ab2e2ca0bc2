from decimal import Decimal

from pdf2xlsx.fallback import fallback_records, match_line


def test_match_line_extracts_all_fields():
    record = match_line("12 Aceite de oliva 1,250.50 8")
    assert record.codigo == "12"
    assert record.descripcion == "Aceite de oliva"
    assert record.precio == Decimal("1250.50")
    assert record.stock == Decimal("8")


def test_match_line_requires_both_amounts_on_the_line():
    assert match_line("12 Aceite 1,250.50") is None
    assert match_line("2 Nuez") is None
    assert match_line("Pecan PARTIDA x 1Kg 20,956.00 15.00") is None


def test_match_line_ignores_trailing_text_after_stock():
    record = match_line("12 Aceite 10.00 5.00 oferta")
    assert record.descripcion == "Aceite"
    assert record.precio == Decimal("10.00")
    assert record.stock == Decimal("5.00")

    record = match_line("3 Vinagre 4.50 3.00 UN $")
    assert (record.precio, record.stock) == (Decimal("4.50"), Decimal("3.00"))


def test_match_line_accepts_short_descriptions():
    record = match_line("1 A 10.00 5.00")
    assert record.descripcion == "A"


def test_fallback_records_skips_non_matching_lines():
    lines = ["Rubro Aceites", "1 Aceite de oliva 10.00 5.00", "2 Vinagre 4.50 3.00", "Total"]
    records = fallback_records(lines)
    assert [r.codigo for r in records] == ["1", "2"]
