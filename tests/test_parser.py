"""Tests for bom_forecast.parser."""

from pathlib import Path

import pytest

from bom_forecast.exceptions import ParseError
from bom_forecast.parser import parse_document, read_document


def test_parse_groups_children_by_tag(sample_product: str) -> None:
    tree = parse_document(sample_product)

    product = tree.first("product")
    assert product is not None
    assert product.attr("version") == "1.7"
    assert len(product.get("forecast")) == 2

    areas = product.first("forecast").get("area")
    assert [a.attr("aac") for a in areas] == ["VIC_FA001", "VIC_PW007", "VIC_PT042", "VIC_PT043"]


def test_node_text_and_attributes(sample_product: str) -> None:
    tree = parse_document(sample_product)
    melbourne = tree.first("product").first("forecast").get("area")[2]
    period = melbourne.first("forecast-period")

    assert period.attr("start-time-local") == "2024-05-01T05:00:00+10:00"
    maximum = period.get("element")[1]
    assert maximum.attributes == {"type": "air_temperature_maximum", "units": "Celsius"}
    assert maximum.text == "18"
    # Whitespace-only text between child elements is dropped
    assert period.text is None


def test_absent_tags_are_empty(sample_product: str) -> None:
    tree = parse_document(sample_product)

    assert tree.get("rss") == []
    assert tree.first("rss") is None
    victoria = tree.first("product").first("forecast").first("area")
    assert victoria.get("forecast-period") == []
    assert victoria.attr("parent-aac") is None


def test_malformed_markup_raises() -> None:
    with pytest.raises(ParseError, match="XML parsing failed"):
        parse_document("<product><forecast></product>", "IDV10753.xml")


def test_read_document(tmp_path: Path, sample_product: str) -> None:
    path = tmp_path / "IDV10753.xml"
    path.write_text(sample_product, encoding="utf-8")

    tree = read_document(path)

    assert tree.root.tag == "product"


def test_read_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(ParseError) as exc_info:
        read_document(tmp_path / "IDV10753.xml")
    assert exc_info.value.xml_file_name == "IDV10753.xml"


def test_read_non_utf8_document_raises(tmp_path: Path) -> None:
    path = tmp_path / "IDV10753.xml"
    path.write_bytes(b"<product>\xff\xfe</product>")

    with pytest.raises(ParseError, match="Failed to read"):
        read_document(path)


def test_text_is_kept_verbatim() -> None:
    tree = parse_document(
        '<product><text type="precis">  Cloudy.\n</text><text type="blank">  \n </text></product>'
    )

    precis, blank = tree.first("product").get("text")
    assert precis.text == "  Cloudy.\n"
    assert blank.text is None
