"""Tests blocs — parsing registry, union taguée, immutabilité, RawMarkup."""
import pytest
from pydantic import ValidationError

from page_renderer.blocks import (
    BLOCK_REGISTRY,
    HeaderBlock, ListBlock, ParagraphBlock, UnknownBlock,
    parse_block, parse_blocks,
)
from page_renderer.core import RawMarkup


# ── parse_block ───────────────────────────────────────────────────────────────

def test_parse_paragraph():
    b = parse_block({"id": "p1", "type": "paragraph", "data": {"text": "Bonjour"}})
    assert isinstance(b, ParagraphBlock)
    assert b.id == "p1"
    assert b.data.text == "Bonjour"
    assert isinstance(b.data.text, RawMarkup)


def test_parse_header_keeps_level():
    b = parse_block({"type": "header", "data": {"text": "Titre", "level": 3}})
    assert isinstance(b, HeaderBlock)
    assert b.data.level == 3


def test_parse_list_items_are_markup():
    b = parse_block({"type": "list", "data": {"style": "ordered", "items": ["a", "<em>b</em>"]}})
    assert isinstance(b, ListBlock)
    assert b.data.style == "ordered"
    assert b.data.items == ("a", "<em>b</em>")
    assert all(isinstance(i, RawMarkup) for i in b.data.items)


def test_parse_list_without_style():
    b = parse_block({"type": "list", "data": {"items": ["x"]}})
    assert b.data.style is None


def test_parse_unknown_type_keeps_raw_tag():
    b = parse_block({"id": "q1", "type": "quote", "data": {"text": "Citation"}})
    assert isinstance(b, UnknownBlock)
    assert b.type == "quote"
    assert b.data == {"text": "Citation"}


def test_parse_missing_type_is_unknown():
    b = parse_block({"data": {"text": "?"}})
    assert isinstance(b, UnknownBlock)
    assert b.type == ""


def test_parse_non_string_type_is_unknown():
    b = parse_block({"type": 42, "data": None})
    assert isinstance(b, UnknownBlock)
    assert b.data == {}


def test_parse_known_type_bad_data_raises():
    with pytest.raises(ValidationError):
        parse_block({"type": "header", "data": {"text": "Sans niveau"}})


def test_parse_blocks_preserves_order():
    raws = [
        {"type": "header", "data": {"text": "1", "level": 1}},
        {"type": "quote", "data": {}},
        {"type": "paragraph", "data": {"text": "3"}},
    ]
    blocks = parse_blocks(raws)
    assert [type(b) for b in blocks] == [HeaderBlock, UnknownBlock, ParagraphBlock]


def test_parse_blocks_accepts_parsed_blocks():
    p = ParagraphBlock(data={"text": "déjà typé"})
    assert parse_blocks([p]) == [p]


def test_registry_known_types():
    assert set(BLOCK_REGISTRY) == {"paragraph", "header", "list"}


# ── Immutabilité ──────────────────────────────────────────────────────────────

def test_blocks_are_frozen():
    b = ParagraphBlock(data={"text": "x"})
    with pytest.raises(ValidationError):
        b.id = "autre"


# ── RawMarkup ─────────────────────────────────────────────────────────────────

def test_raw_markup_is_str():
    m = RawMarkup("<b>x</b>")
    assert m == "<b>x</b>"
    assert m.__html__() == "<b>x</b>"
    assert "RawMarkup" in repr(m)


def test_raw_markup_serializes_as_plain_str():
    b = ParagraphBlock(data={"text": "<i>x</i>"})
    dumped = b.model_dump()
    assert dumped["data"]["text"] == "<i>x</i>"
    assert type(dumped["data"]["text"]) is str


@pytest.mark.parametrize("raw", [None, "paragraph", 3, ["type", "paragraph"]])
def test_parse_block_non_mapping_raises_value_error(raw):
    with pytest.raises(ValueError):
        parse_block(raw)


def test_parse_blocks_non_mapping_inside_page_is_validation_error():
    from page_renderer.fetcher import PageContent
    with pytest.raises(ValidationError):
        PageContent(name="p", blocks=[None])
    with pytest.raises(ValidationError):
        PageContent(name="p", blocks="paragraph")
