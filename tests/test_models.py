"""ParseResult and tag table tests."""

from tsdoc_highlighter.core import (
    Category,
    ClassifiedSpan,
    ParseResult,
    Position,
    Range,
    classify_tag,
    is_known_tag,
    parse_text,
    tag_kind,
)


def _span(start: int, end: int) -> ClassifiedSpan:
    return ClassifiedSpan(start, end, Range(Position(0, start), Position(0, end)))


def test_new_result_has_every_category():
    result = ParseResult()

    assert set(result.spans) == set(Category)
    assert result.is_empty()
    assert all(count == 0 for count in result.counts().values())


def test_extend_merges_spans_and_regions():
    first = ParseResult(region_count=1)
    first.add(Category.TAG, _span(0, 3))
    second = ParseResult(region_count=2)
    second.add(Category.TAG, _span(5, 8))
    second.add(Category.LINK, _span(9, 12))

    first.extend(second)

    assert first[Category.TAG] == [_span(0, 3), _span(5, 8)]
    assert first.counts()[Category.LINK] == 1
    assert first.region_count == 3


def test_iter_spans_is_ordered_by_offset():
    result = ParseResult()
    result.add(Category.LINK, _span(10, 12))
    result.add(Category.TAG, _span(4, 6))
    result.add(Category.COMMENT_DELIMITER, _span(0, 3))

    assert [c for c, _ in result.iter_spans()] == [
        Category.COMMENT_DELIMITER,
        Category.TAG,
        Category.LINK,
    ]


def test_json_round_trip(sample_result):
    restored = ParseResult.from_json(sample_result.to_json())

    assert restored == sample_result


def test_json_uses_camel_case_keys():
    data = parse_text("/** @param {T} x */").to_dict()

    assert data["regions"] == 1
    assert "paramName" in data["spans"]
    assert data["spans"]["type"][0]["range"]["start"] == {"line": 0, "character": 11}


def test_tag_precedence():
    assert classify_tag("@returns") is Category.RETURNS
    assert classify_tag("@version") is Category.SINCE
    assert classify_tag("@exception") is Category.THROWS
    assert classify_tag("@param") is Category.TAG
    assert classify_tag("@custom") is Category.TAG


def test_tag_kinds():
    assert tag_kind("@defaultValue") == "default"
    assert tag_kind("@prop") == "type"
    assert tag_kind("@arg") == "param"
    assert tag_kind("@inheritDoc") == "structural"
    assert tag_kind("@custom") == "unknown"
    assert is_known_tag("@satisfies")
    assert not is_known_tag("@custom")
    # Tables are case-sensitive
    assert not is_known_tag("@Param")
