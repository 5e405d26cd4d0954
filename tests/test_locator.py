"""Comment locator tests."""

from tsdoc_highlighter.core import CommentRegion, locate_comments


def test_finds_regions_in_order_with_offsets():
    text = "a /** one */ b /** two */"
    regions = list(locate_comments(text))

    assert regions == [
        CommentRegion(text="/** one */", start_offset=2),
        CommentRegion(text="/** two */", start_offset=15),
    ]
    assert regions[1].end_offset == len(text)


def test_unterminated_opener_yields_nothing():
    assert list(locate_comments("/** no closing")) == []


def test_first_closer_ends_region():
    text = "/** outer /** inner */ tail */"
    regions = list(locate_comments(text))

    assert [r.text for r in regions] == ["/** outer /** inner */"]


def test_plain_block_comments_are_ignored():
    assert list(locate_comments("/* not a doc comment */ // nor this")) == []


def test_shortest_regions():
    assert list(locate_comments("/**/")) == []
    assert [r.text for r in locate_comments("/***/")] == ["/***/"]


def test_multiline_region():
    text = "x\n/**\n * body\n */\ny"
    (region,) = locate_comments(text)

    assert region.start_offset == 2
    assert region.text == "/**\n * body\n */"


def test_restartable():
    text = "/** a */ /** b */"
    assert list(locate_comments(text)) == list(locate_comments(text))
