"""
Data models for the doc-comment parser.

All offsets are character offsets into the original text, half-open
``[start, end)``. Positions are 0-based (line, character) pairs.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Category(Enum):
    """Semantic category of a highlighted span."""
    TAG = "tag"
    PARAM_NAME = "paramName"
    TYPE = "type"
    DESCRIPTION = "description"
    LINK = "link"
    COMMENT_DELIMITER = "commentDelimiter"
    DEPRECATED = "deprecated"
    EXAMPLE = "example"
    RETURNS = "returns"
    DEFAULT_VALUE = "defaultValue"
    SINCE = "since"
    SEE = "see"
    THROWS = "throws"


@dataclass(frozen=True, order=True)
class Position:
    """A 0-based line/character position."""
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """A pair of positions."""
    start: Position
    end: Position

    def to_dict(self) -> dict:
        return {
            "start": {"line": self.start.line, "character": self.start.character},
            "end": {"line": self.end.line, "character": self.end.character},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Range":
        return cls(
            start=Position(**data["start"]),
            end=Position(**data["end"]),
        )


@dataclass(frozen=True)
class CommentRegion:
    """
    A located ``/** ... */`` block comment.

    Attributes:
        text: The comment text, delimiters included
        start_offset: Offset of the opening ``/**`` in the document
    """
    text: str
    start_offset: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.text)


@dataclass(frozen=True)
class ClassifiedSpan:
    """
    A classified fragment of a comment.

    Attributes:
        start: Start offset (inclusive)
        end: End offset (exclusive)
        range: The same span as a line/character range
    """
    start: int
    end: int
    range: Range

    def text_in(self, text: str) -> str:
        """Return the covered substring of ``text``."""
        return text[self.start:self.end]

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "range": self.range.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "ClassifiedSpan":
        return cls(
            start=data["start"],
            end=data["end"],
            range=Range.from_dict(data["range"]),
        )


def _empty_spans() -> dict[Category, list[ClassifiedSpan]]:
    return {category: [] for category in Category}


@dataclass
class ParseResult:
    """
    Parse result: classified spans keyed by category.

    Every category is always present. Within a category spans keep
    document order; duplicates are not removed.

    Attributes:
        spans: Category -> ordered list of spans
        region_count: Number of comment regions that were structured
    """
    spans: dict[Category, list[ClassifiedSpan]] = field(default_factory=_empty_spans)
    region_count: int = 0

    def __getitem__(self, category: Category) -> list[ClassifiedSpan]:
        return self.spans[category]

    def add(self, category: Category, span: ClassifiedSpan) -> None:
        self.spans[category].append(span)

    def extend(self, other: "ParseResult") -> None:
        """Merge another result into this one."""
        for category in Category:
            self.spans[category].extend(other.spans[category])
        self.region_count += other.region_count

    def counts(self) -> dict[Category, int]:
        return {category: len(spans) for category, spans in self.spans.items()}

    def is_empty(self) -> bool:
        return not any(self.spans.values())

    def iter_spans(self) -> Iterator[tuple[Category, ClassifiedSpan]]:
        """Yield every (category, span) pair ordered by offset."""
        pairs = [
            (category, span)
            for category in Category
            for span in self.spans[category]
        ]
        pairs.sort(key=lambda pair: (pair[1].start, pair[1].end))
        yield from pairs

    def texts(self, category: Category, text: str) -> list[str]:
        """Covered substrings of ``text`` for one category (handy for display and tests)."""
        return [span.text_in(text) for span in self.spans[category]]

    def to_dict(self) -> dict:
        return {
            "regions": self.region_count,
            "spans": {
                category.value: [span.to_dict() for span in self.spans[category]]
                for category in Category
            },
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "ParseResult":
        """Deserialize from a JSON string."""
        data = json.loads(json_str)
        result = cls(region_count=data.get("regions", 0))
        for key, spans in data.get("spans", {}).items():
            category = Category(key)
            result.spans[category] = [ClassifiedSpan.from_dict(s) for s in spans]
        return result
