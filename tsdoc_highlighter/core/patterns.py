"""
Pattern and tag table definitions.

The tag tables are closed sets checked in ``TAG_TABLES`` order; the first
table containing a token decides its category.
"""

import re

from tsdoc_highlighter.core.models import Category


# ============================================================
# Comment structure
# ============================================================

# /** ... */, shortest match, no nesting
BLOCK_COMMENT_PATTERN = re.compile(r'/\*\*.*?\*/', re.DOTALL)

OPEN_MARKER = "/**"
CLOSE_MARKER = "*/"

# Leading "*" of an interior line (matched at a line start)
LEADING_STAR_PATTERN = re.compile(r'[ \t]*(\*)')

# Marker stripped from a description line: whitespace, "*", one space
LINE_MARKER_PATTERN = re.compile(r'[ \t]*\*? ?')

# ============================================================
# Tags and their sub-grammars
# ============================================================

# @word, not inside a word (user@example.com)
TAG_PATTERN = re.compile(r'(?<!\w)@[A-Za-z]+')

# {type} right after a tag; no nested braces, never an inline tag
TYPE_PATTERN = re.compile(r'[ \t]*(\{(?!@)[^{}]+\})')

# name, a.b.c, [name] or [name=default]
PARAM_NAME_PATTERN = re.compile(
    r'[ \t]+(\[[A-Za-z_$][\w$.]*(?:=[^\]\r\n]*)?\]|[A-Za-z_$][\w$.]*)'
)

# Optional "-" between a parameter name and its description
DESCRIPTION_SEPARATOR_PATTERN = re.compile(r'[ \t]*(?:-[ \t]*)?')

HORIZONTAL_SPACE_PATTERN = re.compile(r'[ \t]*')

# {@link Target} / {@see Target}
INLINE_LINK_PATTERN = re.compile(r'\{@(?:link|see)\s+[^{}]+\}')

# Any inline tag: {@inheritDoc}, {@linkcode X}, {@link X}; group 1 is the tag token
INLINE_TAG_PATTERN = re.compile(r'\{(@[A-Za-z]+)(?:\s[^{}]*)?\}')

# ============================================================
# Tag tables
# ============================================================

DEPRECATED_TAGS: frozenset[str] = frozenset({"@deprecated"})
EXAMPLE_TAGS: frozenset[str] = frozenset({"@example"})
RETURN_TAGS: frozenset[str] = frozenset({"@returns", "@return"})
SINCE_TAGS: frozenset[str] = frozenset({"@since", "@version"})
SEE_TAGS: frozenset[str] = frozenset({"@see"})
THROWS_TAGS: frozenset[str] = frozenset({"@throws", "@throw", "@exception"})
DEFAULT_TAGS: frozenset[str] = frozenset({"@default", "@defaultValue"})
PARAM_TAGS: frozenset[str] = frozenset({"@param", "@argument", "@arg"})
TYPE_TAGS: frozenset[str] = frozenset({
    "@type",
    "@typedef",
    "@callback",
    "@template",
    "@enum",
    "@member",
    "@var",
    "@property",
    "@prop",
})
STRUCTURAL_TAGS: frozenset[str] = frozenset({
    "@readonly",
    "@override",
    "@virtual",
    "@abstract",
    "@access",
    "@public",
    "@private",
    "@protected",
    "@internal",
    "@inheritDoc",
    "@packageDocumentation",
    "@module",
    "@namespace",
    "@class",
    "@constructor",
    "@interface",
    "@implements",
    "@extends",
    "@augments",
    "@mixes",
    "@requires",
    "@fires",
    "@emits",
    "@listens",
    "@event",
    "@satisfies",
})

# (kind, tags, category of the tag token itself), most specific first
TAG_TABLES: list[tuple[str, frozenset[str], Category]] = [
    ("deprecated", DEPRECATED_TAGS, Category.DEPRECATED),
    ("example", EXAMPLE_TAGS, Category.EXAMPLE),
    ("returns", RETURN_TAGS, Category.RETURNS),
    ("since", SINCE_TAGS, Category.SINCE),
    ("see", SEE_TAGS, Category.SEE),
    ("throws", THROWS_TAGS, Category.THROWS),
    ("default", DEFAULT_TAGS, Category.TAG),
    ("param", PARAM_TAGS, Category.TAG),
    ("type", TYPE_TAGS, Category.TAG),
    ("structural", STRUCTURAL_TAGS, Category.TAG),
]

UNKNOWN_TAG_KIND = "unknown"


def tag_kind(token: str) -> str:
    """Name of the first tag table containing ``token``."""
    for kind, tags, _ in TAG_TABLES:
        if token in tags:
            return kind
    return UNKNOWN_TAG_KIND


def classify_tag(token: str) -> Category:
    """Category of a tag token's own span."""
    for _, tags, category in TAG_TABLES:
        if token in tags:
            return category
    return Category.TAG


def is_known_tag(token: str) -> bool:
    return tag_kind(token) != UNKNOWN_TAG_KIND
