"""Shared fixtures."""

from textwrap import dedent

import pytest

from tsdoc_highlighter.core import ParseResult, parse_text


SAMPLE_TS = dedent("""\
    import { Thing } from "./thing";

    /**
     * Adds two numbers.
     *
     * @param {number} a - first
     * @param {number} b - second
     * @returns {number} the sum
     * @example
     *   add(1, 2)
     */
    export function add(a: number, b: number): number {
      return a + b;
    }

    /** @deprecated use {@link Thing} instead */
    export const legacy = 1;
""")


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TS


@pytest.fixture
def sample_result(sample_text) -> ParseResult:
    return parse_text(sample_text)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "add.ts"
    path.write_text(SAMPLE_TS, encoding="utf-8")
    return path
