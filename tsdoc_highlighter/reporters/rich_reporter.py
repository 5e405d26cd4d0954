"""
Rich terminal reporter - highlighted doc comments and span statistics
"""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tsdoc_highlighter.core.models import Category, ParseResult
from tsdoc_highlighter.core.scanner import ScanReport
from tsdoc_highlighter.core.source import SourceText
from tsdoc_highlighter.render.highlighter import Highlighter
from tsdoc_highlighter.render.terminal import Snippet


# Column headers for the per-category tables
CATEGORY_LABELS: dict[Category, str] = {
    Category.TAG: "Tags",
    Category.PARAM_NAME: "Params",
    Category.TYPE: "Types",
    Category.DESCRIPTION: "Descriptions",
    Category.LINK: "Links",
    Category.COMMENT_DELIMITER: "Delimiters",
    Category.DEPRECATED: "Deprecated",
    Category.EXAMPLE: "Examples",
    Category.RETURNS: "Returns",
    Category.DEFAULT_VALUE: "Defaults",
    Category.SINCE: "Since",
    Category.SEE: "See",
    Category.THROWS: "Throws",
}

# Compact scan table columns
SCAN_COLUMNS: list[Category] = [
    Category.TAG,
    Category.PARAM_NAME,
    Category.TYPE,
    Category.LINK,
    Category.RETURNS,
    Category.THROWS,
    Category.DEPRECATED,
]


class RichReporter:
    """Rich terminal reporter"""

    def __init__(self, console: Console | None = None, highlighter: Highlighter | None = None):
        self.console = console or Console()
        self.highlighter = highlighter or Highlighter()

    def report(self, source: SourceText, result: ParseResult, target: str) -> None:
        """Print every doc comment of a file, highlighted, then a summary."""
        if result.region_count == 0:
            self.console.print(f"[yellow]No doc comments found in {target}[/yellow]")
            return

        snippets = self.highlighter.snippets(source, result)
        width = len(str(snippets[-1].last_line + 1))
        blocks = [self._number_lines(snippet, width) for snippet in snippets]

        palette = self.highlighter.styles.palette
        self.console.print(Panel(
            Group(*self._separated(blocks)),
            title=f"[bold]{target}[/bold]",
            subtitle=f"[dim]{result.region_count} doc comments - {palette.name}[/dim]",
            border_style=palette.overlay1,
        ))
        self._print_summary(result)

    def report_scan(self, report: ScanReport) -> None:
        """Print per-file counts of a directory scan."""
        if not report.files:
            self.console.print(f"[yellow]No source files found under {report.root}[/yellow]")
            return

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("File", style="cyan")
        table.add_column("Comments", justify="right")
        for category in SCAN_COLUMNS:
            table.add_column(CATEGORY_LABELS[category], justify="right")

        for file_scan in report.files:
            counts = file_scan.result.counts()
            table.add_row(
                file_scan.path,
                str(file_scan.result.region_count),
                *(self._count_cell(counts[c]) for c in SCAN_COLUMNS),
            )

        totals = report.totals()
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            f"[bold]{report.region_count}[/bold]",
            *(f"[bold]{totals[c]}[/bold]" for c in SCAN_COLUMNS),
        )
        self.console.print(table)

        if report.skipped:
            self.console.print(f"[yellow]Skipped {len(report.skipped)} unreadable files[/yellow]")

    def _number_lines(self, snippet: Snippet, width: int) -> Text:
        numbered = Text()
        for offset, line in enumerate(snippet.text.split("\n", allow_blank=True)):
            line.rstrip()
            numbered.append(f"{snippet.first_line + offset + 1:>{width}} ", style="dim")
            numbered.append_text(line)
            numbered.append("\n")
        numbered.rstrip()
        return numbered

    @staticmethod
    def _separated(blocks: list[Text]) -> list[Text]:
        separated: list[Text] = []
        for index, block in enumerate(blocks):
            if index:
                separated.append(Text("···", style="dim"))
            separated.append(block)
        return separated

    def _print_summary(self, result: ParseResult) -> None:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Category", width=16)
        table.add_column("Spans", justify="right")
        for category, count in result.counts().items():
            if count == 0:
                continue
            style = self.highlighter.styles[category]
            table.add_row(Text(CATEGORY_LABELS[category], style=style), str(count))
        self.console.print(table)

    @staticmethod
    def _count_cell(count: int) -> str:
        return str(count) if count else "[dim]-[/dim]"
