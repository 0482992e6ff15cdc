"""PIT estimate summary report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from taxbridge.formatting import format_naira
from taxbridge.models.pit import PITResult

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _band_rate(rate: Decimal) -> str:
    return f"{rate * 100:.0f}%"


class PITSummaryGenerator:
    """Generates a human-readable PIT estimate summary."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)
        self.env.filters["naira"] = format_naira
        self.env.filters["band_rate"] = _band_rate

    def render(self, result: PITResult) -> str:
        """Render PIT summary report."""
        template = self.env.get_template("pit_summary.txt")
        return template.render(res=result)
