"""CSV template generation."""

import csv
import io
from pathlib import Path

from tickerfolio.csv.importer import CSV_COLUMNS

_TEMPLATE_EXAMPLES = [
    ["2024-01-15", "10", "185.50", "0"],
    ["2024-02-01", "5", "190.00", "4.95"],
]


class CsvTemplateGenerator:
    """Generator for blank CSV import templates."""

    def render(self) -> str:
        """Return the template (header plus example rows) as CSV text."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        writer.writerows(_TEMPLATE_EXAMPLES)
        return buffer.getvalue()

    def generate_template(self, path: str) -> None:
        """
        Write the template to a file.

        Args:
            path: Output file path for the template
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.render(), encoding="utf-8")
