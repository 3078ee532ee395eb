"""CSV import utilities."""

from tickerfolio.csv.importer import CsvImporter
from tickerfolio.csv.template import CsvTemplateGenerator

__all__ = [
    "CsvImporter",
    "CsvTemplateGenerator",
]
