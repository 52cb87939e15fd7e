"""
CSV document parser.

Turns raw CSV text into a header and a list of nested records.
"""

from csvloader.core.models import ParsedDocument

from .record_builder import build_record
from .record_tree import has_content
from .tokenizer import split_line


class CsvDocumentParser:
    """
    Parses a whole CSV document held in memory.

    The first non-blank line is the header. Every following non-blank line
    becomes one record; records whose leaves are all blank are dropped.
    """

    def parse(self, text: str | None) -> ParsedDocument:
        """
        Parse CSV text.

        Args:
            text: Complete document text

        Returns:
            ParsedDocument with header keys and records in document order
        """
        if not text or not text.strip():
            return ParsedDocument(header=[], records=[])

        lines = self._split_lines(text)
        if not lines:
            return ParsedDocument(header=[], records=[])

        header = [key.strip() for key in split_line(lines[0])]

        records = []
        for raw in lines[1:]:
            record = build_record(header, split_line(raw))
            if has_content(record):
                records.append(record)

        return ParsedDocument(header=header, records=records)

    @staticmethod
    def _split_lines(text: str) -> list[str]:
        """Normalize line endings and drop blank lines."""
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        return [line for line in normalized.split("\n") if line.strip()]
