"""
CSV parsing: line tokenizer, nested record builder and document parser.
"""

from .document_parser import CsvDocumentParser
from .record_builder import build_record
from .record_tree import (
    EXTRAS_KEY,
    Empty,
    Leaf,
    Node,
    Record,
    TreeValue,
    flatten_record,
    has_content,
    lookup,
    upsert_path,
)
from .tokenizer import split_line

__all__ = [
    "CsvDocumentParser",
    "build_record",
    "split_line",
    "Record",
    "Empty",
    "Leaf",
    "Node",
    "TreeValue",
    "EXTRAS_KEY",
    "lookup",
    "upsert_path",
    "has_content",
    "flatten_record",
]
