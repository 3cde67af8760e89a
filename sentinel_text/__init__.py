"""Heuristic text analytics for the Sentinel research platform."""

from .analysis import (DocumentProfile, EntityBundle, analyze_document,
                       detect_language, extract_date, extract_entities,
                       find_keywords, format_file_size, rank_related,
                       sanitize_filename, similarity, similarity_matrix,
                       summarize)
from .config import Config, get_config, load_config
from .export import ExportResult, UnsupportedExportFormat, export_documents
from .ingest import (IngestError, prepare_text_document,
                     prepare_upload_document, prepare_url_document)
from .logging_setup import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DocumentProfile",
    "EntityBundle",
    "ExportResult",
    "IngestError",
    "UnsupportedExportFormat",
    "analyze_document",
    "configure_logging",
    "detect_language",
    "export_documents",
    "extract_date",
    "extract_entities",
    "find_keywords",
    "format_file_size",
    "get_config",
    "load_config",
    "prepare_text_document",
    "prepare_upload_document",
    "prepare_url_document",
    "rank_related",
    "sanitize_filename",
    "similarity",
    "similarity_matrix",
    "summarize",
]
