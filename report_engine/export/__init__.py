"""
Export package: document content and the PDF sink.
"""

from report_engine.export.document import DEFAULT_FILENAME, export
from report_engine.export.pdf import write_pdf

__all__ = ["DEFAULT_FILENAME", "export", "write_pdf"]
