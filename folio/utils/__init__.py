"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Label and contact-field formatting
- Logger setup
- Timestamps for log directories
"""

from folio.utils.text_processing import dial_number, download_filename, format_label
from folio.utils.timestamp import now

__all__ = ["dial_number", "download_filename", "format_label", "now"]
