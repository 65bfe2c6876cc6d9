"""Utility modules for Parsley.

Provides:
- text: escape_html for HTML output
- logger: get_logger for namespaced logging
"""

from parsley.utils.logger import get_logger
from parsley.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
