"""Analyzer module - sanitized parsing of HTML fragments."""

from .html_parser import HTMLParser
from .sanitizer import sanitize, sanitize_markup

__all__ = ["HTMLParser", "sanitize", "sanitize_markup"]
