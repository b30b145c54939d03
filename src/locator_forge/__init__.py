"""Locator Forge - ranked XPath and CSS locators for a single HTML element."""

from .engine import LocatorEngine, generate_simple_locators, generate_xpath_locators
from .errors import EmptyInput, LocatorError, NoElementFound, NoViableLocator
from .models import LocatorCandidate, LocatorKind, ResultSet, Strategy, ValidatedResult

__version__ = "0.1.0"

__all__ = [
    "EmptyInput",
    "LocatorCandidate",
    "LocatorEngine",
    "LocatorError",
    "LocatorKind",
    "NoElementFound",
    "NoViableLocator",
    "ResultSet",
    "Strategy",
    "ValidatedResult",
    "generate_simple_locators",
    "generate_xpath_locators",
]
