"""Exceptions raised by the locator engine."""


class LocatorError(Exception):
    """Base class for locator generation errors."""


class NoElementFound(LocatorError):
    """The sanitized fragment contains no element nodes."""

    def __init__(self, message: str = "No valid element found in the HTML fragment"):
        super().__init__(message)


class EmptyInput(NoElementFound):
    """No fragment was given at all."""

    def __init__(self, message: str = "Please provide an HTML fragment"):
        super().__init__(message)


class NoViableLocator(LocatorError):
    """Generation ran but no candidate survived validation."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No viable locator could be generated for <{tag}>")
