"""
Custom exception classes for the timezone scraper.
"""
from typing import Optional


class TimezoneScraperError(Exception):
    """
    Base class for all custom exceptions in the timezone scraper.

    Attributes:
        message (str): A human-readable description of the error.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


# --- Configuration Related Exceptions ---
class ConfigurationError(TimezoneScraperError):
    """
    Raised for errors related to application configuration, such as an
    unusable delimiter or missing default values.
    """
    def __init__(self, message: str):
        super().__init__(message)


# --- Component Related Exceptions ---
class ComponentError(TimezoneScraperError):
    """
    A general base class for errors originating from within a pipeline component
    (Fetcher, Extractor, Storage).

    Attributes:
        component_name (str): Name of the component where the error originated.
        original_exception (Optional[Exception]): The underlying exception, if any.
    """
    def __init__(self, component_name: str, message: str, original_exception: Optional[Exception] = None):
        full_message = f"Error in component '{component_name}': {message}"
        if original_exception:
            full_message += f" (Original exception: {str(original_exception)})"
        super().__init__(full_message)
        self.component_name = component_name
        self.original_exception = original_exception


class DownloadError(ComponentError):
    """
    Raised by the Fetcher when the page cannot be downloaded: a non-2xx
    status code or a transport failure.

    Attributes:
        status_code (Optional[int]): HTTP status of the response, None for transport failures.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, original_exception: Optional[Exception] = None):
        super().__init__(component_name="Fetcher", message=message, original_exception=original_exception)
        self.status_code = status_code


class ParseError(ComponentError):
    """Raised when the markup tokenizer fails for any reason other than a clean end of input."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(component_name="Extractor", message=message, original_exception=original_exception)


class WriteError(ComponentError):
    """Raised when the delimited output file cannot be created, written or flushed."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(component_name="Storage", message=message, original_exception=original_exception)


class ReadbackError(ComponentError):
    """
    Raised inside the listing generator when the delimited file cannot be read
    back or the listing cannot be created. It is logged and never leaves the
    listing stage.
    """
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(component_name="Storage", message=message, original_exception=original_exception)
