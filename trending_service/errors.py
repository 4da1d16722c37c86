"""
Errors raised by the trending widget pipeline.

Each error carries a terse public message suitable for an HTTP response
body; the underlying cause is chained and only ever logged.
"""

from typing import Optional


class WidgetError(Exception):
    """Base class for failures that abort a widget request."""

    public_message = "Error building widget"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class FetchError(WidgetError):
    """The source page could not be fetched or returned a non-success status."""

    public_message = "Error fetching data"

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.status_code = status_code


class ParseError(WidgetError):
    """The source page body could not be parsed as HTML."""

    public_message = "Error parsing data"
