"""
Widget subsystem models.
"""
from dataclasses import dataclass, field
from typing import Dict

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass
class WidgetResponse:
    """Framework independent result of handling one widget request."""
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)
    content_type: str = HTML_CONTENT_TYPE

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
