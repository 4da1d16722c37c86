"""
Trending repository data model.

One TrendingItem is built per repository card found on the trending page
and lives only for the duration of a single widget request.
"""

from pydantic import BaseModel, Field, field_validator


class TrendingItem(BaseModel):
    """A single repository card scraped from the trending page."""
    name: str = Field(min_length=1, description="Repository name, e.g. 'octo / repo'")
    url: str = Field(min_length=1, description="Relative repository path, e.g. '/octo/repo'")
    description: str = Field(default="", description="Repository description")
    language: str = Field(default="", description="Primary programming language")
    total_stars: str = Field(default="", description="Human formatted star count")
    stars_today: str = Field(default="", description="Stars gained in the current period")
    forks: str = Field(default="", description="Human formatted fork count")

    @field_validator("*", mode="before")
    @classmethod
    def _strip_whitespace(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    def absolute_url(self, base_url: str) -> str:
        """Join the relative repository path onto the site base URL."""
        return f"{base_url.rstrip('/')}{self.url}"
