"""
SearXNG request options and response shapes.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ----- Request -----


class SearchOptions(BaseModel):
    """Optional search parameters. Empty/zero values are left out of the request."""

    categories: list[str] = Field(default_factory=list, description="Result verticals, e.g. general, images")
    engines: list[str] = Field(default_factory=list, description="Backend engines to query")
    language: Optional[str] = Field(default=None, description="Language code, e.g. en-US")
    pageno: int = Field(default=0, description="One-based page number; <= 0 means not sent")

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.categories:
            params["categories"] = ",".join(self.categories)
        if self.engines:
            params["engines"] = ",".join(self.engines)
        if self.language:
            params["language"] = self.language
        if self.pageno > 0:
            params["pageno"] = str(self.pageno)
        return params


# ----- Response -----


class SearchResult(BaseModel):
    title: str = ""
    url: str = ""
    img_src: Optional[str] = None
    thumbnail_src: Optional[str] = None
    thumbnail: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    iframe_src: Optional[str] = None

    @field_validator("title", "url", mode="before")
    @classmethod
    def _null_as_blank(cls, v):
        return "" if v is None else v


class SearchResponse(BaseModel):
    """Results and suggestions, in the order the service returned them."""

    results: list[SearchResult] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    # JSON null anywhere in the body means "zero value", never a decode error.
    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data):
        return {} if data is None else data

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if item is None else item for item in v]
        return v

    @field_validator("suggestions", mode="before")
    @classmethod
    def _null_suggestions(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return ["" if item is None else item for item in v]
        return v
