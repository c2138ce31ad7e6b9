from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_CATEGORY


def scalar_to_str(v: Any) -> Any:
    """Render JSON numbers and booleans the way the site front end prints them."""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


class Category(BaseModel):
    """A named group of recipe titles from the source file."""

    name: str = Field(
        default=DEFAULT_CATEGORY,
        description="Display name of the category (e.g., 'Budget Cooking')",
    )
    items: list[str] = Field(
        default_factory=list,
        description="Recipe titles to generate, in source order",
    )

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v: Any) -> Any:
        """Blank or null names fall back to the default category."""
        return scalar_to_str(v) if v else DEFAULT_CATEGORY

    @field_validator("items", mode="before")
    @classmethod
    def default_null_items(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [scalar_to_str(item) for item in v]
        return v or []


class SourceConfig(BaseModel):
    """Root of the source file: base domain plus ordered categories."""

    domain: str = Field(
        default="",
        description="Absolute base URL used for canonical links (e.g., 'https://plateup.pro')",
    )
    categories: list[Category] = Field(default_factory=list)

    @field_validator("domain", mode="before")
    @classmethod
    def default_null_domain(cls, v: Any) -> Any:
        return scalar_to_str(v) if v else ""

    @field_validator("categories", mode="before")
    @classmethod
    def default_null_categories(cls, v: list | None) -> list:
        return v or []


class RecipeContent(BaseModel):
    """Placeholder body of an article."""

    intro: str
    ingredients: list[str]
    steps: list[str]


class ArticleMeta(BaseModel):
    """Everything the page template needs to render one article."""

    id: str
    title: str
    slug: str
    category: str
    thumb: str = Field(
        default="", description="Thumbnail URL; the site logo is used when empty"
    )
    excerpt: str = ""
    canonical: str = ""
    ts: int


class ArticleRecord(BaseModel):
    """One entry of the articles index read by the listing page.

    Only records created by this run use the model. Entries loaded from an
    existing index stay as the raw JSON values they were stored as.
    """

    id: str
    slug: str
    title: str
    category: str
    excerpt: str
    path: str
    ts: int

    @classmethod
    def from_meta(cls, meta: ArticleMeta, path: str) -> ArticleRecord:
        return cls(
            id=meta.id,
            slug=meta.slug,
            title=meta.title,
            category=meta.category,
            excerpt=meta.excerpt,
            path=path,
            ts=meta.ts,
        )


class ArticlesIndex(BaseModel):
    """The persisted index: last write time plus every record ever generated."""

    model_config = ConfigDict(populate_by_name=True)

    ts: int
    articles: list[Any] = Field(
        default_factory=list,
        alias="list",
        description="Stored entries exactly as loaded, followed by new records as dicts",
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def entry_slug(entry: Any) -> Any:
    """Slug of a stored index entry, or None when the entry has none."""
    return entry.get("slug") if isinstance(entry, dict) else None


class GenerationResult(BaseModel):
    """Outcome of one generation pass over the source categories."""

    articles: list[Any] = Field(
        default_factory=list,
        description="Prior index entries, untouched, followed by new records as dicts",
    )
    created: list[ArticleRecord] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Titles whose slug was already present"
    )
    skipped_slugs: list[str] = Field(default_factory=list)

    def has_slug(self, slug: str) -> bool:
        return any(entry_slug(entry) == slug for entry in self.articles)

    def add(self, record: ArticleRecord) -> None:
        self.articles.append(record.model_dump())
        self.created.append(record)
