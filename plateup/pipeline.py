"""Turn the source categories into article pages plus the articles index."""

from pathlib import Path
from typing import Any, Callable, List, Optional, Union

import click

from .config import ARTICLES_URL_PREFIX, EXCERPT_LENGTH
from .content import build_placeholder_content, make_article_id, now_ms, slugify
from .html_generator import ArticleHTMLGenerator
from .models import ArticleMeta, ArticleRecord, GenerationResult, SourceConfig
from .storage import ensure_dir, load_existing_index, load_or_init_config, save_index


class ArticleGenerator:
    """Generate one page per new title, skipping slugs that already exist.

    The id factory and clock are injectable so runs can be reproduced in tests.
    """

    def __init__(
        self,
        articles_dir: Union[str, Path],
        html_generator: Optional[ArticleHTMLGenerator] = None,
        id_factory: Callable[[], str] = make_article_id,
        clock: Callable[[], int] = now_ms,
    ):
        self.articles_dir = Path(articles_dir)
        self.html_generator = html_generator or ArticleHTMLGenerator()
        self.id_factory = id_factory
        self.clock = clock

    @staticmethod
    def canonical_url(domain: str, slug: str) -> str:
        if domain:
            return f"{domain}/{ARTICLES_URL_PREFIX}/{slug}.html"
        return f"/{ARTICLES_URL_PREFIX}/{slug}.html"

    def build_meta(self, title: str, slug: str, category: str, domain: str, intro: str) -> ArticleMeta:
        return ArticleMeta(
            id=self.id_factory(),
            title=title,
            slug=slug,
            category=category,
            excerpt=intro[:EXCERPT_LENGTH],
            canonical=self.canonical_url(domain, slug),
            ts=self.clock(),
        )

    def write_article(self, title: str, category: str, domain: str) -> ArticleRecord:
        """Render and save the page for one title, returning its index record."""
        slug = slugify(title)
        content = build_placeholder_content(title)
        meta = self.build_meta(title, slug, category, domain, content.intro)

        html = self.html_generator.render_article_page(meta, content)
        out_path = self.articles_dir / f"{slug}.html"
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html)
        click.echo(f"Wrote: {out_path}")

        return ArticleRecord.from_meta(meta, f"{ARTICLES_URL_PREFIX}/{slug}.html")

    def generate(
        self, source: SourceConfig, existing: Optional[List[Any]] = None
    ) -> GenerationResult:
        """Process every category item in source order.

        ``existing`` holds the stored index entries; they are carried over
        unchanged and only their ``slug`` is consulted.
        """
        result = GenerationResult(articles=list(existing or []))

        for category in source.categories:
            for title in category.items:
                slug = slugify(title)
                if result.has_slug(slug):
                    click.echo(f"Skipping existing: {slug}")
                    result.skipped.append(title)
                    result.skipped_slugs.append(slug)
                    continue

                record = self.write_article(title, category.name, source.domain)
                result.add(record)

        return result


def run_pipeline(
    source_path: Union[str, Path],
    index_path: Union[str, Path],
    articles_dir: Union[str, Path],
    html_generator: Optional[ArticleHTMLGenerator] = None,
    id_factory: Callable[[], str] = make_article_id,
    clock: Callable[[], int] = now_ms,
) -> GenerationResult:
    """Run a full build: load the source and index, write pages, save the index.

    Raises SourceConfigError before any index or article file is written
    when the source file cannot be parsed.
    """
    index_path = Path(index_path)
    ensure_dir(index_path.parent)
    ensure_dir(articles_dir)

    source = load_or_init_config(source_path)
    existing = load_existing_index(index_path)

    generator = ArticleGenerator(
        articles_dir,
        html_generator=html_generator,
        id_factory=id_factory,
        clock=clock,
    )
    result = generator.generate(source, existing)

    save_index(index_path, result.articles, ts=clock())
    click.echo(f"Wrote JSON: {index_path} articles= {len(result.articles)}")

    return result
