"""Generate magazine-style HTML pages for articles."""

import html
from datetime import datetime
from typing import Optional

from .config import ARTICLE_SUBTITLE, SITE_NAME, SITE_TAGLINE
from .models import ArticleMeta, RecipeContent

DEFAULT_THUMB = "../images/logo.png"


class ArticleHTMLGenerator:
    """Render a single article page.

    Pages live in the articles directory and reference the shared site assets
    (stylesheet, logo, top-level pages) through ``../`` relative links.
    """

    def __init__(
        self,
        site_name: str = SITE_NAME,
        year: Optional[int] = None,
        escape_html: bool = False,
    ):
        self.site_name = site_name
        self.year = year if year is not None else datetime.now().year
        self.escape_html = escape_html
        self.page_template = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>{title} - {site_name}</title>
  <meta name="description" content="{description}">
  <link rel="stylesheet" href="../css/style.css">
</head>
<body>
  <header class="site-header">
    <a href="../index.html"><img src="../images/logo.png" alt="{site_name}" class="logo"></a>
    <nav class="main-nav">
      <a href="../index.html">Home</a>
      <a href="../about.html">About</a>
      <a href="../contact.html">Contact</a>
    </nav>
  </header>

  <main class="article-container">
    <h1>{title}</h1>
    <p class="article-meta">{subtitle}</p>
    <img src="{thumb}" alt="{title}" class="article-thumb">
    <div class="article-content">
      <p>{intro}</p>
      <h4>Ingredients</h4>
      <ul>
        {ingredients}
      </ul>
      <h4>Instructions</h4>
      <ol>
        {steps}
      </ol>
      <p style="color:#666;font-size:.95rem;margin-top:16px;">Canonical: {canonical}</p>
    </div>
  </main>

  <footer class="site-footer">
    &copy; {year} {site_name} — {tagline}
  </footer>
</body>
</html>"""

    def _text(self, value: str) -> str:
        return html.escape(value) if self.escape_html else value

    def _list_items(self, values: list[str]) -> str:
        return "\n".join(f"<li>{self._text(value)}</li>" for value in values)

    def render_article_page(self, meta: ArticleMeta, content: RecipeContent) -> str:
        """Generate the full HTML document for one article."""
        return self.page_template.format(
            title=self._text(meta.title),
            site_name=self.site_name,
            description=self._text(meta.excerpt or meta.title),
            subtitle=ARTICLE_SUBTITLE,
            thumb=self._text(meta.thumb or DEFAULT_THUMB),
            intro=self._text(content.intro),
            ingredients=self._list_items(content.ingredients),
            steps=self._list_items(content.steps),
            canonical=self._text(meta.canonical),
            year=self.year,
            tagline=SITE_TAGLINE,
        )
