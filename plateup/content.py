"""Slugs, ids, timestamps and the placeholder recipe body."""

import random
import re
import string
import time

from .models import RecipeContent

BASE36_DIGITS = string.digits + string.ascii_lowercase

# ECMAScript \s, so slugs match the ones built by the site's JavaScript
WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = re.escape(WHITESPACE)

PLACEHOLDER_INGREDIENTS = [
    "1 cup rice or pasta (or as needed)",
    "200g protein (chicken, tuna, beans)",
    "1 tbsp olive oil",
    "1 garlic clove, minced",
    "Salt and pepper to taste",
    "Optional: herbs, lemon, chili flakes",
]

PLACEHOLDER_STEPS = [
    "Prepare ingredients and season the protein.",
    "Heat oil in a pan, sauté garlic until fragrant.",
    "Add protein and cook until done.",
    "Add rice/pasta and combine, adjust seasoning.",
    "Serve hot with a lemon wedge or fresh herbs.",
]


def slugify(title: str) -> str:
    """Turn a recipe title into a lowercase, hyphen-separated slug.

    Only ASCII letters, digits, underscores, whitespace and hyphens survive.
    Different titles can produce the same slug.
    """
    slug = str(title).lower()
    slug = re.sub(f"[^A-Za-z0-9_{_WS}-]", "", slug)
    slug = slug.strip(WHITESPACE)
    slug = re.sub(f"[{_WS}]+", "-", slug)
    return re.sub(r"-+", "-", slug)


def build_placeholder_content(title: str) -> RecipeContent:
    """Build the generic recipe body used for every article."""
    intro = (
        f"{title} is a simple, budget-friendly recipe you'll love. "
        "Quick to prepare and packed with flavor."
    )
    return RecipeContent(
        intro=intro,
        ingredients=list(PLACEHOLDER_INGREDIENTS),
        steps=list(PLACEHOLDER_STEPS),
    )


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def make_article_id() -> str:
    """Base-36 timestamp followed by four random base-36 characters."""
    suffix = "".join(random.choices(BASE36_DIGITS, k=4))
    return to_base36(now_ms()) + suffix
