"""
Central configuration for the PlateUp article generator.

Paths default to locations under the project root. The CLI can override
each of them with an option or environment variable.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SOURCE_FILE = PROJECT_ROOT / "data" / "source.json"
OUTPUT_JSON = PROJECT_ROOT / "public" / "data" / "articles.json"
ARTICLES_DIR = PROJECT_ROOT / "public" / "articles"

# Relative path stored in each index record
ARTICLES_URL_PREFIX = "articles"

# =============================================================================
# SITE SETTINGS
# =============================================================================

SITE_NAME = "PlateUp.pro"
SITE_TAGLINE = "Budget Recipes"
ARTICLE_SUBTITLE = "Budget • Easy • Quick"

EXCERPT_LENGTH = 140
DEFAULT_CATEGORY = "General"

# Written to SOURCE_FILE when it does not exist yet
DEFAULT_SOURCE = {
    "domain": "https://plateup.pro",
    "categories": [
        {
            "name": "Budget Cooking",
            "items": [
                "Cheap Chicken Rice",
                "Beans Pasta",
                "Eggs on Toast",
                "Budget Chili",
                "Tuna Wrap",
            ],
        }
    ],
}
