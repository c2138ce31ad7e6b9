"""Read and write the source file and the articles index."""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import click
from pydantic import ValidationError

from .config import DEFAULT_SOURCE
from .content import now_ms
from .models import ArticlesIndex, SourceConfig

PathLike = Union[str, Path]


class SourceConfigError(ValueError):
    """The source file exists but cannot be parsed or validated."""


def ensure_dir(path: PathLike) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_default_config(path: PathLike) -> Path:
    """Write the built-in default source file."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(DEFAULT_SOURCE, indent=2, ensure_ascii=False))
    return path


def load_or_init_config(path: PathLike) -> SourceConfig:
    """Load the source file, creating it with the default content if missing.

    Raises SourceConfigError when the file exists but is not valid JSON or
    does not describe a source config.
    """
    path = Path(path)

    if not path.exists():
        write_default_config(path)
        click.echo(f"Created default {path.name}")
        return SourceConfig(**DEFAULT_SOURCE)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SourceConfigError(str(e)) from e

    if not isinstance(data, dict):
        raise SourceConfigError("root must be a JSON object")

    try:
        return SourceConfig(**data)
    except ValidationError as e:
        raise SourceConfigError(str(e)) from e


def load_existing_index(path: PathLike) -> List[Any]:
    """Load the stored entries of a previous run as raw JSON values.

    Entries are returned exactly as stored so they are written back unchanged.
    A missing index, unreadable JSON or a missing `list` array yields [].
    """
    path = Path(path)
    if not path.exists():
        return []

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(f"⚠️  Ignoring unreadable index {path}: {e}", err=True)
        return []

    if not isinstance(data, dict) or not isinstance(data.get("list"), list):
        click.echo(f"⚠️  Ignoring index without a list: {path}", err=True)
        return []

    return list(data["list"])


def save_index(
    path: PathLike, articles: List[Any], ts: Optional[int] = None
) -> Path:
    """Overwrite the index file with the given entries."""
    path = Path(path)
    index = ArticlesIndex(ts=ts if ts is not None else now_ms(), articles=articles)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(index.to_json_dict(), indent=2, ensure_ascii=False))
    return path
