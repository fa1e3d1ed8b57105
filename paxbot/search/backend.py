# Content file backend for search data.
# Reads a YAML or TOML document with `category` and `search_result` tables
# and turns it into an immutable Dataset.

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel, ValidationError

from ..errors import DatasetLoadError
from .types import Category, Dataset, Item

logger = logging.getLogger(__name__)


class CategoryRecord(BaseModel):
    name: str
    text: str = ""


class ItemRecord(BaseModel):
    name: str
    shortname: List[str] = []
    categories: List[str] = []
    text: str = ""
    ext_links: List[str] = []  # markdown [pretty](url) links are fine


class ContentFile(BaseModel):
    category: List[CategoryRecord] = []
    search_result: List[ItemRecord] = []

    def to_dataset(self) -> Dataset:
        return Dataset(
            categories=tuple(Category(name=c.name, description=c.text) for c in self.category),
            items=tuple(
                Item(
                    name=r.name,
                    short_names=tuple(r.shortname),
                    category_names=frozenset(r.categories),
                    description=r.text,
                    external_links=tuple(r.ext_links),
                )
                for r in self.search_result
            ),
        )


def _parse(path: Path, raw: str) -> Dict[str, Any]:
    if path.suffix == ".toml":
        return tomllib.loads(raw)
    return yaml.safe_load(raw) or {}


def load_dataset(path: Union[str, Path]) -> Dataset:
    """Read the content file at `path`. Any failure raises DatasetLoadError."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
        doc = _parse(path, raw)
        content = ContentFile.model_validate(doc)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("Failed to load content from %s: %s", path, e)
        raise DatasetLoadError(f"Failed to load {path}: {e}") from e

    dataset = content.to_dataset()
    logger.info(
        "Loaded %d categories and %d items from %s",
        len(dataset.categories), len(dataset.items), path,
    )
    return dataset
