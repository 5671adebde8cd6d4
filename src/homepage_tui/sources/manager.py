from __future__ import annotations

from typing import Any, Dict, Type

from .base import ContentSource
from .json_file import JSONFileSource

AVAILABLE_SOURCES: Dict[str, Type[ContentSource]] = {
    "json": JSONFileSource,
}


def get_source(config: Dict[str, Any]) -> ContentSource:
    source_name = config.get("source", "json")
    source_config = config.get("sources", {}).get(source_name, {})
    source_class = AVAILABLE_SOURCES.get(source_name)
    if not source_class:
        raise ValueError(f"Unknown source: {source_name}")
    return source_class(source_config)
