from __future__ import annotations
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MappingConfig:
    mapping_file: str = ".packages"
    base_location: str | None = None
    comment_marker: str = "generated by pkgmap"


def get_mapping_config() -> MappingConfig:
    return MappingConfig(
        mapping_file=os.getenv("PKGMAP_FILE", ".packages"),
        base_location=os.getenv("PKGMAP_BASE") or None,
        comment_marker=os.getenv("PKGMAP_MARKER", "generated by pkgmap"),
    )


@dataclass(frozen=True)
class APIConfig:
    api_key: str | None = None
    max_body_bytes: int = 1024 * 1024


def get_api_config() -> APIConfig:
    return APIConfig(
        api_key=os.getenv("API_KEY") or None,
        max_body_bytes=int(os.getenv("PKGMAP_MAX_BODY", str(1024 * 1024))),
    )
