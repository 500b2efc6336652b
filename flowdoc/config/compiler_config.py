"""Compiler configuration for Flow Document generation.

Settings come from compiler.yaml next to this module. Environment variables
take precedence over YAML config; built-in defaults apply when the file is
missing.

Usage:
    from flowdoc.config.compiler_config import get_settings

    settings = get_settings()
    settings.flow_json_version   # "7.3"
    settings.label_for("select")  # "Select an option"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).parent / "compiler.yaml"
_cached_config: Optional[Dict[str, Any]] = None

ENV_FLOW_JSON_VERSION = "FLOWDOC_FLOW_JSON_VERSION"
ENV_DATA_API_VERSION = "FLOWDOC_DATA_API_VERSION"
ENV_DEFAULT_CATEGORIES = "FLOWDOC_DEFAULT_CATEGORIES"


@dataclass(frozen=True)
class UploadDefaults:
    """Defaults written onto PhotoPicker and DocumentPicker nodes."""
    photo_source: str = "camera_gallery"
    max_file_size_kb: int = 25600
    min_uploaded: int = 0
    max_uploaded: int = 30
    allowed_mime_types: Tuple[str, ...] = ("application/pdf", "image/jpeg", "image/png")


@dataclass(frozen=True)
class CompilerSettings:
    """Resolved compiler settings (file values after env overrides)."""
    flow_json_version: str = "7.3"
    data_api_version: str = "3.0"
    default_categories: Tuple[str, ...] = ("LEAD_GENERATION",)
    footer_label: str = "Submit"
    labels: Dict[str, str] = field(default_factory=dict)
    uploads: UploadDefaults = field(default_factory=UploadDefaults)
    editor: Dict[str, str] = field(default_factory=dict)

    def label_for(self, editor_kind: str, fallback: str = "") -> str:
        return self.labels.get(editor_kind) or fallback

    def editor_text(self, key: str, fallback: str = "") -> str:
        return self.editor.get(key) or fallback


def _load_config() -> Dict[str, Any]:
    """Load compiler.yaml configuration, with caching."""
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    if _CONFIG_PATH.exists():
        with open(_CONFIG_PATH, encoding="utf-8") as f:
            _cached_config = yaml.safe_load(f) or {}
    else:
        _cached_config = _default_config()

    return _cached_config


def _default_config() -> Dict[str, Any]:
    """Return default configuration if compiler.yaml doesn't exist."""
    return {
        "version": "1.0",
        "flow_json": {
            "version": "7.3",
            "data_api_version": "3.0",
            "default_categories": ["LEAD_GENERATION"],
        },
        "footer": {"label": "Submit"},
        "labels": {},
        "uploads": {},
        "editor": {
            "screen_title": "New screen",
            "body_text": "Enter content",
        },
    }


def reset_config() -> None:
    """Reset cached config (for testing)."""
    global _cached_config
    _cached_config = None


def _parse_categories(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _upload_defaults(section: Dict[str, Any]) -> UploadDefaults:
    defaults = UploadDefaults()
    mime_types = section.get("allowed_mime_types")
    try:
        return UploadDefaults(
            photo_source=str(section.get("photo_source") or defaults.photo_source),
            max_file_size_kb=int(section.get("max_file_size_kb", defaults.max_file_size_kb)),
            min_uploaded=int(section.get("min_uploaded", defaults.min_uploaded)),
            max_uploaded=int(section.get("max_uploaded", defaults.max_uploaded)),
            allowed_mime_types=(
                tuple(str(m) for m in mime_types) if mime_types else defaults.allowed_mime_types
            ),
        )
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid uploads section in %s (%s). Using defaults.", _CONFIG_PATH, exc)
        return defaults


def get_flow_json_version() -> str:
    """Flow JSON version, respecting FLOWDOC_FLOW_JSON_VERSION."""
    value = os.environ.get(ENV_FLOW_JSON_VERSION)
    if value:
        return value
    return str(_load_config().get("flow_json", {}).get("version") or "7.3")


def get_data_api_version() -> str:
    """data_api_version, respecting FLOWDOC_DATA_API_VERSION."""
    value = os.environ.get(ENV_DATA_API_VERSION)
    if value:
        return value
    return str(_load_config().get("flow_json", {}).get("data_api_version") or "3.0")


def get_default_categories() -> Tuple[str, ...]:
    """Default flow categories, respecting FLOWDOC_DEFAULT_CATEGORIES."""
    value = os.environ.get(ENV_DEFAULT_CATEGORIES)
    if value:
        categories = _parse_categories(value)
        if categories:
            return categories
        logger.warning("%s is set but empty. Falling back to config.", ENV_DEFAULT_CATEGORIES)

    configured = _load_config().get("flow_json", {}).get("default_categories")
    if configured:
        return tuple(str(c) for c in configured)
    return ("LEAD_GENERATION",)


def get_settings() -> CompilerSettings:
    """Build the effective settings from config file and environment."""
    config = _load_config()
    return CompilerSettings(
        flow_json_version=get_flow_json_version(),
        data_api_version=get_data_api_version(),
        default_categories=get_default_categories(),
        footer_label=str((config.get("footer") or {}).get("label") or "Submit"),
        labels={str(k): str(v) for k, v in (config.get("labels") or {}).items()},
        uploads=_upload_defaults(config.get("uploads") or {}),
        editor={str(k): str(v) for k, v in (config.get("editor") or {}).items()},
    )
