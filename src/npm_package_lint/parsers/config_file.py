"""Parse lint configuration documents from disk or over HTTP.

Files ending in ``.json`` are read as JSON. Any other file (``.yaml``, ``.yml``
or an extension-less rc file) is read as YAML, which also accepts JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from ..errors import ConfigLoadError


def _ensure_object(data: Any, source: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Configuration in {source} must be an object")
    return data


def parse(path: Path | str) -> dict[str, Any]:
    """Return the configuration object stored at ``path``.

    Raises:
        ConfigLoadError: If the file cannot be read as UTF-8 or contains invalid data.
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Failed to read configuration file: {exc}") from exc

    if config_path.suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(f"Invalid JSON in configuration file: {exc}") from exc
    else:
        import yaml

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"Invalid YAML in configuration file: {exc}") from exc

    return _ensure_object(data, str(config_path))


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, timeout=10)


def fetch(url: str) -> dict[str, Any]:
    """Return the JSON configuration object served at ``url``."""
    try:
        response = _http_get(url)
    except requests.RequestException as exc:
        raise ConfigLoadError(f"Failed to fetch configuration from {url}: {exc}") from exc

    if response.status_code != 200:
        raise ConfigLoadError(
            f"Unexpected status code {response.status_code} fetching configuration from {url}"
        )

    try:
        data = json.loads(response.text)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Invalid JSON in configuration from {url}: {exc}") from exc

    return _ensure_object(data, url)
