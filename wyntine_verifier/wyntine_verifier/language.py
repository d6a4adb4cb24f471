# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Localized message catalogs and the process-wide language selection.

Catalogs are YAML documents bundled in ``langs/``. Every catalog is checked
against ``schema/catalog.json`` and all catalogs must expose the same set of
message paths; both checks run at import time so a broken catalog stops the
process before any verification can run.

The active language is a single process-wide value. It is read once at the
start of each verification, so switching languages affects later calls only
(last write wins).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .config import verifier_config
from .exceptions import LanguageError
from .models.json_schema_loader import load_schema
from .utils.objects import access_key, key_paths
from .utils.strings import replace

logger = logging.getLogger(__name__)

LANG_DIR = Path(__file__).parent / "langs"
DEFAULT_LANG = "en"


def _freeze(data: Any) -> Any:
    if isinstance(data, Mapping):
        return MappingProxyType({key: _freeze(value) for key, value in data.items()})
    return data


class Catalog:
    """A loaded message catalog; its data is read-only at every level."""

    def __init__(self, name: str, data: Mapping[str, Any]):
        self.name = name
        self._data = _freeze(data)

    def __repr__(self) -> str:
        return f"Catalog({self.name!r})"

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def key_paths(self) -> List[str]:
        return key_paths(self._data)

    def get(self, key_path: str) -> str:
        """Return the raw template stored at *key_path*."""
        try:
            value = access_key(self._data, key_path)
        except (KeyError, TypeError) as exc:
            raise LanguageError(f"Language '{self.name}' does not have the path: {key_path}") from exc
        if not isinstance(value, str):
            raise LanguageError(f"Language '{self.name}' path '{key_path}' is not a message")
        return value

    def error(self, key_path: str, *values: Any) -> str:
        """Return the ``errors.<key_path>`` message with placeholders filled in."""
        return replace(self.get(f"errors.{key_path}"), values)


def _format_schema_error(exc: JsonSchemaValidationError) -> str:
    path = "/" + "/".join(str(p) for p in exc.absolute_path) if exc.absolute_path else "/"
    return f"{exc.message} (path={path})"


def load_catalog(file_path: Union[str, Path]) -> Catalog:
    """Load and schema-check a single catalog file."""
    path = Path(file_path)
    logger.debug(f"Loading message catalog: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LanguageError(f"Failed to parse catalog {path}: {exc}") from exc
    except OSError as exc:
        raise LanguageError(f"Failed to read catalog {path}: {exc}") from exc

    try:
        jsonschema.validate(instance=data, schema=load_schema("catalog"))
    except JsonSchemaValidationError as exc:
        raise LanguageError(f"Catalog {path} is invalid: {_format_schema_error(exc)}") from exc

    return Catalog(path.stem, data)


def load_catalogs(lang_dir: Union[str, Path] = LANG_DIR) -> Dict[str, Catalog]:
    catalogs = {}
    for file_path in sorted(Path(lang_dir).glob("*.yaml")):
        catalog = load_catalog(file_path)
        catalogs[catalog.name] = catalog

    if not catalogs:
        raise LanguageError(f"No message catalogs found in {lang_dir}")
    return catalogs


def check_catalogs(catalogs: Dict[str, Catalog]) -> None:
    """Ensure every catalog exposes exactly the same message paths.

    Raises:
        LanguageError: If a catalog has fewer messages than the others, or if
            catalogs of equal size disagree on message paths.
    """
    key_map = {name: catalog.key_paths() for name, catalog in catalogs.items()}
    max_length = max(len(keys) for keys in key_map.values())

    lower_lengths = [name for name, keys in key_map.items() if len(keys) < max_length]
    if lower_lengths:
        raise LanguageError(f"Given languages have less data: {', '.join(lower_lengths)}")

    key_sets = {name: set(keys) for name, keys in key_map.items()}
    different = [
        name
        for name, keys in key_sets.items()
        if any(other_keys != keys for other_name, other_keys in key_sets.items() if other_name != name)
    ]
    if different:
        raise LanguageError(f"Given languages have different data between them: {', '.join(different)}")


_CATALOGS: Dict[str, Catalog] = load_catalogs()
check_catalogs(_CATALOGS)


def _initial_lang() -> str:
    lang = verifier_config.default_lang
    if lang in _CATALOGS:
        return lang
    logger.warning(f"Default language '{lang}' is not available, falling back to '{DEFAULT_LANG}'")
    return DEFAULT_LANG


_active_lang: str = _initial_lang()


def available_langs() -> List[str]:
    return sorted(_CATALOGS)


def set_lang(new_lang: str) -> None:
    """Select the process-wide message catalog."""
    global _active_lang
    if new_lang not in _CATALOGS:
        raise LanguageError(f'Selected lang "{new_lang}" is not available.')
    logger.debug(f"Switching active language from '{_active_lang}' to '{new_lang}'")
    _active_lang = new_lang


def get_lang(selected_lang: Optional[str] = None) -> Catalog:
    """Return the catalog for *selected_lang*, or the active one."""
    name = _active_lang if selected_lang is None else selected_lang
    if name not in _CATALOGS:
        raise LanguageError(f'Selected lang "{name}" is not available.')
    return _CATALOGS[name]


def get_lang_string(key_path: str, selected_lang: Optional[str] = None) -> str:
    return get_lang(selected_lang).get(key_path)


def resolve_catalog(lang: Union[None, str, Catalog]) -> Catalog:
    """Turn a per-call language argument into a catalog."""
    if isinstance(lang, Catalog):
        return lang
    return get_lang(lang)
