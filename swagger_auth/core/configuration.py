"""
Key/value configuration readers for documentation credentials.

Keys are colon-delimited hierarchical paths such as
``Swagger:Auth:v1-admin:Username``. Lookups are case-insensitive and always
hit the live backing store, so credentials changed at runtime apply to the
next request.
"""

import json
import logging
import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from swagger_auth.core.exceptions import SwaggerAuthConfigError

logger = logging.getLogger(__name__)

KEY_DELIMITER = ":"
ENV_DELIMITER = "__"


@runtime_checkable
class ConfigurationReader(Protocol):
    """Read-only access to hierarchical configuration values."""

    def get(self, key: str) -> str | None:
        """Return the value stored at ``key`` or ``None`` when absent."""
        ...


def _stringify(value: Any) -> str | None:
    if value is None or isinstance(value, Mapping):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class MappingConfigurationReader:
    """Reads from a nested mapping, e.g. a parsed ``appsettings.json``.

    Flat keys that already contain colons (``{"Swagger:Auth:x:Username": ...}``)
    are found as well. The mapping is referenced, not copied.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    @classmethod
    def from_json_file(cls, path: str | Path) -> "MappingConfigurationReader":
        """Load a JSON object from ``path``.

        Raises:
            SwaggerAuthConfigError: If the file is unreadable, not JSON, or
                not a JSON object.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SwaggerAuthConfigError(
                f"Cannot load credentials file {path}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise SwaggerAuthConfigError(f"Credentials file {path} must contain a JSON object")
        logger.info("Loaded documentation credentials from %s", path)
        return cls(data)

    def get(self, key: str) -> str | None:
        return _stringify(_lookup(self._data, key.split(KEY_DELIMITER)))


def _lookup(node: Any, parts: list[str]) -> Any:
    """Walk ``parts`` through nested mappings, matching keys case-insensitively.

    At each level a flat key spanning several remaining segments is tried too.
    """
    if not parts:
        return node
    if not isinstance(node, Mapping):
        return None

    for width in range(len(parts), 0, -1):
        wanted = KEY_DELIMITER.join(parts[:width]).casefold()
        for name, child in node.items():
            if isinstance(name, str) and name.casefold() == wanted:
                found = _lookup(child, parts[width:])
                if found is not None:
                    return found
    return None


class EnvironmentConfigurationReader:
    """Reads environment variables, using ``__`` in place of ``:``.

    ``Swagger:Auth:v1-admin:Username`` is looked up as
    ``{prefix}Swagger__Auth__v1-admin__Username``, ignoring case.
    """

    def __init__(self, prefix: str = "", environ: MutableMapping[str, str] | None = None) -> None:
        self.prefix = prefix
        self._environ = os.environ if environ is None else environ
        self._index: tuple[frozenset[str], dict[str, str]] = (frozenset(), {})

    def _variable_name(self, key: str) -> str:
        return self.prefix + key.replace(KEY_DELIMITER, ENV_DELIMITER)

    def get(self, key: str) -> str | None:
        name = self._variable_name(key)
        value = self._environ.get(name)
        if value is not None:
            return value

        actual = self._folded_names().get(name.casefold())
        if actual is None:
            return None
        return self._environ.get(actual)

    def _folded_names(self) -> dict[str, str]:
        """Case-folded variable name -> real name, rebuilt when names change."""
        names = frozenset(self._environ)
        indexed, folded = self._index
        if names != indexed:
            folded = {name.casefold(): name for name in names}
            self._index = (names, folded)
        return folded


class ChainedConfigurationReader:
    """Layers several readers; the last one holding a value wins."""

    def __init__(self, *readers: ConfigurationReader) -> None:
        self.readers = tuple(readers)

    def get(self, key: str) -> str | None:
        for reader in reversed(self.readers):
            value = reader.get(key)
            if value is not None:
                return value
        return None
