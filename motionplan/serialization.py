"""Reading and writing YAML documents."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml


class DeserializationError(ValueError):
    """Raised when a YAML file cannot be parsed."""


class Serializer:
    """Collects a mapping and writes it as a YAML document to ``filepath``.

    ``mode`` is the file open mode: ``"w"`` to overwrite, ``"a"`` to append.
    """

    def __init__(self, filepath: str | os.PathLike[str], mode: str = "w") -> None:
        self.filepath = Path(filepath)
        self.mode = mode
        self._document: dict[str, Any] = {}

    def get(self) -> dict[str, Any]:
        """The mapping to fill before calling ``done``."""
        return self._document

    def done(self) -> None:
        """Write the mapping to the file, creating parent directories as needed."""
        parent = self.filepath.parent
        if str(parent) and not parent.exists():
            parent.mkdir(parents=True, exist_ok=True)
        text = yaml.safe_dump(self._document, default_flow_style=False, sort_keys=False)
        with open(self.filepath, self.mode, encoding="utf-8") as fout:
            fout.write(text)


class Deserializer:
    """Holds a parsed YAML node, loaded from a file or given directly.

    A deserializer built with neither is invalid and evaluates as false.
    """

    def __init__(self, filepath: str | os.PathLike[str] | None = None, *, node: Any = None) -> None:
        self._valid = filepath is not None or node is not None
        self._node = node
        if filepath is not None:
            with open(filepath, encoding="utf-8") as fin:
                try:
                    self._node = yaml.safe_load(fin)
                except yaml.YAMLError as exc:
                    raise DeserializationError(f"Failed to load file {filepath} ({exc})") from exc

    def get(self) -> Any:
        """The parsed node."""
        return self._node

    def __bool__(self) -> bool:
        return self._valid