"""Opções do próprio loader (search paths, nomes de arquivo, merge, debug, fallback)."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidLoaderOptionsError


# chaves aceitas em `from_mapping` -> campo do dataclass
_ALIASES: Dict[str, str] = {
    "searchPaths": "search_paths",
    "fileNames": "file_names",
    "cascade": "merge",
    "envFallback": "env_fallback",
    "outputPath": "output_path",
    "baseDir": "base_dir",
}


def _as_str_tuple(name: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise InvalidLoaderOptionsError(f"{name} must be a list of strings", field=name)
    if not value:
        raise InvalidLoaderOptionsError(f"{name} must not be empty", field=name)
    return tuple(value)


@dataclass(frozen=True)
class LoaderOptions:
    """Superfície de configuração do loader.

    `merge=True` seleciona a política merge-all; `False` (default) é first-match.
    `base_dir=None` significa o diretório corrente no momento da carga.
    """

    search_paths: Tuple[str, ...] = ("./",)
    file_names: Tuple[str, ...] = (".env",)
    merge: bool = False
    debug: bool = False
    env_fallback: bool = True
    base_dir: Optional[str] = None
    output_path: str = ".env-dist"

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_paths", _as_str_tuple("search_paths", self.search_paths))
        object.__setattr__(self, "file_names", _as_str_tuple("file_names", self.file_names))
        for name in ("merge", "debug", "env_fallback"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidLoaderOptionsError(f"{name} must be boolean", field=name)
        if self.base_dir is not None:
            object.__setattr__(self, "base_dir", str(self.base_dir))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "LoaderOptions":
        """Constrói opções a partir de um dict (snake_case ou camelCase)."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidLoaderOptionsError(f"unknown loader option: {key}", field=key)
            if name in kwargs:
                raise InvalidLoaderOptionsError(f"loader option given twice: {name}", field=name)
            kwargs[name] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "LoaderOptions":
        if not overrides:
            return self
        merged: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _ALIASES.get(key, key)
            if name in merged:
                raise InvalidLoaderOptionsError(f"loader option given twice: {name}", field=name)
            merged[name] = value
        known = {f.name for f in fields(self)}
        unknown = set(merged) - known
        if unknown:
            raise InvalidLoaderOptionsError(
                f"unknown loader option: {', '.join(sorted(unknown))}"
            )
        return replace(self, **merged)
