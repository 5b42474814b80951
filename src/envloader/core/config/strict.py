"""Acesso estrito à configuração validada.

`StrictConfig` é um `Mapping` somente leitura que falha ruidosamente em
chaves desconhecidas, em vez de devolver um valor vazio.

Ordem de lookup (para `cfg["X"]` e `cfg.X`):
  1. nome final exato (chave do schema ou seu `rename`)
  2. alias declarado (chave original do schema ou `rename`)
  3. nome final ou alias sem distinção de maiúsculas
  4. `UndefinedEnvKeyError`

Chaves declaradas no schema mas sem valor (opcionais, sem default)
resolvem para `None`. Métodos de mapeamento (`keys`, `items`, `values`,
`get`, `to_dict`), `str`/`repr`/igualdade e atributos iniciados por `_`
nunca são tratados como chaves de configuração.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

from envloader.core.schema.options import EnvOption

from .errors import UndefinedEnvKeyError


class StrictConfig(Mapping[str, Any]):
    """Wrapper somente leitura sobre a Validated Config."""

    def __init__(
        self,
        values: Mapping[str, Any],
        schema: Optional[Mapping[str, EnvOption]] = None,
    ) -> None:
        aliases: Dict[str, str] = {}
        for key, option in (schema or {}).items():
            out = option.output_name(key)
            aliases[key] = out
            if option.rename:
                aliases[option.rename] = out
        object.__setattr__(self, "_values", dict(values))
        object.__setattr__(self, "_aliases", aliases)

    def resolve(self, key: str) -> str:
        """Retorna o nome final correspondente a `key` ou levanta `UndefinedEnvKeyError`."""
        if key in self._values:
            return key
        if key in self._aliases:
            return self._aliases[key]
        lower = key.lower()
        for out_key in self._values:
            if out_key.lower() == lower:
                return out_key
        for alias, out_key in self._aliases.items():
            if alias.lower() == lower:
                return out_key
        raise UndefinedEnvKeyError(key)

    def __getitem__(self, key: str) -> Any:
        if not isinstance(key, str):
            raise UndefinedEnvKeyError(repr(key))
        return self._values.get(self.resolve(key))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("StrictConfig is read-only")

    def __delattr__(self, name: str) -> None:
        raise TypeError("StrictConfig is read-only")

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            return self.resolve(key) in self._values
        except UndefinedEnvKeyError:
            return False

    def get(self, key: str, default: Any = None) -> Any:
        try:
            out = self.resolve(key)
        except UndefinedEnvKeyError:
            return default
        return self._values.get(out, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"StrictConfig({self._values!r})"

    __str__ = __repr__
