"""Parser de arquivos `.env` (linhas `chave = valor`).

Regras (v1):
  - linhas vazias e linhas iniciadas por `#` são ignoradas
  - chave: `[\\w.-]+`; valor: o restante da linha
  - uma camada de aspas casadas (simples ou duplas) é removida do valor
  - linhas que não casam com o padrão são ignoradas silenciosamente
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, Optional


_LINE_RE = re.compile(r"^([\w.-]+)\s*=\s*(.*)$")
_SPLIT_RE = re.compile(r"\r?\n")
_QUOTES = ("'", '"')


@dataclass(frozen=True)
class EnvEntry:
    key: str
    value: str
    line: int
    source: Optional[str] = None


def clean_value(raw: str) -> str:
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return value.strip()


def iter_env_entries(text: str, source: Optional[str] = None) -> Iterator[EnvEntry]:
    """Itera as entradas válidas do texto, com número de linha (base 1)."""
    for i, line in enumerate(_SPLIT_RE.split(text), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        m = _LINE_RE.match(stripped)
        if m is None:
            continue
        yield EnvEntry(key=m.group(1), value=clean_value(m.group(2)), line=i, source=source)


def parse_env_text(text: str) -> Dict[str, str]:
    """Produz o Raw Environment Map; a última ocorrência de uma chave vence."""
    return {entry.key: entry.value for entry in iter_env_entries(text)}
