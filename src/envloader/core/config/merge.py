# src/envloader/core/config/merge.py
"""
Utilitário canônico de merge de arquivos de ambiente.

Este módulo implementa a política oficial de merge utilizada pelo
envloader para resolver o Merged Map a partir dos arquivos descobertos
e, opcionalmente, do mapa de overrides do processo.

Política de merge (v1):
    - arquivos são lidos na ordem de descoberta
    - chave repetida → o valor posterior sobrescreve o anterior
    - identidade de chave nos arquivos é sensível a maiúsculas
    - lookup por chave do schema é insensível a maiúsculas
    - overrides só são consultados para chaves ausentes nos arquivos

Princípios fundamentais:
    - O merge é determinístico e não muta os inputs
    - Sobrescritas são registradas como warnings, nunca como erro
    - Não existem heurísticas implícitas de normalização

Invariantes:
    - A normalização de chave é `str.lower` (sem remoção de underscores)
    - Entre candidatos que normalizam para a mesma chave, vence o primeiro
    - Chaves não declaradas no schema nunca chegam ao resultado do lookup

Limites explícitos:
    - Não converte tipos
    - Não aplica defaults
    - Não valida obrigatoriedade

Este módulo existe para garantir previsibilidade
e rastreabilidade na precedência entre fontes de configuração.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

from envloader.core.files.filesystem import FileSystem
from envloader.core.files.parser import EnvEntry, iter_env_entries
from envloader.core.schema.options import EnvOption

from .context import LoadContext


logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    return key.lower()


def _describe_duplicate(key: str, first: EnvEntry, second: EnvEntry) -> str:
    if first.source == second.source:
        return f"{key} (lines {first.line} and {second.line})"
    return f"{key} ({first.source} line {first.line} and {second.source} line {second.line})"


def merge_env_files(
    paths: Iterable[Path],
    *,
    fs: FileSystem,
    context: Optional[LoadContext] = None,
) -> Dict[str, str]:
    """
    Lê e combina os arquivos de ambiente em um único Raw Environment Map.

    Política:
        - cada caminho é lido integralmente via `fs.read_text`
        - entradas posteriores sobrescrevem anteriores para a mesma chave
        - cada sobrescrita gera um warning de chave duplicada no contexto

    Args:
        paths: caminhos já resolvidos, na ordem de precedência.
        fs: capacidade de filesystem.
        context: contexto opcional para registro de arquivos e warnings.

    Returns:
        Dict[str, str]: mapa combinado com as chaves como escritas.

    Raises:
        OSError: falhas de leitura são propagadas sem alteração.
    """
    merged: Dict[str, str] = {}
    seen: Dict[str, EnvEntry] = {}

    for path in paths:
        text = fs.read_text(path)
        if context is not None:
            context.files.append(Path(path))
            context.log(stage="merge", level="DEBUG", message="read env file", path=str(path))

        for entry in iter_env_entries(text, source=str(path)):
            previous = seen.get(entry.key)
            if previous is not None and context is not None:
                context.add_warning(_describe_duplicate(entry.key, previous, entry))
            seen[entry.key] = entry
            merged[entry.key] = entry.value

    return merged


def _index_by_normalized(values: Mapping[str, Optional[str]]) -> Dict[str, Tuple[str, Optional[str]]]:
    index: Dict[str, Tuple[str, Optional[str]]] = {}
    for key, value in values.items():
        index.setdefault(normalize_key(key), (key, value))
    return index


def lookup_schema_values(
    schema: Mapping[str, EnvOption],
    file_values: Mapping[str, str],
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> Dict[str, str]:
    """
    Resolve o valor bruto de cada chave do schema.

    Ordem de resolução por chave:
        1. lookup insensível a maiúsculas nos valores de arquivo
        2. lookup insensível a maiúsculas em `overrides` (quando não é None)
        3. ausente (defaults e obrigatoriedade ficam para o validador)

    Overrides com valor `None` são tratados como ausentes.
    """
    from_files = _index_by_normalized(file_values)
    from_overrides = _index_by_normalized(overrides) if overrides is not None else {}

    out: Dict[str, str] = {}
    for key in schema:
        norm = normalize_key(key)
        hit = from_files.get(norm)
        if hit is not None:
            out[key] = hit[1]  # type: ignore[assignment]
            continue
        hit = from_overrides.get(norm)
        if hit is not None and hit[1] is not None:
            out[key] = hit[1]
            logger.debug("key %s resolved from overrides (%s)", key, hit[0])
    return out
