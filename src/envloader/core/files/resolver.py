"""Resolução de arquivos de ambiente candidatos.

Ordem de descoberta: o diretório de busca é o laço externo e o nome de
arquivo o laço interno. Para `search_paths=["./", "../"]` e
`file_names=[".env", ".env.local"]` a ordem é:

    ./.env, ./.env.local, ../.env, ../.env.local

Essa ordem define a precedência no modo merge-all (arquivos posteriores
sobrescrevem os anteriores).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .filesystem import FileSystem, LocalFileSystem, PathLike


def iter_candidates(
    search_paths: Sequence[str],
    file_names: Sequence[str],
    *,
    base_dir: Optional[PathLike] = None,
) -> Iterator[Path]:
    root = Path(base_dir) if base_dir is not None else Path.cwd()
    for search_path in search_paths:
        for file_name in file_names:
            yield root / search_path / file_name


def resolve_env_files(
    search_paths: Sequence[str],
    file_names: Sequence[str],
    *,
    base_dir: Optional[PathLike] = None,
    merge: bool = False,
    fs: Optional[FileSystem] = None,
) -> List[Path]:
    """Retorna os arquivos existentes na ordem de descoberta.

    Com `merge=False` (first-match) a varredura para no primeiro arquivo
    encontrado. Nenhum arquivo encontrado não é erro: retorna lista vazia.
    """
    fs = fs or LocalFileSystem()
    found: List[Path] = []
    for candidate in iter_candidates(search_paths, file_names, base_dir=base_dir):
        if not fs.exists(candidate):
            continue
        found.append(candidate)
        if not merge:
            break
    return found
