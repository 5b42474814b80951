# tests/conftest.py
"""
Fixtures compartilhados para testes do envloader.

Este módulo define fixtures reutilizáveis que fornecem:
- um filesystem em memória que satisfaz o protocolo `FileSystem`
- um escritor de arquivos `.env` em diretório temporário
- schemas mínimos e determinísticos

Decisões arquiteturais:
    - Testes de merge/validação preferem o filesystem em memória
    - Testes de integração com disco usam `tmp_path` (pytest)
    - Nenhuma fixture depende de `os.environ`: overrides são sempre injetados

Invariantes:
    - Fixtures retornam dados isolados por teste
    - Nenhuma fixture altera o diretório corrente

Este módulo existe como infraestrutura de teste e não
como validação funcional do loader.
"""

from pathlib import Path
from typing import Dict, List

import pytest


class MemoryFileSystem:
    """Filesystem em memória indexado por `Path`; registra leituras e escritas."""

    def __init__(self, files: Dict[str, str] = None):
        self.files: Dict[Path, str] = {Path(k): v for k, v in (files or {}).items()}
        self.reads: List[Path] = []
        self.writes: List[Path] = []

    def exists(self, path) -> bool:
        return Path(path) in self.files

    def read_text(self, path) -> str:
        self.reads.append(Path(path))
        return self.files[Path(path)]

    def write_text(self, path, content: str) -> None:
        self.writes.append(Path(path))
        self.files[Path(path)] = content


# =====================================================
# Filesystem fixtures
# =====================================================

@pytest.fixture
def memory_fs():
    """
    Fixture factory de filesystem em memória.

    Uso:
        fs = memory_fs({"/app/.env": "PORT=1"})

    Returns:
        Callable[[Dict[str, str]], MemoryFileSystem]
    """
    def _make(files: Dict[str, str] = None) -> MemoryFileSystem:
        return MemoryFileSystem(files)

    return _make


@pytest.fixture
def write_env(tmp_path: Path):
    """
    Fixture que grava arquivos `.env` reais em `tmp_path`.

    Uso:
        write_env("PORT=1")                    -> tmp_path/.env
        write_env("A=1", name=".env.local")    -> tmp_path/.env.local

    Returns:
        Callable[..., Path]: caminho do arquivo gravado.
    """
    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =====================================================
# Schema fixtures
# =====================================================

@pytest.fixture
def server_schema() -> dict:
    """
    Schema pequeno e representativo, como plain dicts.

    Cobre os quatro tipos embutidos, default, obrigatoriedade e options.
    """
    return {
        "PORT": {"description": "Port number", "type": "number", "required": True},
        "FEATURES": {"description": "Feature flags", "type": "string-list", "default": []},
        "DEBUG": {"description": "Debug toggle", "type": "boolean", "default": False},
        "ENVIRONMENT": {"options": ["production", "staging"], "default": "staging"},
        "OPTIONAL": {"default": "fallback"},
    }
