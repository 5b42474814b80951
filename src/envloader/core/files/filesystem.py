# src/envloader/core/files/filesystem.py
"""
Capacidade de acesso a arquivos do envloader.

Este módulo define o protocolo formal de filesystem consumido pelo core.
O core nunca acessa o disco diretamente: toda leitura, verificação de
existência e escrita passa por um objeto que satisfaz `FileSystem`.

Responsabilidades do protocolo:
    - verificar se um caminho existe
    - ler o conteúdo textual completo de um caminho
    - escrever conteúdo textual em um caminho (apenas templates)

Princípios fundamentais:
    - A capacidade é injetada explicitamente
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - Erros de I/O são propagados sem retry nem recuperação

Limites explícitos:
    - Não interpreta o conteúdo dos arquivos
    - Não resolve caminhos de busca

Este módulo existe para garantir desacoplamento
e testabilidade do pipeline sem tocar o disco.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable


PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    """
    Contrato mínimo de filesystem usado pelo core.

    Invariantes:
        - `read_text` só é chamado após `exists` retornar True
        - Falhas de leitura/escrita propagam a exceção original
    """

    def exists(self, path: PathLike) -> bool:
        ...

    def read_text(self, path: PathLike) -> str:
        ...

    def write_text(self, path: PathLike, content: str) -> None:
        ...


class LocalFileSystem:
    """Implementação padrão baseada em `pathlib`, sempre em UTF-8."""

    encoding = "utf-8"

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def read_text(self, path: PathLike) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: PathLike, content: str) -> None:
        Path(path).write_text(content, encoding=self.encoding)
