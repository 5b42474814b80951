# src/envloader/core/config/context.py
"""
Contexto de uma execução de carga do envloader.

Este módulo define o `LoadContext`, a estrutura utilizada para registrar,
de forma explícita, o que aconteceu durante uma chamada de carga:

    - arquivos efetivamente lidos, na ordem de precedência
    - eventos estruturados por estágio (resolve, merge, lookup, validate)
    - warnings não fatais (chaves duplicadas)

Princípios fundamentais:
    - Isolamento por execução (cada carga possui seu próprio contexto)
    - Nenhum estado global compartilhado
    - Eventos são registrados mesmo sem configuração de logging

Invariantes:
    - Eventos sempre incluem `stage`, `level`, `message` e `timestamp`
    - Warnings preservam a ordem de detecção

Limites explícitos:
    - Não decide se warnings são fatais
    - Não configura handlers de logging

Este módulo existe para garantir rastreabilidade da carga
sem acoplar o core a um backend de saída.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class LoadContext:
    """
    Registro mutável de uma única carga.

    Decisões arquiteturais:
        - O loader cria um novo contexto a cada `load`
        - Warnings de chave duplicada são sempre coletados; a emissão
          via logging depende do modo debug do loader

    Invariantes:
        - `files` reflete exatamente a ordem de leitura
    """
    files: List[Path] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
