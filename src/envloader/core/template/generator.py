"""
src/envloader/core/template/generator.py

Gerador canônico de templates `.env` documentados (ex.: `.env-dist`).

Regras:
- O template é derivado EXCLUSIVAMENTE do schema.
- Mesmo schema => mesmo texto (ordem de declaração preservada).
- O resultado é lido de volta pelo mesmo parser de `.env`.

Formato por chave:

    # <descrição> [tipo] Possible values: a, b (required)
    CHAVE=<default>
    <linha em branco>

`[tipo]` só aparece para tipos diferentes de `string`. A linha de valor é
`CHAVE=` quando a chave é obrigatória ou não tem default.

Invariantes:
    - Cada chave ocupa exatamente uma linha de comentário e uma de valor
      (quebras de linha em descrições, títulos e `options` viram espaço)
    - Um default que o parser alteraria (ex.: `"hi"` entre aspas) é
      gravado com uma camada extra de aspas duplas

Limites explícitos:
    - Defaults com espaços nas bordas perdem esses espaços na leitura,
      pois o parser sempre faz trim do valor
    - Defaults com quebra de linha são rejeitados (`ValueError`)
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from envloader.core.files.filesystem import FileSystem, LocalFileSystem, PathLike
from envloader.core.files.parser import clean_value
from envloader.core.schema.options import (
    EnvOption,
    OptionSection,
    OptionType,
    SchemaLike,
    iter_sections,
    string_form,
)


logger = logging.getLogger(__name__)


def _one_line(text: str) -> str:
    return " ".join(part.strip() for part in text.splitlines() if part.strip())


def _comment_line(option: EnvOption) -> str:
    parts: List[str] = ["#"]
    if option.description:
        parts.append(f" {_one_line(option.description)}")
    if option.type is not OptionType.STRING:
        parts.append(f" [{option.type.value}]")
    if option.options:
        parts.append(f" Possible values: {', '.join(_one_line(o) for o in option.options)}")
    if option.required:
        parts.append(" (required)")
    return "".join(parts)


def _default_text(key: str, default: Any) -> str:
    text = string_form(default)
    if "\n" in text or "\r" in text:
        raise ValueError(f"default for '{key}' spans multiple lines and cannot be templated")
    if clean_value(text) != text:
        quoted = f'"{text}"'
        if clean_value(quoted) == text:
            return quoted
    return text


def _value_line(key: str, option: EnvOption) -> str:
    if option.required or not option.has_default or option.default is None:
        return f"{key}="
    return f"{key}={_default_text(key, option.default)}"


def _section_banner(section: OptionSection) -> List[str]:
    if not section.title:
        return []
    lines = [f"# === {_one_line(section.title)} ==="]
    if section.description:
        lines.append(f"# {_one_line(section.description)}")
    lines.append("")
    return lines


def render_template(schema: SchemaLike) -> str:
    """Gera o conteúdo completo do template a partir do schema.

    Raises:
        ValueError: se algum default contiver quebra de linha.
    """
    lines: List[str] = []
    for section in iter_sections(schema):
        lines.extend(_section_banner(section))
        for key, option in section.options.items():
            lines.append(_comment_line(option))
            lines.append(_value_line(key, option))
            lines.append("")
    return "\n".join(lines)


def write_template(
    schema: SchemaLike,
    path: PathLike,
    *,
    fs: Optional[FileSystem] = None,
) -> str:
    """Renderiza e grava o template em `path`; retorna o conteúdo gravado."""
    content = render_template(schema)
    (fs or LocalFileSystem()).write_text(path, content)
    logger.info("env template written to %s", path)
    return content
