"""Loader de schema declarado em arquivo (YAML/JSON).

Formatos aceitos para a raiz do documento:

    sections:
      - title: Server
        description: HTTP listener
        options:
          PORT: {type: number, default: 3000, description: Port number}

ou um mapa simples `chave -> opção` (vira uma única seção sem título).

Notas:
- YAML é preferencial, JSON é alternativo.
- O formato é inferido pela extensão do arquivo.
- Conversores customizados (`transform`/`validator`) não são declaráveis
  em arquivo; devem ser adicionados em código.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from .errors import (
    SchemaFileNotFoundError,
    SchemaParseError,
    SchemaPathMissingError,
    SchemaValidationError,
    UnsupportedSchemaFormatError,
)
from .options import EnvOption, OptionSection, OptionType


_FILE_OPTION_FIELDS = {"description", "type", "required", "default", "options", "rename", "name"}


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise SchemaValidationError(msg)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_default(key: str, otype: OptionType, default: Any) -> None:
    if otype is OptionType.NUMBER:
        _expect(_is_number(default), f"{key}.default must be a number")
    elif otype is OptionType.BOOLEAN:
        _expect(isinstance(default, bool), f"{key}.default must be boolean")
    elif otype is OptionType.STRING_LIST:
        _expect(
            isinstance(default, list) and all(isinstance(v, str) for v in default),
            f"{key}.default must be a list of strings",
        )
    else:
        _expect(isinstance(default, str), f"{key}.default must be a string")


def _validate_option(key: str, decl: Any) -> EnvOption:
    _expect(isinstance(key, str) and bool(key.strip()), "option keys must be non-empty strings")
    if decl is None:
        decl = {}
    _expect(isinstance(decl, dict), f"{key} must be a mapping")

    unknown = set(decl) - _FILE_OPTION_FIELDS
    _expect(not unknown, f"{key} has unknown fields: {', '.join(sorted(unknown))}")

    raw_type = decl.get("type", OptionType.STRING.value)
    try:
        otype = OptionType(raw_type)
    except ValueError:
        raise SchemaValidationError(
            f"{key}.type must be one of {[t.value for t in OptionType]}"
        ) from None

    required = decl.get("required", False)
    _expect(isinstance(required, bool), f"{key}.required must be boolean")

    description = decl.get("description", "")
    _expect(isinstance(description, str), f"{key}.description must be a string")

    options = decl.get("options")
    if options is not None:
        _expect(isinstance(options, list) and options, f"{key}.options must be a non-empty list")

    rename = decl.get("rename", decl.get("name"))
    if rename is not None:
        _expect(isinstance(rename, str) and bool(rename.strip()), f"{key}.rename must be a non-empty string")

    kwargs: Dict[str, Any] = {
        "description": description,
        "type": otype,
        "required": required,
        "rename": rename,
    }
    if options is not None:
        kwargs["options"] = tuple(str(o) for o in options)
    if "default" in decl:
        _check_default(key, otype, decl["default"])
        kwargs["default"] = decl["default"]

    return EnvOption(**kwargs)


def _validate_options_block(block: Any, where: str) -> Dict[str, EnvOption]:
    _expect(isinstance(block, dict), f"{where} must be a mapping")
    return {key: _validate_option(key, decl) for key, decl in block.items()}


def validate_schema_document(data: Any) -> List[OptionSection]:
    """Valida e materializa um documento de schema em seções."""
    _expect(isinstance(data, dict), "schema root must be a mapping/dict")

    if "sections" not in data:
        return [OptionSection(title="", options=_validate_options_block(data, "schema"))]

    sections = data["sections"]
    _expect(isinstance(sections, list) and sections, "sections must be a non-empty list")

    seen: Set[str] = set()
    out: List[OptionSection] = []
    for i, sec in enumerate(sections):
        _expect(isinstance(sec, dict), f"sections[{i}] must be a mapping")
        title = sec.get("title", "")
        _expect(isinstance(title, str), f"sections[{i}].title must be a string")
        description = sec.get("description", "")
        _expect(isinstance(description, str), f"sections[{i}].description must be a string")
        options = _validate_options_block(sec.get("options") or {}, f"sections[{i}].options")
        for key in options:
            _expect(key not in seen, f"duplicate option key: {key}")
            seen.add(key)
        out.append(OptionSection(title=title, options=options, description=description))
    return out


def load_schema(*, path: Optional[str]) -> List[OptionSection]:
    """Carrega um schema de opções a partir de YAML/JSON.

    Args:
        path: caminho para o arquivo de schema.

    Raises:
        SchemaPathMissingError: se path estiver ausente.
        SchemaFileNotFoundError: se arquivo não existir.
        UnsupportedSchemaFormatError: se extensão não suportada.
        SchemaParseError: se parsing falhar ou o arquivo estiver vazio.
        SchemaValidationError: se a estrutura for inválida.
    """
    if not path or not str(path).strip():
        raise SchemaPathMissingError("schema path is required")

    p = Path(path)
    if not p.exists():
        raise SchemaFileNotFoundError(f"schema file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise UnsupportedSchemaFormatError(f"unsupported schema format: {suffix}")
    except UnsupportedSchemaFormatError:
        raise
    except Exception as e:
        raise SchemaParseError(str(e) or "failed to parse schema") from e

    if data is None:
        # YAML vazio -> None
        raise SchemaParseError("schema file is empty")

    return validate_schema_document(data)
