# tests/core/schema/test_schema_loader.py
"""
Testes do carregador de schema declarado em arquivo (load_schema).

Os testes asseguram que:
- YAML e JSON produzem o mesmo schema
- o formato com `sections` preserva títulos e ordem de declaração
- defaults são checados contra o tipo declarado
- formatos e estruturas inválidas são rejeitados com erros tipados

Invariantes:
    - Nenhum schema parcial é retornado em caso de erro
    - Chaves duplicadas entre seções são erro estrutural
"""

import json
from pathlib import Path

import pytest

try:
    from envloader.core.schema.errors import (
        SchemaFileNotFoundError,
        SchemaParseError,
        SchemaPathMissingError,
        SchemaValidationError,
        UnsupportedSchemaFormatError,
    )
    from envloader.core.schema.loader import load_schema, validate_schema_document
    from envloader.core.schema.options import MISSING, OptionType
except Exception as e:  # noqa: BLE001
    load_schema = None
    validate_schema_document = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente quando o loader de schema não pode ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing schema loader modules. Implement:\n"
            "- src/envloader/core/schema/loader.py (load_schema, validate_schema_document)\n"
            "- src/envloader/core/schema/errors.py (SchemaError hierarchy)\n"
            f"Import error: {_IMPORT_ERR}"
        )


SECTIONS_YAML = """
sections:
  - title: Server
    description: HTTP listener
    options:
      PORT:
        type: number
        default: 3000
        description: Port number
      HOST:
        default: localhost
  - title: Features
    options:
      FEATURES:
        type: strings
        default: [alpha, beta]
      MODE:
        options: [production, staging]
        required: true
        name: mode
""".lstrip()


def test_load_yaml_sections(tmp_path: Path):
    """
    Verifica o carregamento do formato com seções.

    Invariantes:
        - Títulos e descrições de seção são preservados
        - `strings` é aceito como alias de `string-list`
        - `name` é aceito como sinônimo de `rename`
    """
    _require_imports()
    p = tmp_path / "schema.yaml"
    p.write_text(SECTIONS_YAML, encoding="utf-8")

    sections = load_schema(path=str(p))

    assert [s.title for s in sections] == ["Server", "Features"]
    assert sections[0].description == "HTTP listener"
    assert list(sections[0].options) == ["PORT", "HOST"]

    port = sections[0].options["PORT"]
    assert port.type is OptionType.NUMBER
    assert port.default == 3000

    features = sections[1].options["FEATURES"]
    assert features.type is OptionType.STRING_LIST
    assert features.default == ["alpha", "beta"]

    mode = sections[1].options["MODE"]
    assert mode.required is True
    assert mode.options == ("production", "staging")
    assert mode.rename == "mode"
    assert mode.default is MISSING


def test_load_flat_json(tmp_path: Path):
    _require_imports()
    p = tmp_path / "schema.json"
    p.write_text(json.dumps({"DEBUG": {"type": "boolean", "default": False}, "NAME": None}), encoding="utf-8")

    (section,) = load_schema(path=str(p))

    assert section.title == ""
    assert section.options["DEBUG"].default is False
    assert section.options["NAME"].type is OptionType.STRING


def test_missing_path():
    _require_imports()
    with pytest.raises(SchemaPathMissingError):
        load_schema(path=None)
    with pytest.raises(SchemaPathMissingError):
        load_schema(path="  ")


def test_file_not_found(tmp_path: Path):
    _require_imports()
    with pytest.raises(SchemaFileNotFoundError):
        load_schema(path=str(tmp_path / "nope.yaml"))


def test_unsupported_format(tmp_path: Path):
    _require_imports()
    p = tmp_path / "schema.toml"
    p.write_text("PORT = 1", encoding="utf-8")
    with pytest.raises(UnsupportedSchemaFormatError):
        load_schema(path=str(p))


def test_parse_errors(tmp_path: Path):
    _require_imports()
    bad = tmp_path / "bad.yaml"
    bad.write_text("PORT: [unclosed", encoding="utf-8")
    with pytest.raises(SchemaParseError):
        load_schema(path=str(bad))

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(SchemaParseError, match="empty"):
        load_schema(path=str(empty))


@pytest.mark.parametrize(
    "doc, fragment",
    [
        ([], "root must be a mapping"),
        ({"PORT": {"type": "float"}}, "PORT.type"),
        ({"PORT": {"type": "number", "default": "3000"}}, "PORT.default must be a number"),
        ({"DEBUG": {"type": "boolean", "default": "false"}}, "DEBUG.default must be boolean"),
        ({"LIST": {"type": "string-list", "default": "a,b"}}, "LIST.default must be a list"),
        ({"NAME": {"default": 1}}, "NAME.default must be a string"),
        ({"NAME": {"required": "yes"}}, "NAME.required must be boolean"),
        ({"NAME": {"options": []}}, "NAME.options must be a non-empty list"),
        ({"NAME": {"transform": "upper"}}, "unknown fields: transform"),
        ({"NAME": "string"}, "NAME must be a mapping"),
        ({"sections": []}, "sections must be a non-empty list"),
        (
            {"sections": [{"options": {"A": {}}}, {"options": {"A": {}}}]},
            "duplicate option key: A",
        ),
    ],
)
def test_structural_errors(doc, fragment):
    _require_imports()
    with pytest.raises(SchemaValidationError) as exc:
        validate_schema_document(doc)
    assert fragment in str(exc.value)
