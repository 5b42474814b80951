"""Erros canônicos do domínio de schema (envloader).

O schema declarado em arquivo é uma entrada crítica do startup.
Falhas de carregamento/validação devem produzir erros explícitos e estáveis.
"""


class SchemaError(Exception):
    """Erro base do domínio de schema."""


class SchemaPathMissingError(SchemaError):
    """Nenhum caminho de schema foi informado."""


class SchemaFileNotFoundError(SchemaError):
    """Arquivo de schema não existe no caminho informado."""


class UnsupportedSchemaFormatError(SchemaError):
    """Formato de schema não suportado (YAML/JSON)."""


class SchemaParseError(SchemaError):
    """Falha ao parsear YAML/JSON."""


class SchemaValidationError(SchemaError):
    """Schema não é estruturalmente válido."""
