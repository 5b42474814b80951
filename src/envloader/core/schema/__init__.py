"""envloader — Schema (core).

Componentes canônicos para declaração de schema:
 - descritores de opção (`EnvOption`, `OptionType`, `OptionSection`)
 - normalização de declarações (`define_env_options`)
 - carregamento de schema a partir de YAML/JSON
"""

from .errors import (  # noqa: F401
    SchemaError,
    SchemaPathMissingError,
    SchemaFileNotFoundError,
    SchemaParseError,
    UnsupportedSchemaFormatError,
    SchemaValidationError,
)

from .loader import load_schema, validate_schema_document  # noqa: F401
from .options import (  # noqa: F401
    MISSING,
    EnvOption,
    OptionSection,
    OptionType,
    define_env_options,
    iter_sections,
)
