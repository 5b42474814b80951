# src/envloader/__init__.py
"""
envloader — carregador de configuração `.env` orientado a schema.

Este pacote raiz define o namespace público do envloader: descoberta de
arquivos `.env`, merge com overrides do processo, validação tipada por
chave e geração de templates documentados.

Fluxo em alto nível:
    Schema → resolução de arquivos → parsing → merge → validação → config

Exemplo:
    >>> from envloader import EnvLoader, define_env_options
    >>> schema = define_env_options({
    ...     "PORT": {"type": "number", "required": True},
    ...     "DEBUG": {"type": "boolean", "default": False},
    ... })
    >>> config = EnvLoader.create_config(schema, search_paths=["./"])
"""

from .core.config import (  # noqa: F401
    ConfigError,
    EnvLoader,
    EnvValidationError,
    InvalidLoaderOptionsError,
    LoadContext,
    LoaderOptions,
    StrictConfig,
    UndefinedEnvKeyError,
    create_config,
    create_config_proxy,
)
from .core.files import FileSystem, LocalFileSystem, parse_env_text  # noqa: F401
from .core.schema import (  # noqa: F401
    MISSING,
    EnvOption,
    OptionSection,
    OptionType,
    SchemaError,
    define_env_options,
    load_schema,
)
from .core.template import render_template, write_template  # noqa: F401

__all__ = [
    "ConfigError",
    "EnvLoader",
    "EnvOption",
    "EnvValidationError",
    "FileSystem",
    "InvalidLoaderOptionsError",
    "LoadContext",
    "LoaderOptions",
    "LocalFileSystem",
    "MISSING",
    "OptionSection",
    "OptionType",
    "SchemaError",
    "StrictConfig",
    "UndefinedEnvKeyError",
    "create_config",
    "create_config_proxy",
    "define_env_options",
    "load_schema",
    "parse_env_text",
    "render_template",
    "write_template",
]

__version__ = "1.0.0"
