# src/envloader/core/config/__init__.py

"""
Camada de configuração do envloader.

Este pacote contém as estruturas e utilitários responsáveis por mesclar,
validar e expor a configuração de startup de uma aplicação.

A configuração no envloader é:
    - declarativa (schema de `EnvOption`)
    - determinística
    - validada integralmente antes de ser entregue

Responsabilidades do pacote:
    - Merge de arquivos `.env` (first-match ou merge-all)
    - Fallback para overrides do processo
    - Conversão e validação por chave, com acúmulo de erros
    - Acesso estrito opcional (`StrictConfig`)

Princípios fundamentais:
    - Arquivos têm precedência sobre overrides
    - Nenhuma heurística implícita de normalização além de `str.lower`
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - A configuração final é um mapeamento somente leitura
    - Nenhuma configuração parcial é entregue em caso de erro

Limites explícitos:
    - Não faz parsing de CLI
    - Não recarrega configuração em runtime
"""

from .context import LoadContext  # noqa: F401
from .errors import (  # noqa: F401
    ConfigError,
    EnvValidationError,
    InvalidLoaderOptionsError,
    UndefinedEnvKeyError,
)
from .loader import EnvLoader, create_config, create_config_proxy  # noqa: F401
from .merge import lookup_schema_values, merge_env_files, normalize_key  # noqa: F401
from .options import LoaderOptions  # noqa: F401
from .strict import StrictConfig  # noqa: F401
from .validate import validate_env  # noqa: F401
