# src/envloader/core/config/validate.py
"""
Validação e conversão canônica do ambiente carregado.

Este módulo transforma o Merged Map (strings brutas por chave do schema)
na Validated Config: um mapeamento imutável de nome final -> valor tipado.

Máquina de estados por chave (chaves são independentes):
    1. bruto ausente + default declarado → default como está
    2. bruto ausente → `required` gera erro; caso contrário a chave some
    3. bruto presente → `transform` > `validator` (pydantic) > tipo embutido
    4. `options` declarado → forma textual do valor convertido deve pertencer
    5. sucesso → armazenado sob `rename` ou a própria chave

Princípios fundamentais:
    - Todos os erros são acumulados antes da falha
    - Defaults nunca são convertidos nem checados contra `options`
    - Nenhuma chave fora do schema chega ao resultado

Invariantes:
    - A ordem do resultado segue a ordem de declaração do schema
    - Em caso de erro nenhuma configuração parcial é retornada
    - O resultado é somente leitura (`MappingProxyType`)

Limites explícitos:
    - Não lê arquivos nem o ambiente do processo
    - Não aplica lookup insensível a maiúsculas (responsabilidade do merge)

Este módulo existe para permitir que o chamador corrija
todos os problemas de configuração em um único ciclo.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from envloader.core.schema.options import EnvOption, string_form

from .convert import parse_value
from .errors import EnvValidationError


logger = logging.getLogger(__name__)


def _adapter_for(validator: Any) -> TypeAdapter:
    if isinstance(validator, TypeAdapter):
        return validator
    return TypeAdapter(validator)


def _pydantic_reason(err: ValidationError) -> str:
    return "; ".join(issue.get("msg", "") for issue in err.errors() if issue.get("msg"))


def convert_option(key: str, option: EnvOption, raw: str) -> Any:
    """Converte um valor bruto segundo a precedência transform > validator > type."""
    if option.transform is not None:
        return option.transform(raw)
    if option.validator is not None:
        return _adapter_for(option.validator).validate_python(raw)
    return parse_value(raw, option.type)


def validate_env(
    raw: Mapping[str, Optional[str]],
    schema: Mapping[str, EnvOption],
    *,
    debug: bool = False,
) -> Mapping[str, Any]:
    """
    Valida e converte cada chave do schema.

    Args:
        raw: valores brutos por chave do schema (ausente ou None = não encontrado).
        schema: mapa chave -> EnvOption.
        debug: registra a configuração validada em DEBUG.

    Returns:
        Mapping[str, Any]: Validated Config somente leitura.

    Raises:
        EnvValidationError: se alguma chave falhar; contém todas as falhas.
    """
    missing: List[str] = []
    errors: List[str] = []
    result: Dict[str, Any] = {}

    for key, option in schema.items():
        value = raw.get(key)

        if value is None:
            if option.has_default:
                result[option.output_name(key)] = option.default
            elif option.required:
                missing.append(key)
            continue

        try:
            parsed = convert_option(key, option, value)
        except ValidationError as err:
            reason = _pydantic_reason(err)
            errors.append(f"'{key}' failed validation{': ' + reason if reason else ''}")
            continue
        except Exception as err:  # noqa: BLE001
            errors.append(f"Error parsing '{key}': {err}")
            continue

        if option.options is not None and string_form(parsed) not in option.options:
            errors.append(
                f"Invalid '{key}': {string_form(parsed)}. Must be one of: {', '.join(option.options)}"
            )
            continue

        result[option.output_name(key)] = parsed

    if missing or errors:
        raise EnvValidationError(missing, errors)

    if debug:
        logger.debug("Validated env config: %s", result)

    return MappingProxyType(result)
