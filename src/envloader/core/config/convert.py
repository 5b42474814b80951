"""Conversão de valores brutos (string) para o tipo declarado.

Regras (v1):
  - number: literal decimal ASCII (sinal, ponto e expoente opcionais);
    inteiro quando o literal é inteiro, float caso contrário; vazio,
    NaN, infinito e formas como `1_000` são erro de conversão
  - boolean: true/1/yes/on -> True, false/0/no/off -> False (sem
    distinção de maiúsculas); qualquer outro texto não vazio -> True;
    vazio -> False
  - string-list: split por vírgula com trim por elemento (segmentos
    vazios são mantidos)
  - string: inalterado
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Union

from envloader.core.schema.options import OptionType


TRUTHY = frozenset({"true", "1", "yes", "on"})
FALSY = frozenset({"false", "0", "no", "off"})

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

Number = Union[int, float]


class ConversionError(ValueError):
    """Valor bruto não pode ser convertido para o tipo declarado."""


def parse_number(value: str) -> Number:
    s = value.strip()
    if _INT_RE.match(s):
        return int(s)
    if not _DECIMAL_RE.match(s):
        raise ConversionError(f"Not a number: {value}")
    n = float(s)
    if not math.isfinite(n):
        raise ConversionError(f"Not a number: {value}")
    return n


def parse_boolean(value: str) -> bool:
    lc = value.lower()
    if lc in TRUTHY:
        return True
    if lc in FALSY:
        return False
    # fallback permissivo: texto desconhecido não vazio é verdadeiro
    return bool(value)


def parse_string_list(value: str) -> List[str]:
    return [part.strip() for part in value.split(",")]


def parse_value(value: str, otype: OptionType = OptionType.STRING) -> Any:
    """Aplica a conversão embutida correspondente a `otype`."""
    if otype is OptionType.NUMBER:
        return parse_number(value)
    if otype is OptionType.BOOLEAN:
        return parse_boolean(value)
    if otype is OptionType.STRING_LIST:
        return parse_string_list(value)
    if otype is OptionType.STRING:
        return value
    raise ConversionError(f"unsupported option type: {otype!r}")
