# src/envloader/core/schema/options.py
"""
Descritores canônicos de opções de configuração do envloader.

Este módulo define o Option Descriptor (`EnvOption`), a enumeração de
tipos suportados (`OptionType`) e o agrupamento por seções
(`OptionSection`) utilizado na geração de templates.

Um schema no envloader é simplesmente um mapa ordenado
`nome da chave -> EnvOption`, declarado uma única vez no startup.

Princípios fundamentais:
    - O schema é declarativo e imutável
    - Cada chave possui exatamente um tipo (`OptionType`)
    - Conversão customizada tem precedência sobre conversão embutida

Invariantes:
    - `EnvOption` é frozen (nenhuma mutação após a declaração)
    - A ordem de declaração das chaves é preservada
    - `default` ausente é representado pelo sentinel `MISSING`

Limites explícitos:
    - Não lê arquivos
    - Não converte valores
    - Não valida o ambiente carregado

Este módulo existe para dar forma explícita e tipada ao schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union


class _Missing:
    """Sentinel para `default` não declarado (None é um default válido)."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class OptionType(str, Enum):
    """
    Tipos embutidos de conversão de valores brutos.

    Os valores são strings para permitir declaração em YAML/JSON e
    anotação legível nos templates gerados.

    Tipos definidos:
        - STRING: valor inalterado (default)
        - NUMBER: número decimal (int quando inteiro, float caso contrário)
        - BOOLEAN: conjuntos truthy/falsy com fallback permissivo
        - STRING_LIST: lista separada por vírgulas

    `strings` é aceito como alias de `string-list`.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string-list"

    @classmethod
    def _missing_(cls, value: object) -> Optional["OptionType"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "strings":
                return cls.STRING_LIST
            for member in cls:
                if member.value == lowered:
                    return member
        return None


@dataclass(frozen=True)
class EnvOption:
    """
    Descritor declarativo de uma chave de configuração.

    Campos:
        - description: texto de documentação (usado apenas no template)
        - type: tipo embutido de conversão (`OptionType`)
        - required: ausência sem default é erro
        - default: valor usado quando nenhum valor bruto é encontrado
        - options: representações finais permitidas (string)
        - rename: nome alternativo da chave no resultado
        - transform: conversor customizado `str -> Any`
        - validator: `pydantic.TypeAdapter` ou anotação de tipo aceita por ele

    Decisões arquiteturais:
        - Defaults nunca são convertidos (o chamador fornece o tipo correto)
        - `transform` > `validator` > `type` na precedência de conversão

    Invariantes:
        - Instâncias são imutáveis
        - `options`, quando presente, é sempre uma tupla de strings
    """
    description: str = ""
    type: OptionType = OptionType.STRING
    required: bool = False
    default: Any = MISSING
    options: Optional[Tuple[str, ...]] = None
    rename: Optional[str] = None
    transform: Optional[Callable[[str], Any]] = field(default=None, compare=False)
    validator: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.type, OptionType):
            object.__setattr__(self, "type", OptionType(self.type))
        if self.options is not None and not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(str(o) for o in self.options))

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def output_name(self, key: str) -> str:
        return self.rename or key


@dataclass(frozen=True)
class OptionSection:
    """Grupo nomeado de opções, usado para formatar templates."""

    title: str
    options: Dict[str, EnvOption]
    description: str = ""


_OPTION_FIELDS = {
    "description",
    "type",
    "required",
    "default",
    "options",
    "rename",
    "name",
    "transform",
    "validator",
}

OptionLike = Union[EnvOption, Mapping[str, Any]]
SchemaLike = Union[Mapping[str, OptionLike], Sequence[OptionSection]]


def option_from_mapping(key: str, raw: Mapping[str, Any]) -> EnvOption:
    """Materializa um `EnvOption` a partir de um dict simples.

    `name` é aceito como sinônimo de `rename`.
    """
    unknown = set(raw) - _OPTION_FIELDS
    if unknown:
        raise ValueError(f"unknown fields for option '{key}': {', '.join(sorted(unknown))}")

    kwargs: Dict[str, Any] = {k: v for k, v in raw.items() if k != "name"}
    if "name" in raw and "rename" not in raw:
        kwargs["rename"] = raw["name"]
    if kwargs.get("type") is None:
        kwargs.pop("type", None)
    return EnvOption(**kwargs)


def define_env_options(schema: SchemaLike) -> Dict[str, EnvOption]:
    """
    Normaliza uma declaração de schema em `Dict[str, EnvOption]`.

    Aceita:
        - mapa `chave -> EnvOption`
        - mapa `chave -> dict` (campos de `EnvOption`; `name` = `rename`)
        - sequência de `OptionSection` (achatada na ordem declarada)

    Raises:
        ValueError: para chave duplicada entre seções ou campos desconhecidos.
        TypeError: para entradas que não são `EnvOption` nem mapeamentos.
    """
    if isinstance(schema, Mapping):
        return {key: _coerce_option(key, opt) for key, opt in schema.items()}

    out: Dict[str, EnvOption] = {}
    for section in schema:
        for key, opt in section.options.items():
            if key in out:
                raise ValueError(f"duplicate option '{key}' in section '{section.title}'")
            out[key] = _coerce_option(key, opt)
    return out


def iter_sections(schema: SchemaLike) -> Iterable[OptionSection]:
    """Retorna o schema como seções; um mapa simples vira uma seção sem título."""
    if isinstance(schema, Mapping):
        return [OptionSection(title="", options=define_env_options(schema))]
    return [
        OptionSection(
            title=section.title,
            options=define_env_options(section.options),
            description=section.description,
        )
        for section in schema
    ]


def string_form(value: Any) -> str:
    """Representação textual final de um valor (checagem de `options` e templates)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(string_form(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _coerce_option(key: str, opt: Any) -> EnvOption:
    if isinstance(opt, EnvOption):
        return opt
    if isinstance(opt, Mapping):
        return option_from_mapping(key, opt)
    raise TypeError(f"option '{key}' must be EnvOption or mapping, got {type(opt).__name__}")
