# src/envloader/core/config/errors.py
"""
Exceções canônicas da camada de configuração do envloader.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a validação do ambiente carregado e o acesso estrito à configuração
validada.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de validação são acumulados e reportados de uma só vez
    - Mensagens de erro são claras e direcionadas ao usuário

Responsabilidades do módulo:
    - Expressar falhas de validação por chave (missing, conversão, valor inválido)
    - Expressar acesso a chaves não declaradas
    - Expressar opções inválidas do próprio loader

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Falhas de I/O nunca são encapsuladas aqui (propagam sem alteração)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não executa retries

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de configuração.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do envloader.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de validação e falhas de I/O

    Limites explícitos:
        - Não representa erro de leitura/escrita de arquivos
    """


class EnvValidationError(ConfigError):
    """
    Exceção levantada quando uma ou mais chaves do schema falham na validação.

    Todas as falhas por chave são acumuladas antes do lançamento, permitindo
    ao usuário corrigir todos os problemas em um único ciclo.

    Formato da mensagem:
        Env validation failed:
        Missing required: A, B
        Error parsing 'PORT': Not a number: abc
        Invalid 'MODE': invalid. Must be one of: production, development

    Decisões arquiteturais:
        - A linha de chaves obrigatórias ausentes, quando existe, é sempre a primeira
        - As demais linhas seguem a ordem de declaração do schema

    Invariantes:
        - `missing` e `errors` nunca estão ambos vazios
        - `lines` reproduz exatamente o corpo da mensagem
    """

    def __init__(self, missing: Sequence[str], errors: Sequence[str]):
        self.missing: List[str] = list(missing)
        self.errors: List[str] = list(errors)
        super().__init__("Env validation failed:\n" + "\n".join(self.lines))

    @property
    def lines(self) -> List[str]:
        head = [f"Missing required: {', '.join(self.missing)}"] if self.missing else []
        return head + self.errors


class UndefinedEnvKeyError(ConfigError, KeyError):
    """
    Exceção levantada pelo acesso estrito a uma chave não declarada.

    Herda de `KeyError` para que `Mapping.get` e `in` se comportem como
    em qualquer mapeamento.

    Invariantes:
        - `key` contém exatamente o nome solicitado
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Undefined environment key "{key}"')

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidLoaderOptionsError(ConfigError):
    """
    Exceção levantada quando as opções do loader são inválidas.

    Exemplos:
        - `search_paths` que não é uma lista de strings
        - chave desconhecida em `LoaderOptions.from_mapping`
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
