# src/envloader/core/config/loader.py
"""
Loader canônico de configuração do envloader.

Este módulo orquestra o pipeline completo de carga executado uma única
vez no startup da aplicação:

    Schema → resolução de arquivos → parsing → merge → lookup → validação

A configuração efetiva é resolvida a partir de:
    - arquivos `.env` descobertos em `search_paths` x `file_names`
    - um mapa de overrides do processo (ex.: `os.environ`), opcional
    - defaults declarados no schema

Responsabilidades do módulo:
    - Aplicar a política de resolução (first-match ou merge-all)
    - Aplicar o fallback para overrides quando habilitado
    - Delegar conversão e validação a `validate_env`
    - Expor atalhos `create_config` e `create_config_proxy`

Princípios fundamentais:
    - Capacidades (filesystem, overrides) são injetadas explicitamente
    - Nenhum estado global é mantido entre cargas
    - Erros de validação são acumulados; erros de I/O são fatais

Invariantes:
    - Arquivos sempre têm precedência sobre overrides
    - Cada `load` produz um novo `LoadContext`
    - O resultado de `validate` é somente leitura

Limites explícitos:
    - Não faz parsing de argumentos de linha de comando
    - Não observa arquivos nem recarrega configuração
    - Não configura handlers de logging

Este módulo existe para garantir resolução previsível,
determinística e rastreável da configuração de startup.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional, Union

from envloader.core.files.filesystem import FileSystem, LocalFileSystem, PathLike
from envloader.core.files.resolver import resolve_env_files
from envloader.core.schema.options import EnvOption, SchemaLike, define_env_options
from envloader.core.template.generator import write_template

from .context import LoadContext
from .merge import lookup_schema_values, merge_env_files
from .options import LoaderOptions
from .strict import StrictConfig
from .validate import validate_env


logger = logging.getLogger(__name__)

OptionsLike = Union[LoaderOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike, overrides: Mapping[str, Any]) -> LoaderOptions:
    if isinstance(options, LoaderOptions):
        base = options
    else:
        base = LoaderOptions.from_mapping(options)
    return base.with_overrides(**overrides)


class EnvLoader:
    """
    Fachada do pipeline de carga de configuração.

    Args:
        options: `LoaderOptions`, um dict (snake_case ou camelCase) ou None.
        fs: capacidade de filesystem; default `LocalFileSystem`.
        env: mapa de overrides; default snapshot de `os.environ` no momento da carga.
        **overrides: campos de `LoaderOptions` aplicados sobre `options`.

    Decisões arquiteturais:
        - `env` é consultado apenas quando `env_fallback` está habilitado
        - Warnings de chave duplicada são sempre coletados em `context`
          e emitidos via logging apenas com `debug=True`

    Exemplo:
        >>> loader = EnvLoader(search_paths=["./", "../"], merge=True)
        >>> config = loader.validate(loader.load(schema), schema)
    """

    def __init__(
        self,
        options: OptionsLike = None,
        *,
        fs: Optional[FileSystem] = None,
        env: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> None:
        self.options = _coerce_options(options, overrides)
        self.fs: FileSystem = fs or LocalFileSystem()
        self.env = env
        self.context = LoadContext()

    # -----------------------------
    # Pipeline
    # -----------------------------
    def load_files(self) -> Dict[str, str]:
        """Resolve e combina os arquivos `.env` segundo a política configurada."""
        opts = self.options
        paths = resolve_env_files(
            opts.search_paths,
            opts.file_names,
            base_dir=opts.base_dir,
            merge=opts.merge,
            fs=self.fs,
        )
        self.context.log(
            stage="resolve",
            level="DEBUG",
            message="resolved env files",
            files=[str(p) for p in paths],
        )
        if opts.debug:
            logger.debug("Resolved env files: %s", [str(p) for p in paths])

        merged = merge_env_files(paths, fs=self.fs, context=self.context)

        if opts.debug and self.context.warnings:
            logger.warning("Duplicate keys in env files: %s", ", ".join(self.context.warnings))
        return merged

    def load(self, schema: SchemaLike) -> Dict[str, str]:
        """
        Produz o Merged Map (valores brutos) para as chaves do schema.

        Returns:
            Dict[str, str]: chave do schema -> valor bruto; chaves sem valor ficam ausentes.

        Raises:
            OSError: se a leitura de um arquivo existente falhar.
        """
        self.context = LoadContext()
        options = define_env_options(schema)
        file_values = self.load_files()

        overrides: Optional[Mapping[str, str]] = None
        if self.options.env_fallback:
            overrides = self.env if self.env is not None else dict(os.environ)

        out = lookup_schema_values(options, file_values, overrides)
        self.context.log(stage="lookup", level="DEBUG", message="loaded env", keys=sorted(out))
        if self.options.debug:
            logger.debug("Loaded env: %s", out)
        return out

    def validate(self, raw: Mapping[str, Optional[str]], schema: SchemaLike) -> Mapping[str, Any]:
        """Valida valores brutos contra o schema (ver `validate_env`)."""
        options = define_env_options(schema)
        result = validate_env(raw, options, debug=self.options.debug)
        self.context.log(stage="validate", level="DEBUG", message="validated env", keys=sorted(result))
        return result

    # -----------------------------
    # Atalhos
    # -----------------------------
    @classmethod
    def create_config(
        cls,
        schema: SchemaLike,
        options: OptionsLike = None,
        *,
        fs: Optional[FileSystem] = None,
        env: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> Mapping[str, Any]:
        """Carrega e valida em uma chamada; retorna a Validated Config."""
        loader = cls(options, fs=fs, env=env, **overrides)
        return loader.validate(loader.load(schema), schema)

    @classmethod
    def create_config_proxy(
        cls,
        schema: SchemaLike,
        options: OptionsLike = None,
        *,
        fs: Optional[FileSystem] = None,
        env: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> StrictConfig:
        """Como `create_config`, mas envolve o resultado em `StrictConfig`."""
        declared: Dict[str, EnvOption] = define_env_options(schema)
        validated = cls.create_config(declared, options, fs=fs, env=env, **overrides)
        return StrictConfig(validated, declared)

    @staticmethod
    def gen_template(
        schema: SchemaLike,
        path: Optional[PathLike] = None,
        *,
        fs: Optional[FileSystem] = None,
    ) -> str:
        """Grava o template documentado em `path` (default `.env-dist`)."""
        target = path if path is not None else LoaderOptions().output_path
        return write_template(schema, target, fs=fs)

    def write_template(self, schema: SchemaLike, path: Optional[PathLike] = None) -> str:
        """Grava o template usando o filesystem e `output_path` deste loader."""
        target = path if path is not None else os.path.join(
            self.options.base_dir or os.getcwd(), self.options.output_path
        )
        return write_template(schema, target, fs=self.fs)


def create_config(schema: SchemaLike, options: OptionsLike = None, **kwargs: Any) -> Mapping[str, Any]:
    return EnvLoader.create_config(schema, options, **kwargs)


def create_config_proxy(schema: SchemaLike, options: OptionsLike = None, **kwargs: Any) -> StrictConfig:
    return EnvLoader.create_config_proxy(schema, options, **kwargs)
