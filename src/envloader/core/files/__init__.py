"""envloader — Files (core).

Descoberta e parsing de arquivos `.env`:
 - capacidade de filesystem injetável
 - resolução de candidatos (first-match / merge-all)
 - parsing linha a linha em Raw Environment Map
"""

from .filesystem import FileSystem, LocalFileSystem  # noqa: F401
from .parser import EnvEntry, iter_env_entries, parse_env_text  # noqa: F401
from .resolver import iter_candidates, resolve_env_files  # noqa: F401
