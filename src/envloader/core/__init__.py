# src/envloader/core/__init__.py
"""
Core do envloader.

Este pacote reúne a implementação canônica do pipeline de carga de
configuração de startup, independente de CLI ou de framework de aplicação.

Componentes principais:
    - schema   → descritores de opção e schemas declarados em YAML/JSON
    - files    → capacidade de filesystem, resolução e parsing de `.env`
    - config   → merge, validação, acesso estrito e fachada `EnvLoader`
    - template → geração de templates `.env` documentados

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Capacidades externas (disco, ambiente do processo) são injetadas

Limites explícitos:
    - Não acessa rede
    - Não gerencia segredos
    - Não observa arquivos em runtime
"""
