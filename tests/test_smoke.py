# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do envloader.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote pode ser importado sem falhas estruturais
- o namespace público exporta exatamente o que declara

Limites explícitos:
    - Não testar lógica de carga ou validação
    - Não acumular asserts funcionais
"""

import envloader


def test_smoke():
    """
    Smoke test mínimo do pacote.

    Invariantes:
        - Todo nome em `__all__` existe no pacote raiz
        - `__version__` está definido
    """
    assert envloader.__version__
    for name in envloader.__all__:
        assert hasattr(envloader, name), name
