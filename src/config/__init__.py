"""
Configuração do projeto.

Módulos:
- settings: variáveis de ambiente (.env) e configuração de logging
"""

from .settings import configure_logging

__all__ = ("configure_logging",)
