"""
Settings do Cadastro de Clientes.

Lê configurações de variáveis de ambiente, com suporte a arquivo .env.
"""

import logging.config
import os
from pathlib import Path
from typing import Dict, Optional
from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SRC_DIR = BASE_DIR / 'src'

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

DOMAIN_LOG_LEVEL = os.getenv('DOMAIN_LOG_LEVEL', 'DEBUG').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.core': {
            'handlers': ['console'],
            'level': DOMAIN_LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configure_logging(overrides: Optional[Dict[str, str]] = None) -> dict:
    """
    Aplica LOGGING via dictConfig.

    Args:
        overrides: Níveis por logger, ex: {"src.core": "WARNING"}.
            Loggers ainda não declarados são criados com o handler console.

    Returns:
        Dicionário efetivamente aplicado
    """
    config = {
        **LOGGING,
        'loggers': {name: dict(cfg) for name, cfg in LOGGING['loggers'].items()},
    }

    for name, level in (overrides or {}).items():
        logger_cfg = config['loggers'].setdefault(
            name,
            {'handlers': ['console'], 'propagate': False},
        )
        logger_cfg['level'] = level.upper()

    logging.config.dictConfig(config)
    return config
