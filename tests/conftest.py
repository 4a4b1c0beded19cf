"""
Configurações globais do Pytest para o Cadastro de Clientes.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
import sys
from datetime import date
from pathlib import Path

# Raiz do projeto no path para imports "src.*"
project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return project_path


@pytest.fixture
def dados_endereco():
    """Argumentos válidos para Endereco.criar()."""
    return {
        "rua": "Rua A",
        "numero": 10,
        "complemento": "Apto 1",
        "bairro": "Centro",
        "cidade": "Cidade X",
        "estado": "UF",
        "cep": "00000-000",
    }


@pytest.fixture
def dados_cliente():
    """Dados cadastrais válidos de um cliente, sem id e endereços."""
    return {
        "nome": "Maria Silva",
        "email": "maria@example.com",
        "data_nascimento": date(1990, 5, 17),
        "telefone": "(11) 99999-0000",
    }


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
