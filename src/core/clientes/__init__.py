"""
Domínio de Clientes - Cadastro de Clientes.

Contém o modelo de domínio do cliente:
- Entidades (Cliente)
- Value Objects (Endereco)
- DTOs (saída para camadas externas)

Características do Domínio:
- Cliente comparado apenas pelo id
- Endereco imutável, comparado por valor
- Endereco só existe se for válido
"""

from .value_objects import Endereco
from .entities import Cliente
from .dtos import EnderecoOutputDTO, ClienteOutputDTO

__all__ = [
    # Value Objects
    "Endereco",
    # Entities
    "Cliente",
    # DTOs
    "EnderecoOutputDTO",
    "ClienteOutputDTO",
]
