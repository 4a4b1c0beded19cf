"""
Entidades do Domínio de Clientes.

Entidades:
- Cliente: cliente identificado por id, com dados cadastrais mutáveis
"""

from datetime import date
from typing import Any, Hashable, Iterable, List

from src.core.shared.primitives import Entity
from .value_objects import Endereco


class Cliente(Entity):
    """
    Entidade de Domínio: Cliente.

    Apenas o id define a identidade. Nome, email, data de nascimento,
    telefone e endereços podem mudar sem afetar a igualdade.

    Os dados cadastrais não são validados aqui, ao contrário de
    Endereco.criar().

    Attributes:
        id: Identificador único (imutável)
        nome: Nome do cliente
        email: Endereço de email (valor opaco)
        data_nascimento: Data de nascimento
        telefone: Telefone de contato
        enderecos: Lista de endereços do cliente

    Example:
        cliente = Cliente(
            id=Cliente.novo_id(),
            nome="Maria Silva",
            email="maria@example.com",
            data_nascimento=date(1990, 5, 17),
            telefone="(11) 99999-0000",
            enderecos=[endereco],
        )
    """

    def __init__(
        self,
        id: Hashable,
        nome: str,
        email: Any,
        data_nascimento: date,
        telefone: str,
        enderecos: Iterable[Endereco],
    ):
        super().__init__(id)
        self.nome = nome
        self.email = email
        self.data_nascimento = data_nascimento
        self.telefone = telefone
        # Cópia própria: o cliente não compartilha a coleção recebida
        self.enderecos: List[Endereco] = list(enderecos)

    def __repr__(self) -> str:
        """Representação string para debugging."""
        return (
            f"Cliente("
            f"id={str(self.id)[:8]}..., "
            f"nome='{self.nome}', "
            f"enderecos={len(self.enderecos)}"
            f")"
        )
