"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

Estruturas simples para levar dados de Cliente e Endereco
para camadas externas sem expor as entidades.
"""

from dataclasses import dataclass, field
from typing import Optional, List

from .entities import Cliente
from .value_objects import Endereco


@dataclass(frozen=True)
class EnderecoOutputDTO:
    """DTO de saída de um endereço."""

    rua: str
    numero: int
    complemento: str
    bairro: str
    cidade: str
    estado: str
    cep: str

    @classmethod
    def from_value_object(cls, endereco: Endereco) -> "EnderecoOutputDTO":
        """Cria DTO a partir do value object."""
        return cls(
            rua=endereco.rua,
            numero=endereco.numero,
            complemento=endereco.complemento,
            bairro=endereco.bairro,
            cidade=endereco.cidade,
            estado=endereco.estado,
            cep=endereco.cep,
        )

    def to_dict(self) -> dict:
        return {
            "rua": self.rua,
            "numero": self.numero,
            "complemento": self.complemento,
            "bairro": self.bairro,
            "cidade": self.cidade,
            "estado": self.estado,
            "cep": self.cep,
        }


@dataclass
class ClienteOutputDTO:
    """
    DTO de saída completo com dados do cliente.

    Attributes:
        id: Identificador único (como string)
        nome: Nome do cliente
        email: Email (como string)
        data_nascimento: Data de nascimento em ISO-8601
        telefone: Telefone de contato
        enderecos: Endereços do cliente
    """

    id: str
    nome: str
    email: Optional[str]
    data_nascimento: Optional[str]
    telefone: str
    enderecos: List[EnderecoOutputDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, cliente: Cliente) -> "ClienteOutputDTO":
        """
        Cria DTO a partir da entidade.

        Args:
            cliente: Entidade de domínio

        Returns:
            DTO com dados formatados para saída
        """
        return cls(
            id=str(cliente.id),
            nome=cliente.nome,
            email=str(cliente.email) if cliente.email is not None else None,
            data_nascimento=(
                cliente.data_nascimento.isoformat()
                if cliente.data_nascimento else None
            ),
            telefone=cliente.telefone,
            enderecos=[
                EnderecoOutputDTO.from_value_object(e) for e in cliente.enderecos
            ],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (para JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "data_nascimento": self.data_nascimento,
            "telefone": self.telefone,
            "enderecos": [e.to_dict() for e in self.enderecos],
        }
