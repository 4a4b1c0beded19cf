"""
Value Objects do Domínio de Clientes.

Value Objects:
- Endereco: endereço imutável, comparado por valor

Regras de Negócio Encapsuladas:
- Campos de texto obrigatórios (não vazios, não só espaços)
- Número do imóvel a partir de 1
- Nenhuma instância inválida é observável: a validação roda
  antes de qualquer objeto ser entregue ao chamador
"""

from dataclasses import dataclass
from typing import Any, Iterator
import logging

from src.core.shared.exceptions import ValidationError
from src.core.shared.primitives import ValueObject


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Endereco(ValueObject):
    """
    Value Object: Endereço.

    Imutável (frozen=True). A igualdade vem de ValueObject e compara
    os sete campos na ordem em que são declarados.

    Invariantes:
    - rua, complemento, bairro, cidade, estado e cep não podem ser vazios
    - numero deve ser inteiro maior ou igual a 1

    Attributes:
        rua: Logradouro
        numero: Número do imóvel
        complemento: Apartamento, bloco, sala etc.
        bairro: Bairro
        cidade: Cidade
        estado: Estado (UF)
        cep: Código postal

    Example:
        endereco = Endereco.criar(
            rua="Rua A",
            numero=10,
            complemento="Apto 1",
            bairro="Centro",
            cidade="Cidade X",
            estado="UF",
            cep="00000-000",
        )
    """

    rua: str
    numero: int
    complemento: str
    bairro: str
    cidade: str
    estado: str
    cep: str

    NUMERO_MINIMO = 1

    def __post_init__(self):
        self._validar_texto(self.rua, "rua")
        self._validar_numero(self.numero)
        self._validar_texto(self.complemento, "complemento")
        self._validar_texto(self.bairro, "bairro")
        self._validar_texto(self.cidade, "cidade")
        self._validar_texto(self.estado, "estado")
        self._validar_texto(self.cep, "cep")

    @classmethod
    def criar(
        cls,
        rua: str,
        numero: int,
        complemento: str,
        bairro: str,
        cidade: str,
        estado: str,
        cep: str,
    ) -> "Endereco":
        """
        Factory method para criar endereço com validações.

        Os campos são validados na ordem de declaração e a primeira
        falha interrompe a criação. Os valores são guardados exatamente
        como recebidos, sem trim.

        Returns:
            Nova instância de Endereco

        Raises:
            ValidationError: Se algum campo for inválido. O atributo
                `field` indica qual.
        """
        try:
            return cls(
                rua=rua,
                numero=numero,
                complemento=complemento,
                bairro=bairro,
                cidade=cidade,
                estado=estado,
                cep=cep,
            )
        except ValidationError as e:
            logger.debug(f"Endereço rejeitado no campo '{e.field}': {e.message}")
            raise

    @staticmethod
    def _validar_texto(valor: Any, campo: str) -> None:
        if not isinstance(valor, str) or not valor.strip():
            raise ValidationError(
                f"'{campo}' não pode ser vazio.",
                field=campo
            )

    @classmethod
    def _validar_numero(cls, numero: Any) -> None:
        # bool é subclasse de int
        if isinstance(numero, bool) or not isinstance(numero, int):
            raise ValidationError(
                "'numero' deve ser um inteiro.",
                field="numero"
            )

        if numero < cls.NUMERO_MINIMO:
            raise ValidationError(
                f"'numero' deve ser maior ou igual a {cls.NUMERO_MINIMO}.",
                field="numero"
            )

    def get_atomic_values(self) -> Iterator[Any]:
        yield self.rua
        yield self.numero
        yield self.complemento
        yield self.bairro
        yield self.cidade
        yield self.estado
        yield self.cep
