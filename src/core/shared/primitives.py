"""
Blocos de construção do domínio: Entity e ValueObject.

- Entity: igualdade pela identidade (id). Atributos mutáveis não
  participam da comparação.
- ValueObject: sem identidade. Igualdade estrutural pela sequência
  ordenada de valores atômicos declarada pela subclasse.

Ambos implementam __eq__ e __hash__ uma única vez, e as classes
concretas apenas informam o id ou os valores atômicos.
"""

from abc import ABC, abstractmethod
from itertools import zip_longest
from typing import Any, Hashable, Iterable
import uuid

from src.core.shared.exceptions import ValidationError


_FIM = object()


class Entity(ABC):
    """
    Classe base para entidades.

    O id é atribuído na construção e não muda depois disso.
    Duas entidades são iguais quando são do mesmo tipo concreto
    e possuem o mesmo id.

    Raises:
        ValidationError: Se o id for vazio (None, string em branco
            ou UUID nulo)
    """

    def __init__(self, id: Hashable):
        self._validar_id(id)
        self._id = id

    @property
    def id(self) -> Hashable:
        return self._id

    @staticmethod
    def novo_id() -> uuid.UUID:
        """Gera um identificador novo para uma entidade."""
        return uuid.uuid4()

    @staticmethod
    def _validar_id(id: Any) -> None:
        if id is None:
            raise ValidationError("'id' é obrigatório.", field="id")

        if isinstance(id, str) and not id.strip():
            raise ValidationError("'id' não pode ser vazio.", field="id")

        if isinstance(id, uuid.UUID) and id.int == 0:
            raise ValidationError("'id' não pode ser o UUID nulo.", field="id")

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if type(other) is not type(self):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash baseado em ID."""
        return hash(self._id)


class ValueObject(ABC):
    """
    Classe base para value objects.

    Subclasses declaram seus valores atômicos em get_atomic_values(),
    na ordem dos campos. Essa sequência é a única fonte para igualdade
    e hash.
    """

    @abstractmethod
    def get_atomic_values(self) -> Iterable[Any]:
        """
        Retorna os valores que compõem o objeto, em ordem fixa.

        Cada chamada deve produzir uma sequência nova, do início.
        """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False

        pares = zip_longest(
            self.get_atomic_values(),
            other.get_atomic_values(),
            fillvalue=_FIM,
        )
        for valor, outro_valor in pares:
            if valor is _FIM or outro_valor is _FIM:
                return False
            if valor != outro_valor:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(self.get_atomic_values()))
