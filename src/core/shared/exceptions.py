"""
Exceções de Domínio do Cadastro de Clientes.

Erros tipados que o domínio lança para as camadas externas.

Hierarquia:
    DomainException (base)
    └── ValidationError (argumento inválido na criação de um objeto)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Permite capturar qualquer erro do domínio de forma genérica.

    Example:
        try:
            endereco = Endereco.criar(...)
        except DomainException as e:
            logger.warning(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Argumento inválido fornecido a um construtor ou factory.

    Identifica o campo que falhou para que o chamador possa
    corrigir a entrada e tentar novamente.

    Example:
        if numero < 1:
            raise ValidationError("'numero' deve ser maior ou igual a 1.", field="numero")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result
