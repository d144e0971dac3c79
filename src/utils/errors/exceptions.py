"""Exceções de domínio compartilhadas."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Campo obrigatório ausente ou vazio na construção de um registro.

    Attributes:
        fields: Nomes dos campos obrigatórios que faltaram.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields
