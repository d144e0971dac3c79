"""Validação de campos obrigatórios dos builders."""

from __future__ import annotations

from typing import Any

from utils.errors import InvalidArgumentError


def _is_missing(value: Any) -> bool:
    """Ausente = None, string vazia ou coleção vazia."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def require_fields(operation: str, **fields: Any) -> None:
    """Garante que todos os campos informados estão preenchidos.

    Args:
        operation: Nome da operação (para a mensagem de erro).
        **fields: Campos obrigatórios (nome=valor), na ordem de exibição.

    Raises:
        InvalidArgumentError: Se algum campo estiver ausente ou vazio.
    """
    missing = tuple(name for name, value in fields.items() if _is_missing(value))
    if missing:
        names = " and ".join(fields)
        verb = "is" if len(fields) == 1 else "are"
        raise InvalidArgumentError(
            f"{names} {verb} required for {operation}",
            fields=missing,
        )
