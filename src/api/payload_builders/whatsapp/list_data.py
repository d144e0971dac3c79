"""Construtores de ListData (payload de botões tipo 4).

A ordem de seções e linhas é preservada. Não há validação de ids
duplicados nem de seções vazias.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from app.constants.whatsapp import DEFAULT_LIST_TITLE
from app.protocols.models import ListData, ListRow, ListSection


def create_row(title: str = "", description: str = "", id: str = "") -> ListRow:  # noqa: A002
    """Cria uma linha de lista."""
    return {
        "title": title,
        "description": description,
        "id": id,
    }


def create_section(title: str = "", rows: Iterable[ListRow] = ()) -> ListSection:
    """Cria uma seção de lista (linhas usadas como recebidas)."""
    return {
        "title": title,
        "rows": list(rows),
    }


def _normalize_row(row: Mapping[str, Any]) -> ListRow:
    return create_row(
        row.get("title") or "",
        row.get("description") or "",
        row.get("id") or "",
    )


def _normalize_section(section: Mapping[str, Any]) -> ListSection:
    rows = section.get("rows") or ()
    return create_section(
        section.get("title") or "",
        [_normalize_row(row) for row in rows],
    )


def create_list_data(
    title: str | None,
    sections: Iterable[Mapping[str, Any]],
) -> ListData:
    """Monta ListData normalizando seções e linhas.

    Campos ausentes viram string vazia; título vazio vira "Menu".

    Args:
        title: Título da lista
        sections: Seções no formato {title, rows: [{title, description, id}]}

    Returns:
        ListData pronto para `list_button`
    """
    return {
        "title": title or DEFAULT_LIST_TITLE,
        "sections": [_normalize_section(section) for section in sections],
    }


def serialize_list_data(list_data: Mapping[str, Any]) -> str:
    """Serializa ListData para `paramsJson` (JSON compacto, sem escapar unicode)."""
    return json.dumps(list_data, separators=(",", ":"), ensure_ascii=False)
