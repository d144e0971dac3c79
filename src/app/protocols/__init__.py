"""Contratos (formatos de registro) do core da aplicação."""

from .models import (
    Button,
    ButtonText,
    ListData,
    ListRow,
    ListSection,
    MediaRef,
    Message,
    NativeFlowInfo,
)

__all__ = [
    "Button",
    "ButtonText",
    "ListData",
    "ListRow",
    "ListSection",
    "MediaRef",
    "Message",
    "NativeFlowInfo",
]
