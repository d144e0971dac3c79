"""Payload builders por canal.

Estrutura:
- whatsapp/: botões e mensagens interativas (esquema estilo Baileys)
"""

__all__: list[str] = []
