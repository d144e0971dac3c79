"""Validators por canal.

Estrutura:
- whatsapp/: campos obrigatórios dos builders de botões e mensagens
"""

__all__: list[str] = []
