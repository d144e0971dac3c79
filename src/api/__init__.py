"""API — construção e validação de payloads para clientes de mensagens.

Subpastas:
- payload_builders/: botões, listas e mensagens
- validators/: campos obrigatórios

NÃO PODE conter: envio de rede, persistência.
"""
