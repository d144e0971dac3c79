"""Validadores de entrada para payloads WhatsApp.

Uso:
    from api.validators.whatsapp import require_fields

    require_fields("quickReply", displayText=text, buttonId=button_id)
"""

from api.validators.whatsapp.required import require_fields

__all__ = [
    "require_fields",
]
