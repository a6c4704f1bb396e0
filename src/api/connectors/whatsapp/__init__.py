"""Conector WhatsApp Business - adapter de borda para Meta Graph API.

Responsabilidades:
- Envio de mensagem de texto (`/{phone_number_id}/messages`)
- Parsing de erros da Graph API
- Logging sem PII
"""

from .connector import WhatsAppChatConnector, create_whatsapp_connector
from .meta_errors import meta_error_type, parse_meta_error

__all__ = [
    "WhatsAppChatConnector",
    "create_whatsapp_connector",
    "meta_error_type",
    "parse_meta_error",
]
