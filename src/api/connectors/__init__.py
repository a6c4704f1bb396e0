"""Connectors por provedor: adapters de borda para APIs externas.

Estrutura (um pacote por provedor):
- push: apns/, fcm/, expo/
- email: ses/, resend/, mailgun/
- sms: twilio/, plivo/, vonage/, sns/
- chat: slack/, telegram/, whatsapp/

Cada conector tem seu próprio pacote, garantindo SRP e isolamento de falhas.
Não há classe base: o comportamento comum vem de `app.services`.
"""

from api.connectors.registry import (
    CONNECTORS,
    RegisteredConnector,
    create_connector,
    providers_for_channel,
)

__all__ = ["CONNECTORS", "RegisteredConnector", "create_connector", "providers_for_channel"]
