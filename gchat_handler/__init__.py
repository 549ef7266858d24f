"""Handler de logging que envia logs para webhooks do Google Chat.

Este pacote contém:
- constants: variáveis de ambiente, chaves de configuração e constantes do card
- config: leitura das configurações no momento do envio (webhooks, menções, app)
- levels: níveis de severidade (inclui NOTICE, ALERT, EMERGENCY) e cores
- formatters: montagem do payload (texto, menções e widgets do card)
- extensions: widgets extras fornecidos pela aplicação via callback
- services: envio HTTP para o Google Chat
- handler: GoogleChatHandler (logging.Handler)
- controller: integração com Flask (init_app/create_app)
"""
from .exceptions import ConfigurationError, GoogleChatHandlerError, InvalidExtensionResult, SerializationError
from .handler import GoogleChatHandler
from .levels import ALERT, EMERGENCY, NOTICE, Severity

__all__ = [
    "ALERT",
    "EMERGENCY",
    "NOTICE",
    "ConfigurationError",
    "GoogleChatHandler",
    "GoogleChatHandlerError",
    "InvalidExtensionResult",
    "SerializationError",
    "Severity",
]
