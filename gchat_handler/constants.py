import os

# Configurações globais de ambiente (lidas uma vez, no import)
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Chaves lidas a cada envio (ver config.get_setting)
WEBHOOK_URL_KEY = "GOOGLE_CHAT_WEBHOOK_URL"
NOTIFY_USERS_PREFIX = "GOOGLE_CHAT_NOTIFY_USERS_"
NOTIFY_USERS_DEFAULT_KEY = NOTIFY_USERS_PREFIX + "DEFAULT"
HANDLER_LEVEL_KEY = "GOOGLE_CHAT_LEVEL"
TIMEOUT_KEY = "GOOGLE_CHAT_TIMEOUT_SECONDS"
APP_NAME_KEY = "APP_NAME"
APP_ENV_KEY = "APP_ENV"
APP_URL_KEY = "APP_URL"

DEFAULT_HANDLER_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "[%(asctime)s] %(name)s.%(levelname)s: %(message)s"

# Limite do campo "text" da mensagem do Google Chat
MAX_TEXT_LENGTH = 4096

# Card
CARD_ID = "info-card-id"
CARD_SECTION_HEADER = "Details"
UNCOLLAPSIBLE_WIDGETS_COUNT = 3

ICONS = {
    "env": "BOOKMARK",
    "level": "TICKET",
    "timestamp": "CLOCK",
    "url": "BUS",
    "custom": "CONFIRMATION_NUMBER_ICON",
}

MENTION_ALL = "all"
NOT_AVAILABLE = "N/A"

# Loggers ignorados pelo handler (evita recursão durante o envio)
IGNORED_LOGGERS = ("gchat_handler.services", "urllib3", "requests")
