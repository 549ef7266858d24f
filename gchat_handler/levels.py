import logging
from enum import IntEnum
from typing import Optional


# Níveis do syslog que o logging padrão não possui
NOTICE = 25
ALERT = 55
EMERGENCY = 60

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")


class Severity(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    ALERT = 55
    EMERGENCY = 60


URGENT_COLOR = "#ff1100"

LEVEL_COLORS = {
    Severity.EMERGENCY: URGENT_COLOR,
    Severity.ALERT: URGENT_COLOR,
    Severity.CRITICAL: URGENT_COLOR,
    Severity.ERROR: URGENT_COLOR,
    Severity.WARNING: "#ffc400",
    Severity.NOTICE: "#00aeff",
    Severity.INFO: "#48d62f",
    Severity.DEBUG: "#000000",
}


def get_severity(levelno: int) -> Optional[Severity]:
    """Converte o levelno de um LogRecord; None para níveis customizados."""
    try:
        return Severity(levelno)
    except ValueError:
        return None


def get_level_color(severity: Optional[Severity]) -> str:
    # nível desconhecido cai na cor de urgência
    return LEVEL_COLORS.get(severity, URGENT_COLOR)
