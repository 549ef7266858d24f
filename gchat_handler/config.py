import os
from typing import List, Optional

from flask import current_app, has_app_context

from .constants import (
    APP_ENV_KEY,
    APP_NAME_KEY,
    APP_URL_KEY,
    NOT_AVAILABLE,
    NOTIFY_USERS_DEFAULT_KEY,
    NOTIFY_USERS_PREFIX,
    TIMEOUT_KEY,
    WEBHOOK_URL_KEY,
)
from .exceptions import ConfigurationError
from .levels import Severity


def get_setting(key: str, default=None):
    """
    Busca uma configuração no momento do envio (sem cache).
    Ordem: app.config da aplicação Flask ativa -> variáveis de ambiente.
    """
    if has_app_context():
        value = current_app.config.get(key)
        if value is not None:
            return value
    return os.getenv(key, default)


def resolve_targets(value) -> List[str]:
    if not value:
        raise ConfigurationError("Google chat webhook url is not configured.")

    if isinstance(value, (list, tuple)):
        return list(value)

    return [each.strip() for each in str(value).split(',')]


def get_webhook_urls(override=None) -> List[str]:
    if override:
        return resolve_targets(override)
    return resolve_targets(get_setting(WEBHOOK_URL_KEY))


def _strip(value) -> str:
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        value = ",".join(str(each).strip() for each in value)
    return str(value).strip()


def resolve_mention_ids(severity: Optional[Severity]) -> str:
    level_ids = ""
    if severity is not None:
        level_ids = _strip(get_setting(NOTIFY_USERS_PREFIX + severity.name))
    default_ids = _strip(get_setting(NOTIFY_USERS_DEFAULT_KEY))

    if default_ids and level_ids:
        return f"{default_ids},{level_ids}"
    return default_ids or level_ids


def get_app_name() -> str:
    return get_setting(APP_NAME_KEY, "") or ""


def get_app_env() -> Optional[str]:
    return get_setting(APP_ENV_KEY) or None


def get_app_url() -> str:
    return get_setting(APP_URL_KEY) or NOT_AVAILABLE


def get_timeout() -> Optional[float]:
    raw = get_setting(TIMEOUT_KEY)
    if raw in (None, ""):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{TIMEOUT_KEY} must be a number, got {raw!r}.") from None
