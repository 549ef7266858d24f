import logging
from datetime import datetime
from typing import Dict, List, Optional

from .config import get_app_env, get_app_name, resolve_mention_ids
from .constants import (
    CARD_ID,
    CARD_SECTION_HEADER,
    ICONS,
    MAX_TEXT_LENGTH,
    MENTION_ALL,
    UNCOLLAPSIBLE_WIDGETS_COUNT,
)
from .levels import Severity, get_level_color, get_severity
from .utils import ucwords


def card_widget(text: str, icon: str) -> Dict:
    return {
        "decoratedText": {
            "startIcon": {
                "knownIcon": icon,
            },
            "text": text,
        },
    }


def construct_notifiable_text(user_ids: str) -> str:
    """
    Monta o prefixo de menções a partir de ids separados por vírgula.
    '5,all,7,5' -> '<users/all> <users/5> <users/7> '
    """
    if not user_ids:
        return ""

    all_users = ""
    other_ids = []
    seen = set()
    for user_id in user_ids.split(','):
        if user_id in seen:
            continue
        seen.add(user_id)
        if user_id.lower() == MENTION_ALL:
            all_users = "<users/all> "
            continue
        other_ids.append(f"<users/{user_id}> ")

    return all_users + "".join(other_ids)


def get_notifiable_text(severity: Optional[Severity]) -> str:
    return construct_notifiable_text(resolve_mention_ids(severity))


def get_level_name(record: logging.LogRecord) -> str:
    # "Error", "Notice"...; níveis customizados mantêm o levelname
    if get_severity(record.levelno) is None:
        return record.levelname
    return record.levelname.capitalize()


def get_level_content(record: logging.LogRecord) -> str:
    color = get_level_color(get_severity(record.levelno))
    return f"<font color='{color}'>{get_level_name(record)}</font>"


def format_record_timestamp(record: logging.LogRecord) -> str:
    return str(datetime.fromtimestamp(record.created).astimezone())


def build_env_content() -> str:
    return ucwords(get_app_env() or 'NA') + ' [Env]'


def build_payload(record: logging.LogRecord, formatted: str, request_url: str, custom_widgets: List[Dict]) -> Dict:
    """
    Payload cardsV2 do Google Chat.

    O corte em MAX_TEXT_LENGTH é aplicado depois de concatenar menções e
    mensagem formatada, então uma menção pode ser cortada no meio.
    """
    notifiable_text = get_notifiable_text(get_severity(record.levelno))

    widgets = [
        card_widget(build_env_content(), ICONS["env"]),
        card_widget(get_level_content(record), ICONS["level"]),
        card_widget(format_record_timestamp(record), ICONS["timestamp"]),
        card_widget(request_url, ICONS["url"]),
    ]
    widgets.extend(custom_widgets)

    return {
        "text": (notifiable_text + formatted)[:MAX_TEXT_LENGTH],
        "cardsV2": [
            {
                "cardId": CARD_ID,
                "card": {
                    "header": {
                        "title": f"{get_level_name(record)}: {record.getMessage()}",
                        "subtitle": get_app_name(),
                    },
                    "sections": {
                        "header": CARD_SECTION_HEADER,
                        "collapsible": True,
                        "uncollapsibleWidgetsCount": UNCOLLAPSIBLE_WIDGETS_COUNT,
                        "widgets": widgets,
                    },
                },
            },
        ],
    }
