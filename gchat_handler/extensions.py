import json
from collections.abc import Mapping
from typing import Callable, Dict, List, Optional

from .constants import ICONS
from .exceptions import InvalidExtensionResult, SerializationError
from .formatters import card_widget
from .utils import is_numeric_key, to_text, ucwords


AdditionalLogsProvider = Callable[[object], object]


def _iter_entries(result):
    if isinstance(result, Mapping):
        return result.items()
    if isinstance(result, (list, tuple)):
        return enumerate(result)
    raise InvalidExtensionResult("Data returned from the additional logs callback must be a mapping or a list.")


def format_custom_value(key, value) -> str:
    if value and not isinstance(value, str):
        try:
            value = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise SerializationError(key) from exc

    value = to_text(value)
    if not is_numeric_key(key):
        label = ucwords(str(key).replace('_', ' '))
        value = f"<b>{label}:</b> {value}"
    return value


def collect_custom_widgets(provider: Optional[AdditionalLogsProvider], request) -> List[Dict]:
    """
    Widgets extras vindos do callback da aplicação, na ordem retornada.
    Chaves nomeadas viram '<b>Chave:</b> valor'; posicionais usam o valor puro.
    """
    if provider is None:
        return []

    entries = _iter_entries(provider(request))
    return [card_widget(format_custom_value(key, value), ICONS["custom"]) for key, value in entries]
