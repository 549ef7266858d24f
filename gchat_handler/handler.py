import logging
from typing import Dict, List, Optional

from flask import has_request_context, request

from .config import get_app_url, get_timeout, get_webhook_urls
from .constants import DEFAULT_LOG_FORMAT, IGNORED_LOGGERS
from .extensions import AdditionalLogsProvider, collect_custom_widgets
from .formatters import build_payload
from .services import send_google_chat_payload


class _IgnoreOwnRecords(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return not any(record.name == name or record.name.startswith(name + '.') for name in IGNORED_LOGGERS)


def get_request_url() -> str:
    if has_request_context():
        return request.base_url
    return get_app_url()


def get_current_request():
    return request if has_request_context() else None


class GoogleChatHandler(logging.Handler):
    """
    Envia cada LogRecord como mensagem (texto + card) para um ou mais webhooks do Google Chat.

    - url: lista ou string separada por vírgula; sem ela usa GOOGLE_CHAT_WEBHOOK_URL
    - timeout: segundos por POST; sem ele usa GOOGLE_CHAT_TIMEOUT_SECONDS (ou nenhum)
    - additional_logs: callback(request) -> dict/list com campos extras para o card
    - propagate_errors: se True, emit() relança o erro em vez de usar handleError()
    """

    def __init__(self, url=None, level=logging.NOTSET, timeout: Optional[float] = None,
                 additional_logs: Optional[AdditionalLogsProvider] = None, propagate_errors: bool = False):
        super().__init__(level)
        self.url = url
        self.timeout = timeout
        self.propagate_errors = propagate_errors
        self._additional_logs = additional_logs
        self.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        self.addFilter(_IgnoreOwnRecords())

    @property
    def additional_logs(self) -> Optional[AdditionalLogsProvider]:
        return self._additional_logs

    def set_additional_logs(self, provider: Optional[AdditionalLogsProvider]):
        # mesmo lock usado por handle(): não troca o callback no meio de um envio
        self.acquire()
        try:
            self._additional_logs = provider
        finally:
            self.release()

    def get_custom_logs(self) -> List[Dict]:
        return collect_custom_widgets(self._additional_logs, get_current_request())

    def get_request_body(self, record: logging.LogRecord) -> Dict:
        return build_payload(record, self.format(record), get_request_url(), self.get_custom_logs())

    def dispatch(self, record: logging.LogRecord):
        urls = get_webhook_urls(self.url)
        payload = self.get_request_body(record)
        timeout = self.timeout if self.timeout is not None else get_timeout()

        # Falha em um webhook interrompe os demais
        for url in urls:
            send_google_chat_payload(url, payload, timeout=timeout)

    def emit(self, record: logging.LogRecord):
        try:
            self.dispatch(record)
        except Exception:
            if self.propagate_errors:
                raise
            self.handleError(record)
