import logging

from flask import Flask, request

from .config import get_setting
from .constants import DEFAULT_HANDLER_LEVEL, HANDLER_LEVEL_KEY
from .handler import GoogleChatHandler


def _parse_level(level):
    # aceita 40, "40" ou "error"
    if isinstance(level, int):
        return level
    level = str(level).strip()
    if level.isdigit():
        return int(level)
    return level.upper()


def init_app(app: Flask, **handler_kwargs) -> GoogleChatHandler:
    """Registra o GoogleChatHandler no app.logger da aplicação."""
    handler = GoogleChatHandler(**handler_kwargs)
    with app.app_context():
        level = get_setting(HANDLER_LEVEL_KEY, DEFAULT_HANDLER_LEVEL)
    handler.setLevel(_parse_level(level))

    # Apps com o mesmo nome compartilham o logger; mantém um único handler
    for existing in list(app.logger.handlers):
        if isinstance(existing, GoogleChatHandler):
            app.logger.removeHandler(existing)
    app.logger.addHandler(handler)
    if app.logger.level == logging.NOTSET:
        app.logger.setLevel(handler.level)
    app.extensions["google_chat"] = handler
    return handler


def create_app(config=None, **handler_kwargs):
    app = Flask(__name__)
    if config:
        app.config.update(config)
    init_app(app, **handler_kwargs)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'google-chat-log-handler'}, 200

    @app.route('/log', methods=['POST'])
    def log():
        data = request.get_json(silent=True) or {}
        level_name = str(data.get('level', 'error')).upper()
        levelno = logging.getLevelName(level_name)
        if not isinstance(levelno, int):
            return {'error': f'unknown level: {level_name}'}, 400

        app.logger.log(levelno, data.get('message', ''))
        return {'status': 'accepted', 'level': level_name}, 202

    return app
