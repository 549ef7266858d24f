"""Erros levantados durante a formatação e o envio de um log."""


class GoogleChatHandlerError(Exception):
    """Erro base do pacote."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class ConfigurationError(GoogleChatHandlerError):
    pass


class InvalidExtensionResult(GoogleChatHandlerError):
    pass


class SerializationError(GoogleChatHandlerError):
    def __init__(self, key):
        self.key = key
        super().__init__(
            f"Additional log key-value should be a string for key[{key}]. "
            "For logging objects, json or lists, stringify the value first (e.g. json.dumps)."
        )
