import re

# decimal ou notação exponencial; "inf", "nan" e "1_000" são chaves nomeadas
NUMERIC_KEY_RE = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def ucwords(value: str) -> str:
    """Primeira letra de cada palavra em maiúscula, o resto intacto ('staging-eu' -> 'Staging-eu')."""
    return re.sub(r'(^|\s)(\S)', lambda m: m.group(1) + m.group(2).upper(), value)


def is_numeric_key(key) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    if isinstance(key, str):
        return NUMERIC_KEY_RE.fullmatch(key) is not None
    return False


def to_text(value) -> str:
    if value is None or value is False:
        return ""
    return str(value)
