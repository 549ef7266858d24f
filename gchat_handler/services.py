import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


def send_google_chat_payload(url: str, payload: Dict, timeout: Optional[float] = None):
    resp = requests.post(url, json=payload, timeout=timeout)
    logger.debug(f"Google Chat response: {resp.status_code}")
    resp.raise_for_status()
    return resp
