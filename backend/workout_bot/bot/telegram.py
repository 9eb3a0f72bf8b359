import httpx
import logging
from typing import Any, Dict, List, Optional

from workout_bot.errors import TransportError

logger = logging.getLogger(__name__)


class TelegramClient:
    """Minimal synchronous Telegram Bot API client."""

    BASE_URL = "https://api.telegram.org"

    def __init__(self, token: str, base_url: Optional[str] = None, http: Optional[httpx.Client] = None):
        self.token = token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.http = http or httpx.Client()

    def _call(self, method: str, payload: Dict[str, Any], timeout: float = 10.0) -> Any:
        url = f"{self.base_url}/bot{self.token}/{method}"
        try:
            response = self.http.post(url, json=payload, timeout=timeout)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            # The URL carries the bot token; only the method name is logged
            logger.error(f"Telegram {method} failed: {type(e).__name__}")
            raise TransportError(f"{method} failed") from e

        if not data.get("ok"):
            raise TransportError(f"{method} failed: {data.get('description')}")
        return data.get("result")

    def get_me(self) -> Dict[str, Any]:
        return self._call("getMe", {})

    def get_updates(self, offset: int = 0, timeout: int = 60) -> List[Dict[str, Any]]:
        # HTTP timeout must outlive the long-poll window
        return self._call(
            "getUpdates",
            {"offset": offset, "timeout": timeout, "allowed_updates": ["message"]},
            timeout=timeout + 10,
        )

    def send_message(self, chat_id: int, text: str) -> Dict[str, Any]:
        return self._call("sendMessage", {"chat_id": chat_id, "text": text})

    def close(self):
        self.http.close()
