import logging
import time
from typing import Optional

from pydantic import ValidationError

from workout_bot.bot.dispatcher import Dispatcher
from workout_bot.bot.telegram import TelegramClient
from workout_bot.errors import TransportError
from workout_bot.schemas.telegram import Update

logger = logging.getLogger(__name__)


def handle_update(dispatcher: Dispatcher, client: TelegramClient, raw: dict) -> Optional[str]:
    """Dispatch one update and send the reply. Returns the reply text."""
    try:
        update = Update.model_validate(raw)
    except ValidationError:
        logger.warning(f"Skipping malformed update {raw.get('update_id')}")
        return None

    if update.message is None:
        return None

    reply = dispatcher.dispatch(update.message.text)
    if reply is not None:
        client.send_message(update.message.chat.id, reply)
    return reply


def run_polling(
    dispatcher: Dispatcher,
    client: TelegramClient,
    timeout: int = 60,
    retry_delay: float = 5.0,
    max_rounds: Optional[int] = None,
):
    """
    Long-poll Telegram and answer each message before fetching the next.

    `max_rounds` bounds the number of getUpdates calls (None runs forever).
    """
    offset = 0
    rounds = 0
    while max_rounds is None or rounds < max_rounds:
        rounds += 1
        try:
            updates = client.get_updates(offset=offset, timeout=timeout)
        except TransportError as e:
            logger.warning(f"Polling failed ({e}); retrying in {retry_delay}s")
            time.sleep(retry_delay)
            continue

        for raw in updates:
            offset = max(offset, raw.get("update_id", 0) + 1)
            try:
                handle_update(dispatcher, client, raw)
            except TransportError as e:
                logger.error(f"Could not deliver reply for update {raw.get('update_id')}: {e}")
            except Exception:
                logger.exception(f"Update {raw.get('update_id')} failed; moving on")
