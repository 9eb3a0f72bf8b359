"""Run the bot with long polling: `python -m workout_bot`."""
import logging
import sys

import config
from workout_bot.bootstrap import build_store, check_config, configure_logging
from workout_bot.bot.dispatcher import Dispatcher
from workout_bot.bot.polling import run_polling
from workout_bot.bot.telegram import TelegramClient
from workout_bot.errors import ConfigError, TransportError

logger = logging.getLogger("workout_bot")


def main() -> int:
    configure_logging()
    try:
        check_config()
        store = build_store()
    except ConfigError as e:
        logger.critical(str(e))
        return 1

    client = TelegramClient(config.TELEGRAM_BOT_TOKEN)
    try:
        me = client.get_me()
    except TransportError as e:
        logger.critical(f"Cannot reach Telegram: {e}")
        return 1
    logger.info(f"Bot started: {me.get('username')}")

    try:
        run_polling(Dispatcher(store), client, timeout=config.TELEGRAM_POLL_TIMEOUT)
    except KeyboardInterrupt:
        logger.info("Stopping bot")
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
