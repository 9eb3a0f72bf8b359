import logging
from typing import Dict, Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError

from workout_bot.bot import messages
from workout_bot.bot.handlers import Handler, build_handlers
from workout_bot.errors import TrackerError, UsageError
from workout_bot.store import Store

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Routes one line of text to its handler and returns the reply.

    Holds no per-chat state: every call is independent of the ones before it.
    """

    def __init__(self, store: Store, handlers: Optional[Iterable[Handler]] = None):
        self.handlers: Dict[str, Handler] = {}
        for handler in handlers if handlers is not None else build_handlers(store):
            for name in (handler.command, *handler.aliases):
                self.handlers[name] = handler

    @staticmethod
    def parse(text: str):
        """Split a line into (command, args). Strips a `@BotName` suffix from the command."""
        command, *args = text.split()
        if command.startswith("/") and "@" in command:
            command = command.split("@", 1)[0]
        return command, args

    def dispatch(self, text: Optional[str]) -> Optional[str]:
        """Reply for `text`, or None when the line is empty."""
        if text is None or not text.strip():
            return None

        command, args = self.parse(text.strip())
        handler = self.handlers.get(command)
        if handler is None:
            return messages.UNKNOWN_COMMAND

        try:
            if len(args) < handler.min_args:
                raise UsageError(handler.usage)
            return handler.handle(args)
        except UsageError as e:
            return e.usage
        except (TrackerError, SQLAlchemyError):
            # Arguments are not logged: they may contain a password
            logger.exception(f"[Dispatcher] {command} failed")
            return messages.INTERNAL_ERROR
        except Exception:
            logger.exception(f"[Dispatcher] {command} crashed")
            return messages.INTERNAL_ERROR
