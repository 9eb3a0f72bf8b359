from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Request, status

import config
from workout_bot.bootstrap import build_store, check_config, configure_logging
from workout_bot.bot.dispatcher import Dispatcher
from workout_bot.schemas.telegram import Update
from workout_bot.store import Store


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Stores injected by create_app (tests) skip the real bootstrap
    if getattr(app.state, "dispatcher", None) is None:
        configure_logging()
        check_config()
        app.state.dispatcher = Dispatcher(build_store())
    yield


def create_app(store: Optional[Store] = None) -> FastAPI:
    app = FastAPI(title="Workout Tracker Bot", lifespan=lifespan)
    app.state.dispatcher = Dispatcher(store) if store is not None else None

    # Root endpoint
    @app.get("/")
    def root():
        return {"message": "Workout Tracker Bot", "webhook": "/telegram/webhook"}

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "healthy", "message": "API is running"}

    @app.post("/telegram/webhook")
    def telegram_webhook(
        update: Update,
        request: Request,
        x_telegram_bot_api_secret_token: Optional[str] = Header(None),
    ):
        """
        Telegram webhook. The reply is returned inline as a sendMessage call,
        so no outbound request is needed.
        """
        if config.TELEGRAM_WEBHOOK_SECRET and x_telegram_bot_api_secret_token != config.TELEGRAM_WEBHOOK_SECRET:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid webhook secret")

        if update.message is None:
            return {"ok": True}

        reply = request.app.state.dispatcher.dispatch(update.message.text)
        if reply is None:
            return {"ok": True}
        return {"method": "sendMessage", "chat_id": update.message.chat.id, "text": reply}

    return app


app = create_app()
