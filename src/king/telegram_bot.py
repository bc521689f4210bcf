"""King Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from .assistant import Assistant, build_assistant
from .config import Config, load_config

logger = logging.getLogger(__name__)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config: Config, assistant: Assistant) -> Application:
    """Create and configure the Telegram bot application."""
    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to king.conf"
        )

    # Updates are handled one at a time; the assistant is not thread-safe
    app = Application.builder().token(config.telegram_bot_token).concurrent_updates(False).build()
    auth_filter = AuthFilter(config.telegram_allowed_users)

    async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        await update.effective_message.reply_text(assistant.greeting())

    async def message_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        response = assistant.respond(update.effective_message.text)
        await update.effective_message.reply_text(response.text)

    async def unauthorized_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.effective_message.reply_text("Unauthorized. This bot is private.")

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(MessageHandler(auth_filter & filters.TEXT & ~filters.COMMAND, message_handler))

    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def run_bot(config: Config | None = None):
    """Run the Telegram bot."""
    if config is None:
        config = load_config()

    assistant = build_assistant(config)
    app = create_application(config, assistant)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting King Telegram bot...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)
