import logging
import os


class EmojiFormatter(logging.Formatter):
    """
    Prepends an emoji to each log line based on its level.
    """

    LEVEL_EMOJIS = {
        logging.DEBUG: "🐛",
        logging.INFO: "✅",
        logging.WARNING: "⚠️",
        logging.ERROR: "❌",
        logging.CRITICAL: "🔥",
    }

    def format(self, record):
        s = super().format(record)
        emoji = self.LEVEL_EMOJIS.get(record.levelno, "")
        return f"{emoji} {s}"


def setup_logging(level: str | None = None):
    """
    Configures the root logger with the EmojiFormatter.
    Call once at the application's entry point.
    """
    level_name = (level or os.environ.get("DICE_LOG_LEVEL", "INFO")).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        EmojiFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    # Replace any existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
