import logging
import logging.handlers
import os
import sys
from typing import Optional


class EmojiSafeFormatter(logging.Formatter):
    """Log formatter that makes emojis and special characters safe for console output."""

    def format(self, record):
        msg = super().format(record)
        # Replace the emojis used in insight and motivational messages
        replacements = {
            '🚀': '[ROCKET]',
            '💪': '[STRONG]',
            '📈': '[CHART]',
            '💡': '[IDEA]',
            '🌱': '[SEEDLING]',
            '🎯': '[TARGET]',
            '⏰': '[CLOCK]',
            '💧': '[WATER]',
            '🔄': '[REPEAT]',
        }

        for emoji, replacement in replacements.items():
            msg = msg.replace(emoji, replacement)
        return msg


class EncodingSafeHandler(logging.StreamHandler):
    """Stream handler that handles encoding errors gracefully."""

    def emit(self, record):
        try:
            msg = self.format(record)
            stream = self.stream
            stream.write(msg + self.terminator)
            self.flush()
        except UnicodeEncodeError:
            # Fall back to ascii with replacement if Unicode fails
            try:
                msg = self.format(record)
                safe_msg = msg.encode('ascii', 'replace').decode('ascii')
                stream = self.stream
                stream.write(safe_msg + self.terminator)
                self.flush()
            except Exception:
                self.handleError(record)
        except Exception:
            self.handleError(record)


def setup_logger(
    name: str,
    log_file: Optional[str],
    level: int = logging.INFO,
    rotation: str = 'midnight',
    format_string: Optional[str] = None,
    backup_count: int = 30
) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Args:
        name: Logger name (empty string for the root logger)
        log_file: Path to log file, or None for console only
        level: Logging level
        rotation: When to rotate logs ('midnight' or 'size')
        format_string: Custom format string for logs
        backup_count: Number of backup files to keep
    """
    if format_string is None:
        format_string = '[%(asctime)s] %(levelname)s [%(name)s:%(lineno)s] %(message)s'

    logger = logging.getLogger(name or None)
    logger.setLevel(level)

    formatter = EmojiSafeFormatter(format_string)

    if log_file:
        # Ensure log directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # File handler with rotation
        if rotation == 'midnight':
            file_handler = logging.handlers.TimedRotatingFileHandler(
                log_file,
                when='midnight',
                interval=1,
                backupCount=backup_count,
                encoding='utf-8'
            )
        else:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10*1024*1024,  # 10MB
                backupCount=backup_count,
                encoding='utf-8'
            )

        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console handler
    console_handler = EncodingSafeHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


_configured = False


def configure_logging(settings) -> logging.Logger:
    """
    Install the root handlers for the application once per process.
    """
    global _configured
    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file = None
    if settings.log_to_file:
        log_file = os.path.join(
            settings.log_dir, f"{settings.app_name.lower()}.log")

    setup_logger(
        name="",
        log_file=log_file,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format_string=settings.log_format
    )
    _configured = True
    root_logger.info("Logging initialized with emoji-safe configuration")
    return root_logger
