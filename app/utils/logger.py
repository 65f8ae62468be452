import json
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


class Colors:
    """ANSI color codes for console output"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'
    WHITE = '\033[37m'


# SUCCESS sits between INFO and WARNING
SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

_STD_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.SUCCESS: SUCCESS_LEVEL,
}


class GymLogger:
    """Colorized service logger for the Y-Gym backend.

    Each instance writes through a standard library logger named
    ``ygym.<service>``, so levels and handlers can be configured the usual
    way while console output keeps a single readable format:

        [12:00:01.123] [PAYMENT/CREATE] [INFO] Payment recorded | user_id=...
    """

    def __init__(self, service_name: str = "YGYM", enable_colors: bool = True):
        self.service_name = service_name.upper()
        self.enable_colors = enable_colors and sys.stdout.isatty()
        self._logger = logging.getLogger(f"ygym.{service_name.lower()}")
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.INFO)
            self._logger.propagate = False

        self.level_colors = {
            LogLevel.DEBUG: Colors.BRIGHT_CYAN,
            LogLevel.INFO: Colors.BRIGHT_BLUE,
            LogLevel.WARNING: Colors.BRIGHT_YELLOW,
            LogLevel.ERROR: Colors.BRIGHT_RED,
            LogLevel.SUCCESS: Colors.BRIGHT_GREEN,
        }

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _colorize(self, text: str, color: str) -> str:
        if not self.enable_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_message(self, level: LogLevel, message: str, context: Optional[str] = None) -> str:
        """Format: [TIMESTAMP] [SERVICE/CONTEXT] [LEVEL] Message"""
        level_color = self.level_colors.get(level, Colors.WHITE)
        level_text = self._colorize(f"[{level.value}]", level_color + Colors.BOLD)

        service_context = self.service_name
        if context:
            service_context += f"/{context.upper()}"

        service_text = self._colorize(f"[{service_context}]", Colors.BRIGHT_BLACK)
        timestamp_text = self._colorize(f"[{self._get_timestamp()}]", Colors.DIM)

        return f"{timestamp_text} {service_text} {level_text} {message}"

    @staticmethod
    def _format_value(value) -> str:
        if isinstance(value, (dict, list)):
            value_str = json.dumps(value, default=str, separators=(',', ':'))
            if len(value_str) > 100:
                value_str = value_str[:100] + "..."
            return value_str
        return str(value)

    def _log(self, level: LogLevel, message: str, context: Optional[str] = None, **kwargs):
        std_level = _STD_LEVELS[level]
        if not self._logger.isEnabledFor(std_level):
            return

        formatted_message = self._format_message(level, message, context)
        if kwargs:
            extras = ", ".join(f"{key}={self._format_value(value)}" for key, value in kwargs.items())
            formatted_message += self._colorize(f" | {extras}", Colors.DIM)

        self._logger.log(std_level, formatted_message)

    def debug(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.WARNING, message, context, **kwargs)

    def error(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.ERROR, message, context, **kwargs)

    def success(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.SUCCESS, message, context, **kwargs)

    def banner(self, message: str, context: Optional[str] = None, char: str = "═", width: int = 60):
        """Log a centered banner line, used around startup."""
        content = f" {message} "
        if len(content) < width - 4:
            padding = (width - len(content)) // 2
            content = char * padding + content + char * (width - len(content) - padding)
        self._log(LogLevel.INFO, self._colorize(content, Colors.BRIGHT_CYAN + Colors.BOLD), context)


# Global logger instances for different services
auth_logger = GymLogger("AUTH")
user_logger = GymLogger("USER")
workout_logger = GymLogger("WORKOUT")
program_logger = GymLogger("PROGRAM")
payment_logger = GymLogger("PAYMENT")
metric_logger = GymLogger("METRIC")
activity_logger = GymLogger("ACTIVITY")
db_logger = GymLogger("DATABASE")
api_logger = GymLogger("API")


def get_logger(service_name: str) -> GymLogger:
    """Get a logger instance for a specific service"""
    return GymLogger(service_name)
