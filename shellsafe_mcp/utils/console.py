"""Colorful console logging formatter with zone-aware timestamps."""

import logging
import re
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "shellsafe_mcp.server": COLORS["bright_cyan"],
    "shellsafe_mcp.tools": COLORS["bright_blue"],
    "shellsafe_mcp.resources": COLORS["cyan"],
    "shellsafe_mcp.middleware": COLORS["yellow"],
    "default": COLORS["white"],
}

_PACKAGE_PREFIX = "shellsafe_mcp."

_URI_PATTERN = re.compile(r"(\w+://[^\s]+)")
_MS_PATTERN = re.compile(r"(\d+\.?\d*ms)")
_TOOL_PATTERN = re.compile(r"(TOOL: \w+)")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with zone-aware timestamps and component highlighting."""

    def __init__(
        self,
        use_colors: bool = True,
        timezone: str | tzinfo = "America/New_York",
    ) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
            timezone: IANA zone name or tzinfo used for timestamps.
        """
        super().__init__()
        self.use_colors = use_colors
        self.tz = ZoneInfo(timezone) if isinstance(timezone, str) else timezone

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        """Format timestamp as HH:MM:SS.mmm MM/DD."""
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        """Format log level with color and fixed width."""
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        """Format component/logger name with color."""
        name = record.name
        if name.startswith(_PACKAGE_PREFIX):
            name = name[len(_PACKAGE_PREFIX):]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors and timestamp."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight tool names, resource URIs and durations."""
        if not self.use_colors:
            return message

        if "TOOL:" in message:
            message = _TOOL_PATTERN.sub(
                f"{COLORS['bright_cyan']}\\1{COLORS['reset']}", message
            )

        if "://" in message:
            message = _URI_PATTERN.sub(
                f"{COLORS['bright_blue']}\\1{COLORS['reset']}", message
            )

        if "ms" in message:
            message = _MS_PATTERN.sub(
                f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
            )

        return message


class MCPRequestFormatter(ColorfulFormatter):
    """Extended formatter with MCP request/response markers."""

    def format(self, record: logging.LogRecord) -> str:
        """Format with a leading marker for lifecycle events."""
        base = super().format(record)

        if not self.use_colors:
            return base

        message = record.getMessage().lower()

        if "starting" in message or "ready" in message:
            return f"{COLORS['bright_green']}>>>{COLORS['reset']} {base}"
        elif "error" in message or "failed" in message:
            return f"{COLORS['bright_red']}!!{COLORS['reset']}  {base}"
        elif "slow" in message:
            return f"{COLORS['bright_yellow']}!{COLORS['reset']}   {base}"

        return f"    {base}"
