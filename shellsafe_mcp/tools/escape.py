"""Escape tool for building shell-safe arguments."""

import logging

from shellsafe_mcp.utils.shell import escape_args, escaped_string

logger = logging.getLogger(__name__)


async def escape(
    arg: str | None = None,
    args: list[str] | None = None,
) -> str:
    """Quote and escape text for use as POSIX shell arguments.

    The value is wrapped in double quotes and the characters
    " \\ $ ` ; & | and space are backslash-escaped. The result is one
    shell word in which expansion and command substitution cannot occur.
    Inside double quotes a POSIX shell drops the backslash only before
    " \\ $ and `; before space, ; & and | the backslash is kept, so
    those characters reach the command with a backslash in front.

    Args:
        arg: A single argument to escape. An empty string is allowed.
        args: Several arguments to escape and join with spaces,
            one shell word per argument.

    Examples:
        escape(arg="my file.txt") -> "my\\ file.txt"
        escape(args=["grep", "a|b", "log.txt"]) -> "grep" "a\\|b" "log.txt"

    Returns:
        The escaped argument(s), or an error message.
    """
    if arg is not None and args is not None:
        return "Error: Provide either 'arg' or 'args', not both."

    if arg is not None:
        return escaped_string(arg)

    if args is not None:
        logger.debug("Escaping %d argument(s)", len(args))
        return escape_args(args)

    return "Error: One of 'arg' or 'args' is required."
