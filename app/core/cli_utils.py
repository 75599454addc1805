import logging

# CLI output is plain logging under the project logger
cli_logger = logging.getLogger("lyricsnap.cli")


def print_header(title: str) -> None:
    """Top-level section header (logged at INFO)."""
    cli_logger.info("=== %s ===", title)


def print_info(message: str) -> None:
    """Neutral information."""
    cli_logger.info(message)


def print_step(message: str) -> None:
    """Ongoing step."""
    cli_logger.info("→ %s", message)


def print_success(message: str) -> None:
    """OK result."""
    cli_logger.info("✅ %s", message)


def print_warning(message: str) -> None:
    """Non-blocking warning."""
    cli_logger.warning(message)


def print_error(message: str) -> None:
    """Blocking or serious error."""
    cli_logger.error(message)


def print_block(text: str) -> None:
    """
    Multi-line text (lyrics), logged line by line so every line keeps the
    log prefix.
    """
    for line in text.splitlines():
        cli_logger.info("  %s", line)
