import logging

# Project logger shared by the API, the pipeline and the client
logger = logging.getLogger("lyricsnap")


def log_info(message: str) -> None:
    """
    Neutral information message.
    """
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step / ongoing work.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    """
    Successful outcome.
    """
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Warning / non-fatal problem (e.g. an upstream service that failed softly).
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str, exc_info: bool = False) -> None:
    """
    Error / fatal problem. Pass exc_info=True from an except block to keep
    the traceback in the server logs.
    """
    logger.error("❌ %s", message, exc_info=exc_info)
