import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configures structured JSON logging for the transcriber.

    Installs a JSON formatter that emits timestamp, level, logger name and
    message (plus any ``extra`` fields) on a single stdout handler attached
    to the root logger. Calling it again replaces the handler, so the level
    can be changed after the CLI has parsed its options.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # urllib3 debug records carry presigned query strings
    logging.getLogger("urllib3").setLevel(max(root_logger.level, logging.INFO))

    return root_logger
