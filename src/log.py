'''Structured logging for curvedtext.

The library only asks for loggers; applications call `configure_logging`
once to decide where events go.
'''

import logging
import sys

import structlog


def configure_logging(level: str = 'INFO', json: bool = False) -> structlog.stdlib.BoundLogger:
    '''
    Configure structured console logging.

    Args:
        level (str, optional): Logging level name. Defaults to 'INFO'.
        json (bool, optional): Render events as JSON lines instead of the console format.

    Returns:
        structlog.stdlib.BoundLogger: The package logger.
    '''
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))

    root_logger = logging.getLogger('curvedtext')
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper()))

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger('curvedtext')
    logger.debug('Logging initialized', level=level)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
