"""
Logging configuration using structlog.

Host projects call ``setup_logging()`` from their settings module and hand
the returned dict to Django:

    from json_field_group.logging_config import setup_logging
    LOGGING = setup_logging(BASE_DIR)

Modules log through ``structlog.get_logger(__name__)``. Console output is
colored and human-readable; when a log directory is known, structured JSON
lines are also written to a file rotated at UTC midnight.
"""

from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import structlog

from .config import get_log_dir

LOG_FILE_NAME = 'json_field_group.jsonl'

CALLSITE_PARAMETERS = (
    structlog.processors.CallsiteParameter.MODULE,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
)


class JSONLinesFileHandler(TimedRotatingFileHandler):
    """
    JSON lines log file, rotated daily at UTC midnight.

    The file is opened on the first record, so building the LOGGING dict
    never creates an empty log.
    """

    def __init__(self, filename, backup_count: int = 30):
        super().__init__(
            filename,
            when='midnight',
            backupCount=backup_count,
            encoding='utf-8',
            delay=True,
            utc=True,
        )


def _shared_processors(callsite: bool = False):
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if callsite:
        processors.append(structlog.processors.CallsiteParameterAdder(parameters=CALLSITE_PARAMETERS))
    processors.append(structlog.processors.format_exc_info)
    return processors


def log_file_path(base_dir) -> Path:
    logs_dir = Path(base_dir) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir / LOG_FILE_NAME


def setup_logging(base_dir=None):
    """
    Configure structlog and return a Django LOGGING dict.

    Idempotent: structlog is only configured once, but the LOGGING dict is
    always returned so Django can set up handlers.

    Args:
        base_dir: Directory that receives ``logs/json_field_group.jsonl``.
            Falls back to the ``LOG_DIR`` setting; without either, only the
            console handler is configured.

    Returns:
        dict: Django LOGGING configuration dictionary
    """
    if base_dir is None:
        base_dir = get_log_dir()

    if not structlog.is_configured():
        structlog.configure(
            processors=_shared_processors(callsite=True) + [
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
            'level': 'INFO',
        },
    }

    if base_dir is not None:
        handlers['file'] = {
            '()': 'json_field_group.logging_config.JSONLinesFileHandler',
            'filename': str(log_file_path(base_dir)),
            'backup_count': 30,
            'formatter': 'json',
            'level': 'DEBUG',
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.dev.ConsoleRenderer(colors=True),
                'foreign_pre_chain': _shared_processors(),
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': _shared_processors(callsite=True),
            },
        },
        'handlers': handlers,
        'loggers': {
            'json_field_group': {
                'handlers': list(handlers),
                'level': 'DEBUG',
                'propagate': False,
            },
        },
    }
