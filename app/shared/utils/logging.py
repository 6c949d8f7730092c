# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a smart logging system that records what happens in the app in a structured way,
# making it easy to monitor, debug, and understand how the e-learning API is behaving.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), request/user context
# stamped onto every record through context variables, and one-time root configuration.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), request logging middleware, authentication dependencies

import logging
import sys
from contextvars import ContextVar
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'elearning-api'

_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request ID, user ID and service name to every log record.
    """
    
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.service = SERVICE_NAME
        return True


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """
    Setup application logging configuration.
    
    Args:
        log_level: Overrides settings.LOG_LEVEL
        log_format: 'json' or 'text', overrides settings.LOG_FORMAT
        
    Returns:
        The startup logger
    """
    global _logging_configured
    
    if _logging_configured:
        return logging.getLogger("startup")
    
    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    
    if log_format.lower() == 'json':
        formatter: logging.Formatter = JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s %(user_id)s %(service)s',
            rename_fields={'asctime': 'timestamp', 'levelname': 'level', 'name': 'logger'},
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ContextFilter())
    root_logger.addHandler(console_handler)
    
    logging.getLogger('pymongo').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    
    _logging_configured = True
    return logging.getLogger("startup")
