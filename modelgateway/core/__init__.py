"""Core functionality"""

from .config import get_config, set_config, clear_config_cache, EnvConfig
from .exceptions import (
    ErrorKind,
    LangException,
    NotImplementedException,
    ValidationException,
    NetworkException,
    ProviderException,
)
from .exception_handling import (
    ExceptionHandling,
    DefaultExceptionHandler,
    register_exception_handlers,
)

__all__ = [
    "get_config",
    "set_config",
    "clear_config_cache",
    "EnvConfig",
    "ErrorKind",
    "LangException",
    "NotImplementedException",
    "ValidationException",
    "NetworkException",
    "ProviderException",
    "ExceptionHandling",
    "DefaultExceptionHandler",
    "register_exception_handlers",
]
