import os
from pathlib import Path
from typing import Any, Callable, TypeVar, get_args, get_origin

import dotenv

from .log import logger_wrapper

logger = logger_wrapper("env")

T = TypeVar("T", bound=type)

_loaded: set[Path] = set()


def env_file() -> Path:
    if os.getenv("ENVIRONMENT") == "dev":
        return Path(".env.dev")
    return Path(".env")


def load_env(path: Path | None = None) -> bool:
    """Load an env file once; variables already set are kept."""
    path = path or env_file()
    if path in _loaded:
        return False
    _loaded.add(path)
    found = dotenv.load_dotenv(path, override=False)
    if found:
        logger.debug(f"Loaded variables from {path}")
    return found


def _value_parser(value_type) -> Callable[[str], Any]:
    if value_type is bool:
        return lambda v: v.strip().lower() in {"true", "1"}
    if get_origin(value_type) is list:
        item = _value_parser(get_args(value_type)[0])
        return lambda v: [item(_.strip()) for _ in v.split(",") if _.strip()]
    if get_origin(value_type) is tuple:
        item = _value_parser(get_args(value_type)[0])
        return lambda v: tuple(
            item(_.strip()) for _ in v.split(",") if _.strip())
    return value_type


def set_class_var_by_env(cls) -> dict[str, Any]:
    """Override annotated class variables with upper-cased env variables.

    Private names (leading underscore) are skipped. A variable that is
    neither set in the environment nor given a default becomes None.
    """
    injected = {}
    for key, value_type in cls.__annotations__.items():
        if key.startswith("_"):
            continue
        env_value = os.getenv(key.upper(), None)
        if env_value is None:
            if not hasattr(cls, key):
                setattr(cls, key, None)
                injected[key] = None
            continue
        try:
            value = _value_parser(value_type)(env_value)
        except ValueError as e:
            raise ValueError(
                f"Invalid value for {key.upper()}: {env_value!r}") from e
        setattr(cls, key, value)
        injected[key] = value
    return injected


def inject_env(path: Path | None = None) -> Callable[[T], T]:

    def decorator(cls: T) -> T:
        load_env(path)
        updated = set_class_var_by_env(cls)
        if updated:
            logger.debug(f"{cls.__name__}: " +
                         ", ".join(f"{k}={v!r}" for k, v in updated.items()))
        return cls

    return decorator
