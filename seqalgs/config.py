from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Any, Dict

SUPPORTED_BACKENDS = {"list", "numpy"}
_DEFAULT_RFIND_DEPTH = 256


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _parse_depth(raw: str | None) -> int:
    depth = _parse_optional_int(raw)
    if depth is None:
        return _DEFAULT_RFIND_DEPTH
    if depth < 1:
        raise ValueError(f"Recursion depth must be positive, got {depth}.")
    return depth


def _infer_backend_from_env() -> str:
    backend = os.getenv("SEQALGS_BACKEND", "list").strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(f"Unsupported backend '{backend}'. Expected one of {SUPPORTED_BACKENDS}.")
    return backend


@dataclass(frozen=True)
class RuntimeConfig:
    backend: str
    log_level: str
    rfind_depth: int
    seed: int | None
    cross_check: bool


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("seqalgs")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig(
        backend=_infer_backend_from_env(),
        log_level=os.getenv("SEQALGS_LOG_LEVEL", "INFO").upper(),
        rfind_depth=_parse_depth(os.getenv("SEQALGS_RFIND_DEPTH")),
        seed=_parse_optional_int(os.getenv("SEQALGS_SEED")),
        cross_check=_bool_from_env(os.getenv("SEQALGS_CROSS_CHECK"), default=True),
    )
    _configure_logging(config.log_level)
    return config


@lru_cache(maxsize=None)
def rfind_depth_budget() -> int:
    """Recursion budget for `rfind`, read without validating unrelated settings.

    Unparsable or non-positive values fall back to the default.
    """

    try:
        return _parse_depth(os.getenv("SEQALGS_RFIND_DEPTH"))
    except ValueError:
        return _DEFAULT_RFIND_DEPTH


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
    rfind_depth_budget.cache_clear()


def describe_runtime() -> Dict[str, Any]:
    """Return the active runtime configuration as a plain dictionary."""

    return asdict(runtime_config())
