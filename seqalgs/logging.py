"""Loggers for the self-test harness and the `seqalgs` CLI.

Everything hangs off the `seqalgs` logger whose level and handler come from
`SEQALGS_LOG_LEVEL`. The algorithms in `seqalgs.algo` never log.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config as sa_config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return `seqalgs` or `seqalgs.<name>` at the configured level.

    The harness asks for `harness`, the CLI for `cli`.
    """

    logger_name = "seqalgs" if name is None else f"seqalgs.{name}"
    runtime = sa_config.runtime_config()
    logger = logging.getLogger(logger_name)
    logger.setLevel(runtime.log_level)
    return logger
