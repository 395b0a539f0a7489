from __future__ import annotations

import logging
import os


def configure_logging(
    *,
    cli_level: str | None = None,
    verbosity: int = 0,
    default: str = "WARNING",
) -> None:
    """Configure root logging for the app.

    Precedence:
    1) `cli_level` (e.g. `--log-level` from argparse)
    2) `verbosity` (count of `-v` flags: 1 -> INFO, 2+ -> DEBUG)
    3) env var `ASDBCTL_LOG_LEVEL`
    4) `default`

    This should be called once, early in the entrypoint.
    """

    if cli_level:
        level_name = cli_level
    elif verbosity >= 2:
        level_name = "DEBUG"
    elif verbosity == 1:
        level_name = "INFO"
    else:
        level_name = os.environ.get("ASDBCTL_LOG_LEVEL") or default

    level = getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )
