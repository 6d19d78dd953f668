"""Configuration management for Retagger."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUE_VALUES


def load_config(env_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"

    env_path = Path(env_file)
    env_loaded = env_path.exists()
    if env_loaded:
        load_dotenv(dotenv_path=env_path)

    return {
        "root": os.getenv("RETAGGER_ROOT") or ".",
        "no_color": _env_flag("RETAGGER_NO_COLOR"),
        "verbose": _env_flag("RETAGGER_VERBOSE"),
        "env_file": str(env_path.resolve()) if env_loaded else None,
    }


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the retagger logger with a console handler on stderr."""
    logger = logging.getLogger("retagger")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger
