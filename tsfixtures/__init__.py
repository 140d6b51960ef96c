"""
Timestamp fixtures package.

This package generates unique random ISO-8601 timestamps and renders
them into parse-benchmark harness files for Elm and JavaScript.
"""

__version__ = "0.1.0"

# simple logger setup (so every module gets consistent logging)
import logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

from pathlib import Path

CONFIG_PATH = Path(__file__).parent / "config" / "project.yaml"

__all__ = ["__version__", "CONFIG_PATH"]
