"""
Global configuration object for the CLI.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class CliConfig:
    config_path: Optional[Path]
    pause: bool
    verbose: bool
