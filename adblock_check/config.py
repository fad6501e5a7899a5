"""Defaults that can be overridden from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

# Filter lists live in data/ at the project root, next to the package.
DEFAULT_DATA_DIR = (
    Path(__file__).resolve().parent.parent / "data" / "easylist.to" / "easylist"
)
DEFAULT_RULE_FILES = ("easylist.txt", "easyprivacy.txt")
DATA_DIR_ENV = "ADBLOCK_CHECK_DATA_DIR"


@dataclass(frozen=True)
class CheckConfig:
    data_dir: Path

    @property
    def default_rule_paths(self) -> Tuple[Path, ...]:
        return tuple(self.data_dir / name for name in DEFAULT_RULE_FILES)


def get_check_config() -> CheckConfig:
    data_dir = os.getenv(DATA_DIR_ENV)
    return CheckConfig(data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR)
