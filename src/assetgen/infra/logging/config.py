from __future__ import annotations

"""
Logging Configuration Model.

assetgen runs inside build steps, so the console carries bare
'LEVEL | message' lines on stderr while the optional log file keeps
timestamps and logger names for later inspection.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one generator run.

    Attributes:
        level: Level name ('DEBUG' under --debug, 'INFO' otherwise).
        console: Mirror records to stderr.
        log_file: Rotating log file given with --log-file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @property
    def level_number(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        number = logging.getLevelName((self.level or "").strip().upper())
        return number if isinstance(number, int) else logging.INFO
