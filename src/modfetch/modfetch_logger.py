"""
Logger used across modfetch.
"""

import logging
from typing import Optional


class ModfetchLogger:
    """
    Thin wrapper around the "modfetch" logger from the logging module.
    """

    def __init__(self, name: str = "modfetch") -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

    def log(
        self,
        message: str,
        level: int,
        exc_info: Optional[BaseException] = None,
    ) -> None:
        """
        Log a single line at the given level.
        """
        message = message.replace("\n", " ")
        self.logger.log(level=level, msg=message, exc_info=exc_info)
