import logging
import os
from abc import abstractmethod, ABC
from typing import Any, List, Optional


class BaseCollector(ABC):
    logger = logging.getLogger(__name__)
    CGROUP_DIR = '/sys/fs/cgroup'

    @abstractmethod
    def collect(self) -> Any:
        raise NotImplementedError

    # --- Shared Helper Methods ---
    @staticmethod
    def _probe_file(file, default=None):
        """
        Reads a file safely.
        Returns: stripped content, or `default` if the file can't be read.
        """
        try:
            with open(file, 'r') as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError):
            BaseCollector.logger.debug(f"Failed to read file: {file}")
            return default

    @staticmethod
    def _parse_int(token: Optional[str]) -> Optional[int]:
        """Parses a signed decimal integer, None on failure."""
        if token is None:
            return None
        token = token.strip()
        digits = token[1:] if token[:1] in ('-', '+') else token
        if not digits.isdecimal():
            BaseCollector.logger.debug(f"Failed to parse int: {token!r}")
            return None
        return int(token, 10)

    @staticmethod
    def _parse_unsigned(token: Optional[str]) -> Optional[int]:
        """Parses an unsigned decimal integer (no sign allowed), None on failure."""
        if token is None:
            return None
        token = token.strip()
        if not token.isdecimal():
            BaseCollector.logger.debug(f"Failed to parse unsigned int: {token!r}")
            return None
        return int(token, 10)

    @staticmethod
    def _read_int(file) -> Optional[int]:
        """
        Reads a file and converts content to int.
        Returns None when the file is missing or the content is not a number.
        """
        return BaseCollector._parse_int(BaseCollector._probe_file(file))

    @staticmethod
    def _get_file_lines(file) -> Optional[List[str]]:
        """
        Reads a file safely and returns its non-empty, trimmed lines.
        Returns None when the file can't be read so callers can tell
        "missing" apart from "empty".
        """
        content = BaseCollector._probe_file(file)
        if content is None:
            return None
        return [line.strip() for line in content.splitlines() if line.strip()]

    @staticmethod
    def _exists(path) -> bool:
        # os.path.exists already maps permission errors to False
        return os.path.exists(path)
