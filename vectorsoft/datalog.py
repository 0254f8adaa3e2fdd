"""Mission data logging: log channels (file-backed and simulated) and a CSV log manager."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import IO, Iterator, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_MAX_LOG_INDEX = 1000
_LINE_LIMIT = 127  # longest line the manager formats, as with a 128-byte buffer


class LogError(Enum):
    """Last error recorded by a file log channel."""

    NONE = "None"
    SD_INIT_FAIL = "SD init failed"
    DIR_FAIL = "Log directory creation failed"
    FILE_OPEN_FAIL = "File open failed"
    FILE_WRITE_FAIL = "File write failed"
    FILE_FLUSH_FAIL = "File flush failed"
    UNKNOWN = "Unknown"


class LogChannel(ABC):
    """A line-oriented log sink that can also read log files back."""

    @abstractmethod
    def begin(self) -> None:
        """Prepare the channel for writing."""

    @abstractmethod
    def log(self, msg: str) -> None:
        """Append one line."""

    @abstractmethod
    def flush(self) -> None:
        """Push buffered lines to storage."""

    @abstractmethod
    def is_ready(self) -> bool:
        """True if lines can be written."""

    @abstractmethod
    def read_lines(self, filename: PathLike) -> Iterator[str]:
        """Iterate over the lines of a log file."""


class LogStub(LogChannel):
    """Simulated channel that reports lines through logging and stores nothing."""

    def begin(self) -> None:
        logger.info("LogStub BEGIN")

    def log(self, msg: str) -> None:
        logger.info("LogStub: %s", msg)

    def flush(self) -> None:
        pass

    def is_ready(self) -> bool:
        return True

    def read_lines(self, filename: PathLike) -> Iterator[str]:
        logger.info("LogStub: openRead")
        return iter(())


class FileLogChannel(LogChannel):
    """Writes numbered CSV log files (``<prefix>NNN.csv``) into a directory."""

    def __init__(self, log_dir: PathLike = "logs", prefix: str = "log_") -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.current_path: Optional[Path] = None
        self.last_error = LogError.NONE
        self._file: Optional[IO[str]] = None

    def __enter__(self) -> FileLogChannel:
        self.begin()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _log_path(self, idx: int) -> Path:
        return self.log_dir / f"{self.prefix}{idx:03d}.csv"

    def _select_next_log_file(self) -> Path:
        for idx in range(1, _MAX_LOG_INDEX):
            path = self._log_path(idx)
            if not path.exists():
                return path
        return self._log_path(_MAX_LOG_INDEX - 1)

    def begin(self) -> None:
        """Create the log directory if needed and open the next free log file.

        Raises OSError, after recording ``last_error``, if either step fails.
        """
        self.close()
        if not self.log_dir.exists():
            try:
                self.log_dir.mkdir(parents=True)
            except OSError:
                self.last_error = LogError.DIR_FAIL
                logger.error("Log directory creation failed: %s", self.log_dir)
                raise
        self.current_path = self._select_next_log_file()
        try:
            self._file = open(self.current_path, "a", encoding="utf-8")
        except OSError:
            self.last_error = LogError.FILE_OPEN_FAIL
            logger.error("Cannot open log file: %s", self.current_path)
            raise
        self.last_error = LogError.NONE
        logger.info("Log file: %s", self.current_path)

    def log(self, msg: str) -> None:
        """Append ``msg`` as one line; raises if no log file is open."""
        if self._file is None:
            self.last_error = LogError.FILE_WRITE_FAIL
            logger.error("Write attempted without open log file.")
            raise RuntimeError("log file is not open")
        try:
            self._file.write(f"{msg}\n")
        except OSError:
            self.last_error = LogError.FILE_WRITE_FAIL
            logger.error("File write failed.")
            raise

    def flush(self) -> None:
        if self._file is not None:
            try:
                self._file.flush()
            except OSError:
                self.last_error = LogError.FILE_FLUSH_FAIL
                raise

    def is_ready(self) -> bool:
        return self._file is not None and not self._file.closed

    def close(self) -> None:
        """Close the current log file, if any."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def read_lines(self, filename: PathLike) -> Iterator[str]:
        """Open ``filename`` and iterate over its lines without line terminators."""
        try:
            handle = open(filename, encoding="utf-8", newline="")
        except OSError:
            self.last_error = LogError.FILE_OPEN_FAIL
            logger.error("Cannot open for read: %s", filename)
            raise
        return self._iter_lines(handle)

    @staticmethod
    def _iter_lines(handle: IO[str]) -> Iterator[str]:
        with handle:
            for line in handle:
                yield line[:-1] if line.endswith("\n") else line

    def list_log_files(self) -> list[tuple[str, int]]:
        """Names and sizes in bytes of the regular files in the log directory."""
        try:
            entries = sorted(self.log_dir.iterdir())
        except OSError:
            logger.error("Cannot open directory %s", self.log_dir)
            raise
        return [(entry.name, entry.stat().st_size) for entry in entries if entry.is_file()]

    def delete_log_file(self, filename: PathLike) -> bool:
        """Delete ``filename``; False if it does not exist or cannot be removed."""
        path = Path(filename)
        if not path.exists():
            logger.info("File not found: %s", path)
            return False
        try:
            path.unlink()
        except OSError:
            logger.error("Failed to delete file: %s", path)
            return False
        logger.info("Deleted file: %s", path)
        return True

    def error_string(self) -> str:
        """Human-readable description of ``last_error``."""
        return self.last_error.value


class DataLogManager:
    """Formats mission events and sensor samples as CSV lines for a log channel."""

    def __init__(self, channel: Optional[LogChannel]) -> None:
        self.channel = channel

    def log_raw(self, line: str) -> None:
        """Write ``line`` if the channel exists and is ready; otherwise drop it."""
        if self.channel is not None and self.channel.is_ready():
            self.channel.log(line)

    def log_event(
        self, mission_time: float, event: str, value1: float = 0.0, value2: float = 0.0
    ) -> None:
        line = f"{mission_time:.3f},{event},{value1:.3f},{value2:.3f}"
        self.log_raw(line[:_LINE_LIMIT])

    def log_sensor(
        self,
        mission_time: float,
        accel_x: float,
        accel_y: float,
        accel_z: float,
        gyro_x: float,
        gyro_y: float,
        gyro_z: float,
    ) -> None:
        values = ",".join(
            f"{v:.3f}" for v in (accel_x, accel_y, accel_z, gyro_x, gyro_y, gyro_z)
        )
        self.log_raw(f"{mission_time:.3f},SENSOR,{values}"[:_LINE_LIMIT])

    def flush(self) -> None:
        if self.channel is not None:
            self.channel.flush()

    def log_header(self) -> None:
        """Write the CSV header lines for event and sensor records."""
        if self.channel is None:
            raise ValueError("no log channel to write the header to")
        self.channel.log("TIME,EVENT,VAL1,VAL2")
        self.channel.log("TIME,EVENT,ACCEL_X,ACCEL_Y,ACCEL_Z,GYRO_X,GYRO_Y,GYRO_Z")


def create_logger(
    test_mode: bool, log_dir: PathLike = "logs", prefix: str = "log_"
) -> LogChannel:
    """A simulated channel in test mode, else a file channel in ``log_dir``."""
    if test_mode:
        return LogStub()
    return FileLogChannel(log_dir, prefix)