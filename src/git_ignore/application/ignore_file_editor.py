"""Ignore file editor - list, add and remove patterns"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from git_ignore.domain import patterns
from git_ignore.domain.config.editor import EditorConfig
from git_ignore.domain.errors import (
    IgnoreFileNotFoundError,
    IgnoreFileReadError,
    IgnoreFileWriteError,
)
from git_ignore.infrastructure.paths import ignore_file_path

logger = logging.getLogger(__name__)

Transform = Callable[[List[str], str], List[str]]

# Undecodable bytes survive a read/write cycle as lone surrogates
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def _strip_line_terminator(line: str) -> str:
    """Drop the trailing "\\n" and at most one "\\r" before it"""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class IgnoreFileEditor:
    """Read-modify-write editor over a line oriented ignore file

    Every mutating call reads the whole file, transforms the lines in memory,
    optionally deduplicates them and rewrites the file from scratch. Nothing
    is cached between calls.
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        """Initialize editor

        Args:
            config: Editor configuration (local file, no deduplication if None)
        """
        self.config = config or EditorConfig()

    @property
    def path(self) -> Path:
        """Path of the ignore file this editor operates on"""
        return ignore_file_path(self.config.global_)

    def read_lines(self) -> List[str]:
        """Read the ignore file line by line

        Returns:
            Lines in file order, without line terminators

        Raises:
            IgnoreFileNotFoundError: If the file does not exist
            IgnoreFileReadError: If the file cannot be opened or scanned
        """
        file_path = self.path
        if not file_path.exists():
            raise IgnoreFileNotFoundError(f"Ignore file not found: {file_path}")

        # Only "\n" ends a line; a lone "\r" is part of the pattern
        try:
            with open(file_path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
                return [_strip_line_terminator(line) for line in f]
        except OSError as e:
            raise IgnoreFileReadError(f"Failed to read {file_path}: {e}") from e

    def write_lines(self, lines: List[str]) -> None:
        """Replace the ignore file with the given lines

        The existing file is deleted and recreated; each line is written with
        a trailing newline.

        Raises:
            IgnoreFileWriteError: If the file cannot be created or written
        """
        file_path = self.path
        try:
            file_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise IgnoreFileWriteError(f"Failed to replace {file_path}: {e}") from e

        try:
            if self.config.global_:
                file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise IgnoreFileWriteError(f"Failed to write {file_path}: {e}") from e
        logger.debug(f"Wrote {len(lines)} lines to {file_path}")

    def list_patterns(self) -> List[str]:
        """Return all patterns of the ignore file in file order

        Raises:
            IgnoreFileNotFoundError: If the file does not exist
        """
        return self.read_lines()

    def add(self, pattern: str) -> List[str]:
        """Append a pattern to the ignore file, creating the file if needed

        Args:
            pattern: Pattern line to append

        Returns:
            Lines written to the file
        """
        lines = self._apply(pattern, lambda lines, p: lines + [p], require_existing=False)
        logger.info(f"Added pattern {pattern!r} to {self.path}")
        return lines

    def remove(self, pattern: str) -> List[str]:
        """Remove every occurrence of a pattern from the ignore file

        Args:
            pattern: Pattern line to remove

        Returns:
            Lines written to the file

        Raises:
            IgnoreFileNotFoundError: If the file does not exist
        """
        removed = 0

        def _remove(lines: List[str], p: str) -> List[str]:
            nonlocal removed
            result = patterns.remove(lines, p)
            removed = len(lines) - len(result)
            return result

        lines = self._apply(pattern, _remove, require_existing=True)
        if removed:
            logger.info(f"Removed {removed} occurrence(s) of {pattern!r} from {self.path}")
        else:
            logger.info(f"Pattern {pattern!r} not present in {self.path}")
        return lines

    def _apply(self, pattern: str, transform: Transform, require_existing: bool) -> List[str]:
        """Run the shared read, transform, deduplicate and write pipeline

        Args:
            pattern: Pattern passed to the transform, must not be empty
            transform: Function producing the new lines from the current ones
            require_existing: Fail instead of starting empty when the file is missing

        Returns:
            Lines written to the file
        """
        patterns.validate_pattern(pattern)

        logger.debug(f"Using ignore file {self.path}")
        if require_existing or self.path.exists():
            lines = self.read_lines()
        else:
            lines = []

        lines = transform(lines, pattern)
        if self.config.unique:
            lines = patterns.unique(lines)

        self.write_lines(lines)
        return lines
