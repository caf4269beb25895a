"""
Logging helper module for terminal-first logging.
Diagnostics go to stderr with formatted prefixes (stdout carries the report),
and optionally to a log file.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

_log_file: Optional[TextIO] = None
_log_file_path: Optional[Path] = None
_verbose = True


def _log(message: str, always: bool = False):
    """Write message to stderr and to the log file if one is open."""
    if _verbose or always:
        print(message, file=sys.stderr)
    if _log_file is not None:
        _log_file.write(message + '\n')
        _log_file.flush()


class Log:
    """Simple logging class that outputs to stderr and log file with formatted prefixes."""

    @staticmethod
    def section(title: str):
        """Print a section header: blank line + '===== TITLE ====='"""
        _log("")
        _log(f"===== {title} =====")

    @staticmethod
    def info(message: str):
        """Print an info message: '[INFO] message'"""
        _log(f"[INFO] {message}")

    @staticmethod
    def debug(message: str):
        """Print a debug message: '[DEBUG] message'"""
        _log(f"[DEBUG] {message}")

    @staticmethod
    def warn(message: str):
        """Print a warning message: '[WARN] message'"""
        _log(f"[WARN] {message}", always=True)

    @staticmethod
    def error(message: str):
        """Print an error message: '[ERROR] message'"""
        _log(f"[ERROR] {message}", always=True)

    @staticmethod
    def kv(pairs: dict):
        """
        Print key-value pairs: '[KV] key=value | key2=value2'

        Args:
            pairs: Dictionary of key-value pairs to print
        """
        kv_string = " | ".join([f"{k}={v}" for k, v in pairs.items()])
        _log(f"[KV] {kv_string}")

    @staticmethod
    def set_verbose(flag: bool):
        """Toggle section/info/debug/kv output on stderr. Warnings and errors always print."""
        global _verbose
        _verbose = flag

    @staticmethod
    def open_file(path: Path) -> Path:
        """
        Mirror every message into a log file (appending).

        Args:
            path: Log file location; parent directories are created

        Returns:
            The resolved log file path
        """
        global _log_file, _log_file_path
        Log.close_file()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(path, 'a', encoding='utf-8')
        _log_file_path = path
        return path

    @staticmethod
    def close_file():
        """Close the log file, if any."""
        global _log_file, _log_file_path
        if _log_file is not None:
            _log_file.close()
        _log_file = None
        _log_file_path = None

    @staticmethod
    def get_log_path() -> Optional[str]:
        """Get the path to the current log file."""
        return str(_log_file_path) if _log_file_path is not None else None
