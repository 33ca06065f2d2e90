"""Application configuration read from a simple key-value text file."""

from __future__ import annotations

import re
from dataclasses import dataclass

from hcsbench.filesystem import create_dir, is_dir_exists, is_file_exists

_HEADER = "AppConfig"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(text)
    return value


@dataclass
class AppConfig:
    """Configuration of the application."""

    file_config: str = "config.txt"
    comp_system_id: int = 1
    dir_calc_test_results: str = "CalcTestResults"
    dir_computing_system_repository: str = "ComputingSystemRepository"
    is_initialized: bool = True
    message: str = "AppConfig status: OK"

    @classmethod
    def from_file(cls, file_name: str) -> "AppConfig":
        """Read the configuration and make sure its directories exist.

        The file starts with the word ``AppConfig`` followed by
        whitespace-separated ``parameter value`` pairs.
        """
        if not is_file_exists(file_name):
            raise ConfigError(f'Error! Config file "{file_name}" not found!')

        try:
            with open(file_name, encoding="utf-8") as source:
                tokens = source.read().split()
        except OSError as exc:
            raise ConfigError(f'Config file "{file_name}" is not opened!') from exc

        if not tokens or tokens[0] != _HEADER:
            raise ConfigError(f'Config file "{file_name}" format is not AppConfig!')

        config = cls(file_config=file_name)
        pairs = tokens[1:]
        for param, value in zip(pairs[0::2], pairs[1::2]):
            if param == "compSystemId":
                try:
                    config.comp_system_id = _parse_int(value)
                except ValueError as exc:
                    raise ConfigError(
                        f'Config file "{file_name}": compSystemId parameter '
                        "is not recognized!"
                    ) from exc
            elif param == "dir_calcTestResults":
                config.dir_calc_test_results = value
            elif param == "dir_computingSystemRepository":
                config.dir_computing_system_repository = value
            else:
                raise ConfigError(
                    f'Config file "{file_name}": parameter "{param}" with value '
                    f'"{value}" is not recognized!'
                )

        config.ensure_directories()
        return config

    def ensure_directories(self) -> None:
        """Create the result and repository directories if they are missing."""
        for path in (self.dir_calc_test_results, self.dir_computing_system_repository):
            if not is_dir_exists(path):
                create_dir(path)

    def format(self) -> str:
        if not self.is_initialized:
            return f"AppConfig: [NOT INITIALIZED; {self.message}]"
        return (
            "AppConfig: ["
            f"compSystemId: {self.comp_system_id}; "
            f"dir_calcTestResults: {self.dir_calc_test_results}; "
            f"dir_computingSystemRepository: {self.dir_computing_system_repository}"
            "]"
        )