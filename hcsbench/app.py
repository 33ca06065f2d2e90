"""The application: configuration, repositories and the main menu."""

from __future__ import annotations

import argparse
import sys

from hcsbench.alg_testing import AlgTestingResultRepository
from hcsbench.computing_system import ComputingSystemRepository
from hcsbench.config import AppConfig, ConfigError
from hcsbench.menu import MainMenu

DEFAULT_CONFIG_FILE = "config.txt"


class Application:
    """Ties the configuration, the repositories and the main menu together."""

    def __init__(self) -> None:
        self.menu = MainMenu()
        self.app_config = AppConfig()
        self.app_config.ensure_directories()
        self.computing_system_repository = ComputingSystemRepository()
        self.alg_testing_result_repository = AlgTestingResultRepository()

    def start(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Load the configuration and run the main menu.

        Raises ConfigError when the configuration cannot be read.
        """
        self.app_config = AppConfig.from_file(config_file)
        print("Application initialization: OK")

        self.computing_system_repository = ComputingSystemRepository(
            self.app_config.dir_computing_system_repository
        )
        print("Computing system repository initialization: OK")

        self.menu.start(
            self.app_config,
            self.computing_system_repository,
            self.alg_testing_result_repository,
        )


def main(argv=None) -> int:
    """Run the application; return the process exit status."""
    parser = argparse.ArgumentParser(
        description="Benchmark summation on CPU threads and record results."
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help="configuration file (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    print("Starting application...")
    app = Application()
    try:
        app.start(args.config)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())