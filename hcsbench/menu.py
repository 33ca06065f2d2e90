"""Interactive console menus of the application."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable

from hcsbench.alg_testing import AlgTestingResultRepository
from hcsbench.benchmark import test_array_helper, test_sum, test_vector_gpu
from hcsbench.computing_system import ComputingSystem, ComputingSystemRepository
from hcsbench.config import AppConfig
from hcsbench.console import get_int_from_user
from hcsbench.cuda import (
    LibSupport,
    cuda_device_count,
    get_cuda_device_properties,
    print_cuda_device_properties,
    write_gpu_specs,
)
from hcsbench.filesystem import (
    combine_path,
    create_dir,
    create_file,
    is_dir_exists,
    is_file_exists,
    remove_dir,
    remove_file,
)

GPU_SPECS_FILE = "gpu-specs.txt"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MenuCommand(Enum):
    """Commands of the main menu."""

    NONE = auto()
    EXIT = auto()
    HELP = auto()
    PRINT_LIB_SUPPORT = auto()
    PRINT_GPU_PARAMETERS = auto()
    WRITE_GPU_SPECS_TO_TXT_FILE = auto()
    TESTING_TEST_ARRAY_HELPER = auto()
    TESTING_TEST_VECTOR_GPU = auto()
    TESTING_TEST_SUM = auto()
    APPLICATION_CONFIG = auto()
    COMPUTING_SYSTEM_REPOSITORY_CONFIG = auto()
    ALG_TESTING_RESULT_REPOSITORY_CONFIG = auto()
    TESTING_FILE_SYSTEM_HELPER = auto()


@dataclass
class MenuCommandItem:
    """A menu entry: its command, the keys that select it, an action and a description."""

    comm: MenuCommand = MenuCommand.NONE
    keys: tuple[str, ...] = field(default_factory=tuple)
    func: Callable[[], None] | None = None
    desc: str = ""

    def check_key(self, key: str) -> bool:
        """Return whether ``key`` selects this entry."""
        return key in self.keys


def _read_word(prompt: str) -> str:
    """Show ``prompt`` and return the next whitespace-separated word typed."""
    print(prompt, end="", flush=True)
    while True:
        words = input().split()
        if words:
            return words[0]


def _parse_command(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _run_submenu(
    header: str, actions: dict[int, tuple[str | None, Callable[[], None] | None]]
) -> None:
    """Loop over numbered commands until the user chooses 1."""
    print(header)
    command = 0
    while command != 1:
        command = _parse_command(_read_word(">> "))
        if command == 1:
            print("Back to main menu")
            continue
        if command not in actions:
            print("Command not recognized!")
            continue
        announce, action = actions[command]
        if announce is not None:
            print(announce)
        if action is not None:
            action()


def _print_yes_no(result: bool, yes: str, no: str) -> bool:
    print(yes if result else no)
    return result


def _print_lib_support() -> None:
    print(LibSupport().format())


def _testing_array_helper() -> None:
    _print_yes_no(
        test_array_helper(), "TestArrayHelper correct!", "TestArrayHelper not correct!"
    )


def _testing_vector_gpu() -> None:
    _print_yes_no(test_vector_gpu(), "VectorGpu correct!", "VectorGpu not correct!")


def _testing_sum() -> None:
    _print_yes_no(test_sum(), "TestSum correct!", "TestSum not correct!")


def write_gpu_specs_to_txt_file() -> None:
    """Print every GPU's properties and write their summary to gpu-specs.txt."""
    count = cuda_device_count()
    print(f"Cuda devices number: {count}")
    if count <= 0:
        return
    for device_id in range(count):
        print(get_cuda_device_properties(device_id).format())
    with open(GPU_SPECS_FILE, "w", encoding="utf-8") as out:
        write_gpu_specs(out)


def application_config_menu(config: AppConfig) -> None:
    """Menu for viewing the application configuration."""
    _run_submenu(
        "----- Application configuration -----\n"
        "1 Back to main menu\n"
        "2 Print config",
        {2: (None, lambda: print(config.format()))},
    )


def _print_details(repo: ComputingSystemRepository) -> None:
    print("PrintDetails()")
    system_id = get_int_from_user("Enter computing system id: ")
    if not repo.is_exists(system_id):
        print("Not found!")
        return
    try:
        system = repo.get(system_id)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return
    print(system.format())


def _add_system(repo: ComputingSystemRepository) -> None:
    print("Add()")
    system = ComputingSystem.from_user()
    if repo.try_add(system):
        print(f"Computing system {system.system_id} added.")
    else:
        print(f"Error in adding computing system {system.system_id}!")


def _is_system_exists(repo: ComputingSystemRepository) -> None:
    system_id = get_int_from_user(
        "Enter computing system id: ", "Error! Enter integer number!"
    )
    print(f"id: {system_id}; isExists: {int(repo.is_exists(system_id))}")


def computing_system_repository_menu(repo: ComputingSystemRepository) -> None:
    """Menu for browsing and extending the computing system repository."""
    _run_submenu(
        "----- Computing system repository configuration -----\n"
        "1 Back to main menu\n"
        "2 Print config\n"
        "3 Print computing system list\n"
        "4 Print computing system details\n"
        "5 Add computing system\n"
        "6 Change computing system\n"
        "7 Remove computing system\n"
        "8 Is computing system exists",
        {
            2: ("Command: 2 Print config", lambda: print(repo.format_config())),
            3: ("Command: 3 Print computing system list", lambda: print(repo.format_list())),
            4: ("Command: 4 Print computing system details", lambda: _print_details(repo)),
            5: ("Command: 5 Add computing system", lambda: _add_system(repo)),
            6: ("Command: 6 Change computing system", lambda: print("Change()")),
            7: ("Command: 7 Remove computing system", lambda: print("Remove()")),
            8: ("Command: 8 Is computing system exists", lambda: _is_system_exists(repo)),
        },
    )


def alg_testing_result_repository_menu(repo: AlgTestingResultRepository) -> None:
    """Menu for the repository of algorithm test results."""
    _run_submenu(
        "----- AlgTestingResultRepository configuration -----\n"
        "1 Back to main menu\n"
        "2 Print config\n"
        "3 Print AlgTestingResultRepository list\n"
        "4 Print AlgTestingResultRepository details\n"
        "5 Add test alg result data\n"
        "6 Change AlgTestingResultRepository\n"
        "7 Remove AlgTestingResultRepository\n"
        "8 Is AlgTestingResultRepository exists",
        {
            2: ("Command: 2 Print config", None),
            3: ("Command: 3 Print computing system list", None),
            4: ("Command: 4 Print computing system details", None),
            5: ("Command: 5 Add test alg result data", lambda: repo.write()),
            6: ("Command: 6 Change computing system", None),
            7: ("Command: 7 Remove computing system", None),
            8: ("Command: 8 Is computing system exists", None),
        },
    )


def _fs_combine_path() -> None:
    dir_name = _read_word("Enter dir name: ")
    file_name = _read_word("Enter file name: ")
    print(f"Path: {combine_path(dir_name, file_name)}")


def _fs_create_file() -> None:
    dir_name = _read_word("Enter dir name (. - current dir): ")
    file_name = _read_word("Enter file name: ")
    _print_yes_no(
        create_file(dir_name, file_name, ""),
        "File created (true)",
        "File not created (false)",
    )


def _fs_is_file_exists() -> None:
    file_name = _read_word("Enter file name: ")
    _print_yes_no(
        is_file_exists(file_name), "File exists (true)", "File not exists (false)"
    )


def _fs_create_dir() -> None:
    dir_name = _read_word("Enter dir name: ")
    _print_yes_no(
        create_dir(dir_name),
        "Directory created (true)",
        "Directory not created (false)",
    )


def _fs_is_dir_exists() -> None:
    dir_name = _read_word("Enter dir name: ")
    _print_yes_no(
        is_dir_exists(dir_name),
        "Directory exists (true)",
        "Directory not exists (false)",
    )


def _fs_remove_file() -> None:
    dir_name = _read_word("Enter dir name: ")
    file_name = _read_word("Enter file name: ")
    _print_yes_no(
        remove_file(dir_name, file_name),
        "File removed (true)",
        "File not removed (false)",
    )


def _fs_remove_dir() -> None:
    dir_name = _read_word("Enter dir name: ")
    _print_yes_no(
        remove_dir(dir_name),
        "Directory removed (true)",
        "Directory not removed (false)",
    )


def filesystem_menu() -> None:
    """Menu exercising the file system helpers interactively."""
    _run_submenu(
        "----- FileSystemHelper -----\n"
        "1 Back to main menu\n"
        "2 CombinePath\n"
        "3 CreateFile\n"
        "4 IsFileExists\n"
        "5 CreateDir\n"
        "6 IsDirExists\n"
        "7 RemoveFile\n"
        "8 RemoveDir",
        {
            2: ("Command: 2 CombinePath", _fs_combine_path),
            3: ("Command: 3 CreateFile", _fs_create_file),
            4: ("Command: 4 IsFileExists", _fs_is_file_exists),
            5: ("Command: 5 CreateDir", _fs_create_dir),
            6: ("Command: 6 IsDirExists", _fs_is_dir_exists),
            7: ("Command: 7 RemoveFile", _fs_remove_file),
            8: ("Command: 8 RemoveDir", _fs_remove_dir),
        },
    )


def _default_commands() -> list[MenuCommandItem]:
    return [
        MenuCommandItem(MenuCommand.HELP, ("1", "?", "h", "help"), None, "Print help"),
        MenuCommandItem(MenuCommand.EXIT, ("2", "q", "exit"), None, "Exit from menu"),
        MenuCommandItem(
            MenuCommand.PRINT_LIB_SUPPORT,
            ("3", "libs"),
            _print_lib_support,
            "Print supported libs (OpenMP, Cuda etc.)",
        ),
        MenuCommandItem(
            MenuCommand.PRINT_GPU_PARAMETERS,
            ("4", "gpu"),
            print_cuda_device_properties,
            "Print default (0) Cuda-device properties",
        ),
        MenuCommandItem(
            MenuCommand.WRITE_GPU_SPECS_TO_TXT_FILE,
            ("5", "gpu"),
            write_gpu_specs_to_txt_file,
            "Write GPU specification to txt file gpu-specs.txt",
        ),
        MenuCommandItem(
            MenuCommand.TESTING_TEST_ARRAY_HELPER,
            ("6", "test-arr-help"),
            _testing_array_helper,
            "Testing TestArrayHelper class",
        ),
        MenuCommandItem(
            MenuCommand.TESTING_TEST_VECTOR_GPU,
            ("7", "test-vec-gpu"),
            _testing_vector_gpu,
            "Testing VectorGpu class",
        ),
        MenuCommandItem(
            MenuCommand.TESTING_TEST_SUM,
            ("8", "test-sum"),
            _testing_sum,
            "Testing sum functions",
        ),
        MenuCommandItem(
            MenuCommand.APPLICATION_CONFIG,
            ("9", "app-conf"),
            None,
            "Application configuration",
        ),
        MenuCommandItem(
            MenuCommand.COMPUTING_SYSTEM_REPOSITORY_CONFIG,
            ("10", "cs-repo-conf"),
            None,
            "Computing system repository configuration",
        ),
        MenuCommandItem(
            MenuCommand.ALG_TESTING_RESULT_REPOSITORY_CONFIG,
            ("11", "algtr-repo-conf"),
            None,
            "AlgTestingResultRepository configuration",
        ),
        MenuCommandItem(
            MenuCommand.TESTING_FILE_SYSTEM_HELPER,
            ("12", "fs-hlp"),
            filesystem_menu,
            "Testing FileSystemHelper",
        ),
    ]


class MainMenu:
    """The application's main menu."""

    def __init__(self) -> None:
        self.commands = _default_commands()
        self.command = MenuCommandItem(desc="Command not choosed!")

    def recognize(self, command_string: str) -> MenuCommandItem | None:
        """Select the first entry whose keys include ``command_string``."""
        self.command = MenuCommandItem(desc="Command not choosed!")
        for item in self.commands:
            if item.check_key(command_string):
                self.command = item
                return item
        return None

    def format_help(self) -> str:
        lines = ["----- Command list -----"]
        for item in self.commands:
            keys = "".join(f"{key} " for key in item.keys)
            lines.append(f"{keys}\t{item.desc}")
        return "\n".join(lines)

    def _run_command(self) -> None:
        if self.command.func is None:
            return
        print(f"----- Starting: {self.command.desc}-----------")
        self.command.func()
        print("-------------------------------------")

    def start(
        self,
        app_config: AppConfig,
        comp_sys_repo: ComputingSystemRepository,
        alg_testing_result_repo: AlgTestingResultRepository,
    ) -> None:
        """Read and run commands until the user exits or input runs out."""
        print("--- Main Menu ('1', '?', 'h' or 'help' for print help)---")
        self.command = MenuCommandItem(desc="Command not choosed!")
        try:
            while self.command.comm is not MenuCommand.EXIT:
                item = self.recognize(_read_word("> "))
                if item is None:
                    print(
                        "Error! Command not recognized! Please enter command again. "
                        "'?' or 'help' for print help."
                    )
                    continue
                if item.comm is MenuCommand.HELP:
                    print(self.format_help())
                elif item.comm is MenuCommand.APPLICATION_CONFIG:
                    application_config_menu(app_config)
                elif item.comm is MenuCommand.COMPUTING_SYSTEM_REPOSITORY_CONFIG:
                    computing_system_repository_menu(comp_sys_repo)
                elif item.comm is MenuCommand.ALG_TESTING_RESULT_REPOSITORY_CONFIG:
                    alg_testing_result_repository_menu(alg_testing_result_repo)
                else:
                    self._run_command()
        except EOFError:
            print()
        print("--- Good bye! ---")