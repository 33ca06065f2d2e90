"""Computing systems and the on-disk repository that records them."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from hcsbench.console import get_int_from_user, get_string_from_user
from hcsbench.filesystem import (
    combine_path,
    create_dir,
    create_file,
    is_dir_exists,
    is_file_exists,
)

DEFAULT_FILE_NAME = "ComputingSystem.txt"
_REPOSITORY_HEADER = "ComputingSystemRepository"


@dataclass
class ComputingSystem:
    """A computing system: identifier, name, description and its file name."""

    system_id: int = 0
    name: str = "TestSystem"
    description: str = "TestSystem description"
    file_name: str = DEFAULT_FILE_NAME

    def format(self) -> str:
        return (
            "Computing system details:"
            f"\nid:          {self.system_id}"
            f"\nname:        {self.name}"
            f"\ndescription: {self.description}"
            f"\nfile_name:   {self.file_name}"
        )

    def serialize(self, dir_name: str) -> bool:
        """Write the system into ``dir_name/<id>/<file_name>``.

        Returns False when the per-system directory cannot be created,
        including when it already exists.
        """
        path_dir = combine_path(dir_name, str(self.system_id))
        if not create_dir(path_dir):
            print(f"Cannot create dir {path_dir}", file=sys.stderr)
            return False
        data = f"{self.system_id}\n{self.name}\n{self.description}\n"
        return create_file(path_dir, self.file_name, data)

    @classmethod
    def deserialize(
        cls, dir_name: str, system_id: int, file_name: str = DEFAULT_FILE_NAME
    ) -> "ComputingSystem":
        """Read a system written by :meth:`serialize`.

        Raises FileNotFoundError when the file cannot be opened and ValueError
        when the stored identifier does not match ``system_id``.
        """
        file_path = combine_path(combine_path(dir_name, str(system_id)), file_name)
        try:
            with open(file_path, encoding="utf-8") as source:
                lines = source.read().splitlines()
        except OSError as exc:
            raise FileNotFoundError(f"Error in opening file {file_path}") from exc

        lines += [""] * (3 - len(lines))
        stored_id = int(lines[0].strip())
        if stored_id != system_id:
            raise ValueError(f"Error in file {file_path}")
        return cls(stored_id, lines[1], lines[2])

    @classmethod
    def from_user(cls) -> "ComputingSystem":
        """Ask the user for the identifier, name and description."""
        system_id = get_int_from_user("Enter computing system id: ")
        name = get_string_from_user("Enter computing system name: ")
        description = get_string_from_user("Enter computing system description: ")
        return cls(system_id, name, description)


class ComputingSystemRepository:
    """Directory of computing systems with a list file of their identifiers."""

    file_name = "List.txt"

    def __init__(self, dir_name: str = "ComputingSystemRepository") -> None:
        self.dir_name = dir_name
        self.ids: list[int] = []
        self._ensure_directory()
        self._ensure_list_file()
        self._read_list_file()

    @property
    def _list_path(self) -> str:
        return combine_path(self.dir_name, self.file_name)

    def _ensure_directory(self) -> None:
        if not is_dir_exists(self.dir_name):
            create_dir(self.dir_name)

    def _ensure_list_file(self) -> None:
        if is_file_exists(self._list_path):
            return
        if not create_file(self.dir_name, self.file_name, _REPOSITORY_HEADER):
            raise OSError(
                f"File {self.file_name} in directory {self.dir_name} is not created!"
            )

    def _read_list_file(self) -> bool:
        try:
            with open(self._list_path, encoding="utf-8") as source:
                tokens = source.read().split()
        except OSError:
            print(f'File "{self._list_path}" is not opened!', file=sys.stderr)
            return False

        if not tokens or tokens[0] != _REPOSITORY_HEADER:
            print(
                f'File "{self._list_path}" format is not AppConfig!', file=sys.stderr
            )
            return False

        for token in tokens[1:]:
            try:
                self.ids.append(int(token))
            except ValueError:
                break
        return True

    def _append_id(self, new_id: int) -> bool:
        try:
            with open(self._list_path, "a", encoding="utf-8") as out:
                out.write(f"\n{new_id}")
        except OSError:
            return False
        return True

    def is_exists(self, system_id: int) -> bool:
        """Return whether a system with this identifier is recorded."""
        return system_id in self.ids

    def try_add(self, computing_system: ComputingSystem) -> bool:
        """Record a new system; return False if its identifier is taken."""
        new_id = computing_system.system_id
        if self.is_exists(new_id):
            return False
        computing_system.serialize(self.dir_name)
        self._append_id(new_id)
        self.ids.append(new_id)
        return True

    def get(self, system_id: int) -> ComputingSystem:
        """Load a recorded system; raise KeyError if it is not recorded."""
        if not self.is_exists(system_id):
            raise KeyError("Computing system not found!")
        return ComputingSystem.deserialize(self.dir_name, system_id)

    def format_config(self) -> str:
        return f"dir_name: {self.dir_name}; file_name: {self.file_name}"

    def format_list(self) -> str:
        ids = "".join(f"{system_id} " for system_id in self.ids)
        return f"Computing system ids: [{ids}]"