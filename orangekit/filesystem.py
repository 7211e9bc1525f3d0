"""Index of the files and directories below a project root, looked up by name."""

from __future__ import annotations

from pathlib import Path, PurePath

__all__ = ["FileSystemError", "default_root_directory", "FileSystem"]

_GENERATED_PREFIX = PurePath("..", "Source")


class FileSystemError(Exception):
    """Raised for a missing root, an unknown file or a malformed query."""


def default_root_directory(cwd: str | Path | None = None) -> Path:
    """The ``Source`` directory next to the working directory."""
    base = Path.cwd() if cwd is None else Path(cwd)
    return base.parent / "Source"


class FileSystem:
    """Maps bare file and directory names to their paths relative to the root.

    An entry without an extension is indexed as a directory. When two
    entries share a name, the one found last wins.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = default_root_directory() if root is None else Path(root)
        if not self._root.is_dir():
            raise FileSystemError(f"root directory {self._root} does not exist")
        self._directories: dict[str, PurePath] = {}
        self._files: dict[str, PurePath] = {}
        self._populate()

    def _populate(self) -> None:
        for entry in sorted(self._root.rglob("*")):
            relative = PurePath(entry.relative_to(self._root))
            if relative.suffix:
                self._files[relative.name] = relative
            else:
                self._directories[relative.name] = relative

    def root_directory(self) -> Path:
        """The absolute directory that every indexed path is relative to."""
        return self._root

    def does_file_exist(self, file_name: str, consider_extension: bool = False) -> bool:
        """Whether a file of that name exists.

        With ``consider_extension`` the name must carry an extension and is
        matched whole; without it the name must not carry one and is
        matched against each file's stem.
        """
        has_extension = bool(PurePath(file_name).suffix)
        if consider_extension:
            if not has_extension:
                raise FileSystemError(
                    f"{file_name!r} has no extension but the extension was to be considered"
                )
            return file_name in self._files
        if has_extension:
            raise FileSystemError(
                f"{file_name!r} has an extension but the extension was to be ignored"
            )
        return any(PurePath(name).stem == file_name for name in self._files)

    def does_directory_exist(self, directory: str) -> bool:
        return directory in self._directories

    def relative_to_generated(self, file_name: str) -> str:
        """The file's path as seen from the build output directory."""
        try:
            relative = self._files[file_name]
        except KeyError:
            raise FileSystemError(f"no file named {file_name!r}") from None
        return str(_GENERATED_PREFIX / relative)