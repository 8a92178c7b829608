"""Static file serving over several directories."""

from collections.abc import Sequence

from fastapi.staticfiles import StaticFiles
from starlette.staticfiles import PathLike


class StaticDirectories(StaticFiles):
    """StaticFiles that looks files up in a list of directories, first match wins."""

    def __init__(self, directories: Sequence[PathLike], **kwargs) -> None:
        if not directories:
            raise ValueError("At least one static directory is required")
        self._extra_directories = list(directories[1:])
        super().__init__(directory=directories[0], **kwargs)

    def get_directories(
        self,
        directory: PathLike | None = None,
        packages: list[str | tuple[str, str]] | None = None,
    ) -> list[PathLike]:
        return [*super().get_directories(directory, packages), *self._extra_directories]
