"""VcsContextProvider Protocol — the version-control context a run is recorded against."""

from typing import Protocol


class VcsContextProvider(Protocol):
    def current_sha(self) -> str: ...

    def current_branch(self) -> str: ...
