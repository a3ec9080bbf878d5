"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, domains: list[str]) -> None: ...

    def config_timeout_disabled_warning(self) -> None: ...

    def scenario_loaded(self, name: str, expected_pass: bool) -> None: ...
