"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, domains: list[str]) -> None:
        self._log.info("config.loaded", name=name, domains=domains)

    def config_timeout_disabled_warning(self) -> None:
        self._log.warning(
            "config.timeout_disabled_warning",
            message="adapter.timeout_seconds is unset; a hung LLM process will hang the run",
        )

    def scenario_loaded(self, name: str, expected_pass: bool) -> None:
        self._log.info("config.scenario_loaded", name=name, expected_pass=expected_pass)
