"""YAML loaders — parse, interpolate env vars, validate, and emit observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agent_judge.config.domain.config import HarnessConfig
from agent_judge.config.domain.judge import DomainConfig
from agent_judge.config.domain.observer import ConfigObserver
from agent_judge.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from agent_judge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from agent_judge.evaluation.domain.scenario import Scenario


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a HarnessConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> HarnessConfig:
        """
        Load, interpolate, validate, and return a HarnessConfig from a YAML file.

        Relative rubric, context, log_dir and results_table paths are resolved
        against the directory containing the config file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the YAML is malformed or the schema is violated.
        """
        raw = _parse_yaml(path=path, kind="config")
        _check_missing_env_vars(raw=raw)
        cfg = _build(model=HarnessConfig, data=interpolate(raw), path=path)
        cfg = _resolve_paths(cfg=cfg, base_dir=path.parent)
        if cfg.adapter.timeout_seconds is None:
            self._observer.config_timeout_disabled_warning()
        self._observer.config_loaded(name=cfg.name, domains=cfg.judge.domain_names)
        return cfg


class YamlScenarioLoader:
    """Loads one Scenario per YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> Scenario:
        """
        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset.
            ConfigValidationError: if the YAML is malformed or the schema is violated.
        """
        raw = _parse_yaml(path=path, kind="scenario")
        _check_missing_env_vars(raw=raw)
        scenario = _build(model=Scenario, data=interpolate(raw), path=path)
        self._observer.scenario_loaded(
            name=scenario.name, expected_pass=scenario.expected_pass
        )
        return scenario


def _parse_yaml(path: Path, kind: str) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path, kind=kind)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise ConfigValidationError("top-level value must be a mapping", path=path)
    return data


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build[T: (HarnessConfig, Scenario)](model: type[T], data: Any, path: Path) -> T:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc), path=path) from exc


def _resolve(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path


def _resolve_paths(cfg: HarnessConfig, base_dir: Path) -> HarnessConfig:
    domains = [
        DomainConfig(
            name=domain.name,
            rubric=_resolve(domain.rubric, base_dir),
            context=[_resolve(p, base_dir) for p in domain.context],
        )
        for domain in cfg.judge.domains
    ]
    results_table = cfg.recording.results_table
    return cfg.model_copy(
        update={
            "judge": cfg.judge.model_copy(update={"domains": domains}),
            "recording": cfg.recording.model_copy(
                update={
                    "log_dir": _resolve(cfg.recording.log_dir, base_dir),
                    "results_table": _resolve(results_table, base_dir)
                    if results_table is not None
                    else None,
                }
            ),
        }
    )
