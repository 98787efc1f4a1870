from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class RunnerSettings:
    workers: int = 1
    validate_routes: bool = True
    corpus: Optional[Path] = None


@dataclass
class LoggingSettings:
    level: str = "INFO"


@dataclass
class Settings:
    runner: RunnerSettings = field(default_factory=RunnerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        runner_data = dict(data.get("runner") or {})
        corpus = runner_data.get("corpus")
        runner = RunnerSettings(
            workers=max(1, int(runner_data.get("workers", 1))),
            validate_routes=bool(runner_data.get("validate_routes", True)),
            corpus=Path(corpus) if corpus else None,
        )
        log = LoggingSettings(level=str((data.get("logging") or {}).get("level", "INFO")).upper())
        return Settings(runner=runner, logging=log)

    @staticmethod
    def _from_env(env: Mapping[str, str]) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        workers = env.get("BEAST_ESCAPE_WORKERS")
        if workers:
            try:
                out.setdefault("runner", {})["workers"] = int(workers)
            except ValueError:
                logger.error("Invalid env for BEAST_ESCAPE_WORKERS=%r; ignoring", workers)
        level = env.get("BEAST_ESCAPE_LOG_LEVEL")
        if level:
            out["logging"] = {"level": level}
        return out

    @classmethod
    def load(cls, user_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from built-in defaults, an optional user file, then the environment.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("beast_escape.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        merged = cls._deep_merge(merged, cls._from_env(os.environ if env is None else env))
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
