"""
Configuration for cache latency benchmark runs.

Values come from the environment (optionally populated from a ``.env`` file
by the CLI) and can be overridden by command-line flags.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

DEFAULT_RUNS = 1000
DEFAULT_TTL_SECONDS = 600
DEFAULT_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
DEFAULT_FILE_STORE_PATH = Path("storage") / "cache"

# Driver names understood by the store registry.
KNOWN_DRIVERS = ("array", "file", "null")


@dataclass(frozen=True)
class StoreConfig:
    """Configuration for a single named cache store."""

    name: str
    driver: str
    options: dict = field(default_factory=dict)


@dataclass(frozen=True)
class LabConfig:
    """Settings shared by every benchmark run."""

    runs: int = DEFAULT_RUNS
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    fixtures_dir: Path = DEFAULT_FIXTURES_DIR
    file_store_path: Path = DEFAULT_FILE_STORE_PATH
    enabled_stores: tuple[str, ...] = KNOWN_DRIVERS
    seed: Optional[int] = None

    def __post_init__(self):
        if self.runs < 1:
            raise ConfigurationError(f"Run count must be at least 1, got {self.runs}.")
        if self.ttl_seconds < 1:
            raise ConfigurationError(f"TTL must be at least 1 second, got {self.ttl_seconds}.")
        unknown = [s for s in self.enabled_stores if s not in KNOWN_DRIVERS]
        if unknown:
            raise ConfigurationError(
                f"Unknown cache store(s) in configuration: {', '.join(unknown)}. "
                f"Known stores: {', '.join(KNOWN_DRIVERS)}."
            )

    @property
    def stores(self) -> dict[str, StoreConfig]:
        """Configured stores keyed by name, in declaration order."""
        options = {
            "array": {},
            "file": {"path": self.file_store_path},
            "null": {},
        }
        return {
            name: StoreConfig(name=name, driver=name, options=options[name])
            for name in self.enabled_stores
        }

    def with_overrides(self, **overrides) -> "LabConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "LabConfig":
        """Build configuration from ``CACHE_LAB_*`` environment variables."""
        env = os.environ if environ is None else environ

        kwargs = {}
        if env.get("CACHE_LAB_RUNS"):
            kwargs["runs"] = _parse_int(env, "CACHE_LAB_RUNS")
        if env.get("CACHE_LAB_TTL"):
            kwargs["ttl_seconds"] = _parse_int(env, "CACHE_LAB_TTL")
        if env.get("CACHE_LAB_FIXTURES_DIR"):
            kwargs["fixtures_dir"] = Path(env["CACHE_LAB_FIXTURES_DIR"])
        if env.get("CACHE_LAB_FILE_PATH"):
            kwargs["file_store_path"] = Path(env["CACHE_LAB_FILE_PATH"])
        if env.get("CACHE_LAB_STORES"):
            kwargs["enabled_stores"] = tuple(
                s.strip() for s in env["CACHE_LAB_STORES"].split(",") if s.strip()
            )
        if env.get("CACHE_LAB_SEED"):
            kwargs["seed"] = _parse_int(env, "CACHE_LAB_SEED")

        return cls(**kwargs)


def _parse_int(env, name: str) -> int:
    value = env[name]
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'.") from None
