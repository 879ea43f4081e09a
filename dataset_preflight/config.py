from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, Limits


@dataclass(frozen=True, slots=True)
class PreflightConfig:
    encoding: str = Defaults.ENCODING
    sample_lines: int = Limits.SAMPLE_LINES
    max_unique_values: int = Limits.MAX_UNIQUE_VALUES
    max_sample_values: int = Limits.MAX_SAMPLE_VALUES
    max_depth: int = Limits.MAX_SCAN_DEPTH
    compute_hashes: bool = True
    min_readme_length: int = Limits.MIN_README_LENGTH
    large_file_bytes: int = Limits.LARGE_FILE_BYTES

    def __post_init__(self) -> None:
        if not self.encoding.strip():
            raise ValueError("encoding must not be empty")
        if self.sample_lines < 1:
            raise ValueError(f"sample_lines must be positive, got {self.sample_lines}")
        if self.max_unique_values < 1:
            raise ValueError(
                f"max_unique_values must be positive, got {self.max_unique_values}"
            )
        if self.max_sample_values < 1:
            raise ValueError(
                f"max_sample_values must be positive, got {self.max_sample_values}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.min_readme_length < 0:
            raise ValueError(
                f"min_readme_length must not be negative, got {self.min_readme_length}"
            )
        if self.large_file_bytes < 1:
            raise ValueError(
                f"large_file_bytes must be positive, got {self.large_file_bytes}"
            )

    @classmethod
    def from_env(cls) -> PreflightConfig:
        return cls(
            encoding=os.getenv("PREFLIGHT_ENCODING", Defaults.ENCODING),
            sample_lines=int(
                os.getenv("PREFLIGHT_SAMPLE_LINES", str(Limits.SAMPLE_LINES))
            ),
            max_unique_values=int(
                os.getenv("PREFLIGHT_MAX_UNIQUE_VALUES", str(Limits.MAX_UNIQUE_VALUES))
            ),
            max_sample_values=int(
                os.getenv("PREFLIGHT_MAX_SAMPLE_VALUES", str(Limits.MAX_SAMPLE_VALUES))
            ),
            max_depth=int(os.getenv("PREFLIGHT_MAX_DEPTH", str(Limits.MAX_SCAN_DEPTH))),
            compute_hashes=_parse_bool(os.getenv("PREFLIGHT_COMPUTE_HASHES", "true")),
            min_readme_length=int(
                os.getenv("PREFLIGHT_MIN_README_LENGTH", str(Limits.MIN_README_LENGTH))
            ),
            large_file_bytes=int(
                os.getenv("PREFLIGHT_LARGE_FILE_BYTES", str(Limits.LARGE_FILE_BYTES))
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(
        config_file: Path | None = None, *, dataset_root: Path | None = None
    ) -> PreflightConfig:
        config = PreflightConfig.from_env()
        if config_file is None:
            config_file = ConfigLoader._default_config_file(dataset_root)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _default_config_file(dataset_root: Path | None) -> Path:
        if dataset_root is not None:
            candidate = dataset_root / Defaults.CONFIG_FILE_NAME
            if candidate.exists():
                return candidate
        return Path(Defaults.CONFIG_FILE_NAME)

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: PreflightConfig
    ) -> PreflightConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        analysis = _get_table(data, "analysis")
        scan = _get_table(data, "scan")
        rules = _get_table(data, "rules")
        encoding = base_config.encoding
        if (value := analysis.get("encoding")) is not None:
            encoding = str(value)
        sample_lines = base_config.sample_lines
        if (value := analysis.get("sample_lines")) is not None:
            sample_lines = _coerce_int(value, key="analysis.sample_lines")
        max_unique_values = base_config.max_unique_values
        if (value := analysis.get("max_unique_values")) is not None:
            max_unique_values = _coerce_int(value, key="analysis.max_unique_values")
        max_sample_values = base_config.max_sample_values
        if (value := analysis.get("max_sample_values")) is not None:
            max_sample_values = _coerce_int(value, key="analysis.max_sample_values")
        max_depth = base_config.max_depth
        if (value := scan.get("max_depth")) is not None:
            max_depth = _coerce_int(value, key="scan.max_depth")
        compute_hashes = base_config.compute_hashes
        if (value := scan.get("compute_hashes")) is not None:
            compute_hashes = _coerce_bool(value, key="scan.compute_hashes")
        min_readme_length = base_config.min_readme_length
        if (value := rules.get("min_readme_length")) is not None:
            min_readme_length = _coerce_int(value, key="rules.min_readme_length")
        large_file_bytes = base_config.large_file_bytes
        if (value := rules.get("large_file_bytes")) is not None:
            large_file_bytes = _coerce_int(value, key="rules.large_file_bytes")
        return PreflightConfig(
            encoding=encoding,
            sample_lines=sample_lines,
            max_unique_values=max_unique_values,
            max_sample_values=max_sample_values,
            max_depth=max_depth,
            compute_hashes=compute_hashes,
            min_readme_length=min_readme_length,
            large_file_bytes=large_file_bytes,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _parse_bool(value)
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
