"""Aggregator configuration for pyboundaries."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any
from urllib.parse import urljoin

from pyboundaries._constants import (
    CANTON_NAME_KEYS,
    DEFAULT_PROVINCE,
    DEFAULT_SOURCE,
    DEFAULT_TIMEOUT_S,
    PROVINCE_KEYS,
)
from pyboundaries.exceptions import BoundaryConfigError


def _env_keys(value: str | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class BoundaryConfig:
    """Aggregator configuration.

    Parameters
    ----------
    source : str
        URL, ``file://`` URI or filesystem path of the boundary dataset.
        Defaults to the GADM 4.1 Ecuador level-2 file.
    base_url : str or None
        Optional prefix a relative ``source`` is resolved against (e.g. a
        local proxy in front of GADM).
    timeout : float
        Seconds allowed for fetching the dataset.  Defaults to 60.
    province : str
        Province used when a pipeline is called without one.
    province_keys : tuple of str
        Feature properties holding the province name, in lookup order.
    canton_name_keys : tuple of str
        Feature properties holding the canton name, in lookup order.
    """

    source: str = DEFAULT_SOURCE
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT_S
    province: str = DEFAULT_PROVINCE
    province_keys: tuple[str, ...] = PROVINCE_KEYS
    canton_name_keys: tuple[str, ...] = CANTON_NAME_KEYS

    def __post_init__(self) -> None:
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise BoundaryConfigError(f"timeout must be a positive finite number, got {self.timeout}")
        if not self.province_keys:
            raise BoundaryConfigError("province_keys must name at least one property")
        if not self.canton_name_keys:
            raise BoundaryConfigError("canton_name_keys must name at least one property")

    @property
    def resource_url(self) -> str:
        """``source`` resolved against ``base_url`` when one is set."""
        if not self.base_url:
            return self.source
        base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
        return urljoin(base, self.source.lstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> BoundaryConfig:
        """Create configuration from environment variables.

        Reads the optional ``BOUNDARIES_*`` variables.  Explicit keyword
        arguments override environment values.

        Raises
        ------
        BoundaryConfigError
            If a variable holds an unusable value.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "BOUNDARIES_SOURCE": "source",
            "BOUNDARIES_BASE_URL": "base_url",
            "BOUNDARIES_PROVINCE": "province",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # timeout is numeric, handle separately
        timeout_env = env.get("BOUNDARIES_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise BoundaryConfigError(f"BOUNDARIES_TIMEOUT is not a number: {timeout_env!r}") from exc

        province_keys = _env_keys(env.get("BOUNDARIES_PROVINCE_KEYS"))
        if province_keys is not None:
            config_kwargs["province_keys"] = province_keys

        canton_keys = _env_keys(env.get("BOUNDARIES_CANTON_NAME_KEYS"))
        if canton_keys is not None:
            config_kwargs["canton_name_keys"] = canton_keys

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
