"""
Locator configuration
"""

import os
from typing import Optional

from pydantic import BaseModel, field_validator

from .exceptions import ConfigurationError
from .schemas.types import UnlabeledPolicy


class LocatorConfig(BaseModel):
    """Configuration for GroupLocator"""

    unlabeled_policy: UnlabeledPolicy = UnlabeledPolicy.EXCLUDE
    max_workers: Optional[int] = None  # None: build candidates sequentially
    min_dominant_count: int = 1
    top_k: Optional[int] = None

    @field_validator('max_workers', 'top_k')
    @classmethod
    def validate_positive_or_none(cls, v):
        if v is not None and v < 1:
            raise ValueError(f"Value must be a positive integer, got: {v}")
        return v

    @field_validator('min_dominant_count')
    @classmethod
    def validate_min_dominant_count(cls, v):
        if v < 1:
            raise ValueError(f"min_dominant_count must be >= 1, got: {v}")
        return v

    @classmethod
    def from_env(cls, prefix: str = "TABLOC_") -> "LocatorConfig":
        """
        Build a config from environment variables

        Reads (all optional):
            TABLOC_UNLABELED_POLICY: "exclude" or "sentinel"
            TABLOC_MAX_WORKERS: positive integer
            TABLOC_MIN_DOMINANT_COUNT: positive integer
            TABLOC_TOP_K: positive integer

        Raises:
            ConfigurationError: If a variable is set to a malformed value
        """
        values = {}

        policy = os.getenv(f"{prefix}UNLABELED_POLICY")
        if policy:
            try:
                values["unlabeled_policy"] = UnlabeledPolicy(policy.strip().lower())
            except ValueError:
                raise ConfigurationError(
                    f"{prefix}UNLABELED_POLICY must be one of "
                    f"{[p.value for p in UnlabeledPolicy]}, got: {policy!r}"
                ) from None

        for field in ("max_workers", "min_dominant_count", "top_k"):
            name = f"{prefix}{field.upper()}"
            raw = os.getenv(name)
            if not raw:
                continue
            try:
                values[field] = int(raw)
            except ValueError:
                raise ConfigurationError(f"{name} must be an integer, got: {raw!r}") from None

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid locator configuration from environment: {e}") from e
