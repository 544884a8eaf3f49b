"""Credential controller configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_float_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

CONTROLLER_TIMEOUT_SECONDS = 30.0
CONTROLLER_URL_VAR = "CLOUDCRED_CONTROLLER_URL"
CONTROLLER_USERNAME_VAR = "CLOUDCRED_USERNAME"
CONTROLLER_PASSWORD_VAR = "CLOUDCRED_PASSWORD"  # noqa: S105
CONTROLLER_TIMEOUT_VAR = "CLOUDCRED_TIMEOUT_SECONDS"


@dataclass(frozen=True, slots=True)
class ControllerConfig:
    """Holds the controller endpoint and its credentials."""

    username: str
    password: str
    resilience: ResilienceConfig

    @property
    def url(self) -> str | None:
        return self.resilience.base_url


def get_controller_config(*, resilience: ResilienceConfig | None = None) -> ControllerConfig:
    values = require_env_vars(
        (CONTROLLER_URL_VAR, CONTROLLER_USERNAME_VAR, CONTROLLER_PASSWORD_VAR)
    )
    timeout = optional_float_env_var(CONTROLLER_TIMEOUT_VAR) or CONTROLLER_TIMEOUT_SECONDS
    return ControllerConfig(
        username=values[CONTROLLER_USERNAME_VAR],
        password=values[CONTROLLER_PASSWORD_VAR],
        resilience=resilience
        or ResilienceConfig(
            name="controller",
            base_url=values[CONTROLLER_URL_VAR].rstrip("/"),
            timeout_seconds=timeout,
            retry=RetryPolicy(),
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={"Accept": "application/json"},
        ),
    )
