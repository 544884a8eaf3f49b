"""Shared fixtures for controller adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from cloudcred.adapters.controller import ControllerCredentialStore
from cloudcred.adapters.http_resilience import ResilientClient
from cloudcred.config import ControllerConfig, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

type Handler = Callable[[httpx.Request], httpx.Response]
type StoreFactory = Callable[[Handler], ControllerCredentialStore]

BASE_URL = "https://controller.test/api"


@pytest.fixture
def controller_config() -> ControllerConfig:
    return ControllerConfig(
        username="admin",
        password="secret",  # noqa: S106
        resilience=ResilienceConfig(
            name="controller-test",
            base_url=BASE_URL,
            timeout_seconds=5.0,
            retry=RetryPolicy(total=0),
        ),
    )


@pytest.fixture
def make_store(controller_config: ControllerConfig) -> StoreFactory:
    def factory(handler: Handler) -> ControllerCredentialStore:
        def client_factory(config: ResilienceConfig, auth: httpx.BasicAuth) -> ResilientClient:
            return ResilientClient(config, auth=auth, transport=httpx.MockTransport(handler))

        return ControllerCredentialStore(config=controller_config, client_factory=client_factory)

    return factory
