"""HTTP credential store backed by a controller's credential API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from cloudcred.adapters.http_resilience import ResilientClient
from cloudcred.config import get_controller_config
from cloudcred.domain.ports import (
    CreatedCredential,
    CredentialNotFoundError,
    CredentialStoreError,
)

from .schema import (
    CreateCredentialResponse,
    CredentialPayload,
    CredentialWriteRequest,
    ErrorResponse,
)
from .translator import translate_credential

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from cloudcred.config import ControllerConfig, ResilienceConfig
    from cloudcred.domain.model import RemoteCredential
    from cloudcred.domain.ports import CredentialStore

log = getLogger(__name__)

type ClientFactory = Callable[[ResilienceConfig, httpx.BasicAuth], ResilientClient]
type Send = Callable[[ResilientClient], Awaitable[httpx.Response]]


class ControllerAPIError(CredentialStoreError):
    """Raised when the controller rejects a request or cannot be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ControllerCredentialNotFoundError(ControllerAPIError, CredentialNotFoundError):
    """Raised when the controller answers 404 for a credential."""


def _default_client_factory(config: ResilienceConfig, auth: httpx.BasicAuth) -> ResilientClient:
    return ResilientClient(config, auth=auth)


def _flag(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def _scope_params(*, client_credential: bool, controller_credential: bool) -> dict[str, str]:
    return {"client": _flag(client_credential), "controller": _flag(controller_credential)}


def _collection_path(cloud_name: str) -> str:
    return f"/clouds/{quote(cloud_name, safe='')}/credentials"


def _credential_path(cloud_name: str, name: str) -> str:
    return f"{_collection_path(cloud_name)}/{quote(name, safe='')}"


class ControllerCredentialStore:
    """Credential store speaking JSON over HTTP to a controller."""

    def __init__(
        self,
        *,
        config: ControllerConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_controller_config()
        self._resilience = self._config.resilience
        self._auth = httpx.BasicAuth(self._config.username, self._config.password)
        self._client_factory = client_factory or _default_client_factory

    def create_credential(
        self,
        *,
        attributes: Mapping[str, str],
        auth_type: str,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> CreatedCredential:
        path = _collection_path(cloud_name)
        body = _write_body(
            name=name,
            auth_type=auth_type,
            attributes=attributes,
            client_credential=client_credential,
            controller_credential=controller_credential,
        )
        payload = self._run(f"POST {path}", lambda client: client.post(path, json=body))
        response = _validate(CreateCredentialResponse, payload)
        return CreatedCredential(cloud_name=response.cloud)

    def read_credential(
        self,
        *,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> RemoteCredential:
        path = _credential_path(cloud_name, name)
        params = _scope_params(
            client_credential=client_credential,
            controller_credential=controller_credential,
        )
        payload = self._run(f"GET {path}", lambda client: client.get(path, params=params))
        return translate_credential(_validate(CredentialPayload, payload))

    def update_credential(
        self,
        *,
        attributes: Mapping[str, str],
        auth_type: str,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> None:
        path = _credential_path(cloud_name, name)
        body = _write_body(
            name=name,
            auth_type=auth_type,
            attributes=attributes,
            client_credential=client_credential,
            controller_credential=controller_credential,
        )
        self._run(f"PUT {path}", lambda client: client.put(path, json=body))

    def destroy_credential(
        self,
        *,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> None:
        path = _credential_path(cloud_name, name)
        params = _scope_params(
            client_credential=client_credential,
            controller_credential=controller_credential,
        )
        self._run(f"DELETE {path}", lambda client: client.delete(path, params=params))

    def _run(self, description: str, send: Send) -> object:
        return asyncio.run(self._request_async(description, send))

    async def _request_async(self, description: str, send: Send) -> object:
        if self._resilience.base_url is None:
            raise ControllerAPIError("Missing controller base_url in resilience configuration")

        try:
            async with self._client_factory(self._resilience, self._auth) as client:
                response = await send(client)
        except httpx.HTTPError as exc:
            raise ControllerAPIError(f"{description} failed: {exc}") from exc

        if response.is_error:
            raise _error_from(response)
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            content_type = response.headers.get("Content-Type", "unknown content type")
            raise ControllerAPIError(
                f"{description} returned a non-JSON body ({content_type})",
                status_code=response.status_code,
            ) from exc


def _write_body(
    *,
    name: str,
    auth_type: str,
    attributes: Mapping[str, str],
    client_credential: bool,
    controller_credential: bool,
) -> dict[str, object]:
    request = CredentialWriteRequest(
        name=name,
        auth_type=auth_type,
        attributes=dict(attributes),
        client=client_credential,
        controller=controller_credential,
    )
    return request.model_dump(by_alias=True)


def _validate[TModel: CreateCredentialResponse | CredentialPayload](
    model: type[TModel],
    payload: object,
) -> TModel:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ControllerAPIError(f"Unexpected controller response payload: {exc}") from exc


def _error_from(response: httpx.Response) -> ControllerAPIError:
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        error_payload = ErrorResponse.model_validate(response.json())
    except ValueError:
        pass  # not a JSON error body
    else:
        message = error_payload.message
    log.error(f"Controller API error {response.status_code}: {message}")

    if response.status_code == httpx.codes.NOT_FOUND:
        return ControllerCredentialNotFoundError(message, status_code=response.status_code)
    return ControllerAPIError(message, status_code=response.status_code)


if TYPE_CHECKING:
    _store_check: CredentialStore = ControllerCredentialStore()
