"""Fortem REST API client with bearer auth and one-shot token refresh"""

import logging
from typing import Any, Dict, Optional, Protocol, Tuple, Type, TypeVar

import httpx
from pydantic import TypeAdapter

from exceptions import ApiError, AuthenticationError
from settings import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from .models import ApiEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (filename, content, content type); the content is buffered so a retry can resend it
UploadFile = Tuple[str, bytes, str]


class SessionHooks(Protocol):
    """What the client needs from the session owner"""

    @property
    def access_token(self) -> Optional[str]: ...

    async def ensure_init(self) -> None: ...

    async def refresh(self, rejected_token: Optional[str] = None) -> None: ...


class FortemClient:
    """
    Async client for the Fortem API.

    Authenticated calls lazily trigger login through the session before
    their first attempt. A 401 makes the session re-authenticate, and the
    request is retried exactly once; a second 401 is fatal.

    Usage:
        session = SessionInitializer(login)
        client = FortemClient("https://testnet-api.fortem.gg", session=session)
        profile = await client.get("/api/v1/users/me")
    """

    def __init__(
        self,
        api_url: str,
        session: Optional[SessionHooks] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize Fortem client.

        Args:
            api_url: API base URL
            session: Session providing the bearer token and login hooks
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.session = session
        self.timeout = timeout

    @property
    def access_token(self) -> Optional[str]:
        return self.session.access_token if self.session else None

    async def get(self, path: str, *, params: Optional[Dict[str, Any]] = None,
                  response_model: Optional[Type[T]] = None, authenticated: bool = True) -> Any:
        return await self.request("GET", path, params=params, response_model=response_model,
                                  authenticated=authenticated)

    async def post(self, path: str, body: Any = None, *, response_model: Optional[Type[T]] = None,
                   authenticated: bool = True) -> Any:
        return await self.request("POST", path, json=body if body is not None else {},
                                  response_model=response_model, authenticated=authenticated)

    async def put(self, path: str, body: Any = None, *, response_model: Optional[Type[T]] = None,
                  authenticated: bool = True) -> Any:
        return await self.request("PUT", path, json=body if body is not None else {},
                                  response_model=response_model, authenticated=authenticated)

    async def upload_file(self, path: str, file: UploadFile, *,
                          response_model: Optional[Type[T]] = None) -> Any:
        """PUT a multipart upload with a single ``file`` field

        No Content-Type header is set here; httpx writes the multipart
        boundary itself.
        """
        return await self.request("PUT", path, files={"file": file}, response_model=response_model)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, UploadFile]] = None,
        response_model: Optional[Type[T]] = None,
        authenticated: bool = True,
        retry: bool = True,
    ) -> Any:
        """
        Make an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method
            path: API path, appended to the base URL
            json: JSON body
            params: Query parameters
            files: Multipart files; switches off the JSON content type
            response_model: Optional type to validate ``data`` into
            authenticated: False for calls made while logging in. Those skip
                the lazy login hook and the 401 refresh, because they run
                inside the login itself.
            retry: True on the first attempt, False on the single retry

        Returns:
            The envelope's ``data`` field

        Raises:
            AuthenticationError: Still unauthorized after re-authenticating (401)
            ApiError: Any other non-2xx response
        """
        use_session = authenticated and self.session is not None

        if use_session and retry:
            await self.session.ensure_init()

        headers: Dict[str, str] = {}
        if files is None:
            headers["Content-Type"] = "application/json"

        token = self.access_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self.api_url}{path}"
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout, connect=CONNECT_TIMEOUT)) as client:
            response = await client.request(method, url, json=json if files is None else None,
                                            params=params, files=files, headers=headers)
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.status_code == 401 and use_session:
            if retry:
                logger.info("Token expired, re-authenticating...")
                await self.session.refresh(token)
                logger.info("Re-authentication successful")
                return await self.request(method, path, json=json, params=params, files=files,
                                          response_model=response_model, authenticated=authenticated,
                                          retry=False)
            raise AuthenticationError(
                f"Fortem API Error 401 after re-authentication: {response.text}",
                status_code=401,
                body=response.text,
            )

        if not response.is_success:
            raise ApiError(
                f"Fortem API Error {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        envelope = ApiEnvelope[Any].model_validate(response.json())
        if response_model is None:
            return envelope.data
        return TypeAdapter(response_model).validate_python(envelope.data)
