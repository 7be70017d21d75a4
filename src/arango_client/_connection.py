"""A single ArangoDB endpoint and the HTTP round trip against it."""

import base64
import logging

import httpx

from ._models import ErrorDetail, Request, Response, infer_body_type
from ._results import Completed, ProtocolError, SendResult, TransportFailure
from ._settings import ArangoSettings, user_agent

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


class Connection:
    """Stores data about a single endpoint and talks to it.

    A connection is configuration only: every ``send`` opens its own client,
    so one instance can be shared between threads.

    Examples
    --------
    >>> conn = Connection("main", "db.example.com", 8530, is_secured=True, database_name="mydb")
    >>> conn.base_uri
    'https://db.example.com:8530/_db/mydb/'
    """

    def __init__(
        self,
        alias: str,
        hostname: str,
        port: int,
        is_secured: bool = False,
        database_name: str | None = None,
        username: str = "",
        password: str = "",
        use_web_proxy: bool = False,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a connection.

        Parameters
        ----------
        alias
            Label the connection is known by.
        hostname, port
            Server address.
        is_secured
            Use https instead of http.
        database_name
            When set, requests are addressed to ``/_db/{database_name}/``.
        username, password
            Basic auth credentials; both must be non-empty to be sent.
        use_web_proxy
            Honour proxy settings from the environment.
        transport
            httpx transport to send through instead of the network.
        """
        self._alias = alias
        self._hostname = hostname
        self._port = port
        self._is_secured = is_secured
        self._database_name = database_name or None
        self._username = username
        self._password = password
        self._use_web_proxy = use_web_proxy
        self._transport = transport

        scheme = "https" if is_secured else "http"
        base_uri = f"{scheme}://{hostname}:{port}/"
        if self._database_name is not None:
            base_uri += f"_db/{self._database_name}/"
        self._base_uri = base_uri

    @classmethod
    def from_settings(
        cls,
        settings: ArangoSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "Connection":
        return cls(
            settings.alias,
            settings.hostname,
            settings.port,
            is_secured=settings.is_secured,
            database_name=settings.database_name,
            username=settings.username,
            password=settings.password.get_secret_value(),
            use_web_proxy=settings.use_web_proxy,
            transport=transport,
        )

    @property
    def alias(self) -> str:
        return self._alias

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def port(self) -> int:
        return self._port

    @property
    def is_secured(self) -> bool:
        return self._is_secured

    @property
    def database_name(self) -> str | None:
        return self._database_name

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def use_web_proxy(self) -> bool:
        return self._use_web_proxy

    @property
    def base_uri(self) -> str:
        return self._base_uri

    def __repr__(self) -> str:
        return f"<Connection alias={self._alias!r} base_uri={self._base_uri!r}>"

    def build_request(self, client: httpx.Client, request: Request) -> httpx.Request:
        """Turn a request description into the httpx request that ``send`` transmits."""
        headers = httpx.Headers(request.headers)
        headers["User-Agent"] = user_agent()

        if self._username and self._password:
            headers["Authorization"] = basic_auth_header(self._username, self._password)

        if request.body:
            content = request.body.encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE
            headers["Content-Length"] = str(len(content))
        else:
            content = None
            headers.pop("Content-Type", None)
            headers["Content-Length"] = "0"

        return client.build_request(
            request.method.value,
            self._base_uri + request.relative_url(),
            headers=headers,
            content=content,
        )

    def send(self, request: Request) -> SendResult:
        """Send one request and classify the outcome.

        Returns ``Completed`` for a 2xx answer, ``ProtocolError`` when the
        server answered with an error status and ``TransportFailure`` when no
        usable HTTP response was received (network errors, redirect loops,
        undecodable bodies). Nothing is retried.
        """
        with httpx.Client(
            transport=self._transport,
            trust_env=self._use_web_proxy,
            follow_redirects=True,
        ) as client:
            http_request = self.build_request(client, request)
            logger.debug("%s %s [%s]", http_request.method, http_request.url, self._alias)
            try:
                http_response = client.send(http_request)
            except httpx.RequestError as exc:
                logger.warning(
                    "Transport failure for %s %s: %s", http_request.method, http_request.url, exc
                )
                return TransportFailure(exception=exc, message=str(exc))

        logger.debug("%s %s -> %d", http_request.method, http_request.url, http_response.status_code)

        try:
            http_response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            return ProtocolError(response=_protocol_error_response(exc))

        body = http_response.text
        return Completed(
            response=Response(
                status_code=http_response.status_code,
                headers=dict(http_response.headers),
                body=body,
                body_type=infer_body_type(body),
            )
        )


def _protocol_error_response(exc: httpx.HTTPStatusError) -> Response:
    http_response = exc.response
    body = http_response.text or None

    fields = {
        "status_code": http_response.status_code,
        "headers": dict(http_response.headers),
        "body": body,
        "body_type": infer_body_type(body) if body else None,
    }
    error_body = Response(**fields).parse_error_body()

    if error_body is not None and error_body.error:
        error = ErrorDetail(
            status_code=error_body.code or http_response.status_code,
            number=error_body.error_num,
            message=f"ArangoDB error: {error_body.error_message}",
        )
    else:
        error = ErrorDetail(
            status_code=http_response.status_code,
            number=0,
            message=f"Protocol error: {str(exc).splitlines()[0]}",
        )
    return Response(**fields, error=error)
