import logging
from typing import Any, List

import httpx
from pydantic import TypeAdapter, ValidationError

from dockps.config import Config
from dockps.docker_client.errors import ClientBuildError, DecodeError, FetchError
from dockps.models import RawContainer

CONTAINERS_PATH = "/containers/json"

BUILD_FAILED_MESSAGE = "Failed to build client"
SEND_FAILED_MESSAGE = "Failed to send request"
PARSE_FAILED_MESSAGE = "Failed to parse JSON response (are you sure the Docker daemon is running?)"

_containers_adapter = TypeAdapter(List[RawContainer])


class DaemonClient:
    """
    This class is a thin wrapper around httpx.AsyncClient that sends GET requests to the daemon's HTTP API and returns
    the decoded JSON. The transport decides how the daemon is reached, requests are always addressed to `base_url`.
    """

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport):
        try:
            self.__client = httpx.AsyncClient(base_url=base_url, transport=transport)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logging.debug(f"{self.__class__.__name__} - Failed to build client for {base_url!r} ({e})")
            raise ClientBuildError(BUILD_FAILED_MESSAGE) from e

    async def __aenter__(self) -> 'DaemonClient':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.__client.aclose()

    async def get_json(self, path: str) -> Any:
        """
        Sends a single GET request for `path` and decodes the response body as JSON.

        :param path: API path, relative to the base url
        :return: The decoded JSON value
        :raises FetchError: If the request could not be sent or the response could not be read
        :raises DecodeError: If the body is not valid JSON
        """
        try:
            response = await self.__client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logging.debug(f"{self.__class__.__name__} - GET {path} failed ({type(e).__name__}: {e})")
            raise FetchError(SEND_FAILED_MESSAGE) from e

        logging.debug(f"{self.__class__.__name__} - GET {response.url} returned {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logging.debug(f"{self.__class__.__name__} - Response for {path} is not JSON ({e})")
            raise DecodeError(PARSE_FAILED_MESSAGE) from e

    async def get_containers(self) -> List[RawContainer]:
        """
        Returns the containers reported by the daemon, in the order the daemon returned them. The whole response is
        discarded if any entry does not match the expected schema.

        :return: A list of RawContainer
        :raises FetchError: If the request failed
        :raises DecodeError: If the body is not a JSON array of containers
        """
        payload = await self.get_json(CONTAINERS_PATH)

        try:
            containers = _containers_adapter.validate_python(payload)
        except ValidationError as e:
            logging.debug(f"{self.__class__.__name__} - Unexpected containers payload ({e.error_count()} errors)")
            logging.debug(payload)
            raise DecodeError(PARSE_FAILED_MESSAGE) from e

        logging.debug(f"{self.__class__.__name__} - Received {len(containers)} containers")
        return containers


class TcpDaemonClient(DaemonClient):
    """
    Reaches the daemon over plain TCP, HTTP/1.1 only.
    """

    def __init__(self, config: Config):
        super().__init__(config.docker_url, httpx.AsyncHTTPTransport(http1=True, http2=False))


class UnixSocketDaemonClient(DaemonClient):
    """
    Reaches the daemon by dialing `config.docker_unix` as a Unix domain socket. The host part of `config.docker_url`
    is only used to address the requests.
    """

    def __init__(self, config: Config):
        if "\0" in config.docker_unix:
            logging.debug(f"{self.__class__.__name__} - Invalid socket path {config.docker_unix!r}")
            raise ClientBuildError(BUILD_FAILED_MESSAGE)

        super().__init__(config.docker_url, httpx.AsyncHTTPTransport(uds=config.docker_unix))


def build_client(config: Config) -> DaemonClient:
    """
    Returns the client matching the config: a Unix socket client unless the socket path is empty.

    :param config: The resolved Config
    :return: A DaemonClient
    :raises ClientBuildError: If the client could not be constructed
    """
    if config.uses_unix_socket:
        logging.debug(f"DaemonClient - Using unix socket {config.docker_unix} for {config.docker_url}")
        return UnixSocketDaemonClient(config)

    logging.debug(f"DaemonClient - Using TCP for {config.docker_url}")
    return TcpDaemonClient(config)


async def fetch_containers(config: Config) -> List[RawContainer]:
    """
    Builds a client for the config, fetches the container list once and closes the client.
    """
    async with build_client(config) as client:
        return await client.get_containers()
