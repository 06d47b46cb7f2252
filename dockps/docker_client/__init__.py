from dockps.docker_client.daemon_client import (DaemonClient, TcpDaemonClient, UnixSocketDaemonClient, build_client,
                                                fetch_containers)
from dockps.docker_client.errors import ClientBuildError, DaemonClientError, DecodeError, FetchError
