class DaemonClientError(Exception):
    """
    Base class for the fatal errors raised while talking to the daemon. The message is the diagnostic shown to the
    user.
    """


class ClientBuildError(DaemonClientError):
    pass


class FetchError(DaemonClientError):
    pass


class DecodeError(DaemonClientError):
    pass
