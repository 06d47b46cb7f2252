from datetime import datetime, timezone
from typing import List, Optional

from dockps.models import DisplayRow, PortMapping, RawContainer

ID_PICK_SIZE = 12
IMAGE_PICK_SIZE = 37
NAME_PICK_SIZE = 20
COMMAND_PICK_SIZE = 30

# Timestamps above this are taken to be in milliseconds
MILLISECONDS_THRESHOLD = 1_000_000_000_000

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY


def truncate_string(value: str, length: int, apply: bool) -> str:
    """
    Cuts `value` to its first `length` characters when `apply` is set. No ellipsis is appended.
    """
    if apply and len(value) > length:
        return value[:length]
    return value


def format_image(image: str, truncate: bool) -> str:
    if not truncate:
        return image
    # Digest is dropped before cutting so the tag stays visible
    return truncate_string(image.split('@', 1)[0], IMAGE_PICK_SIZE, truncate)


def format_name(names: List[str], truncate: bool) -> str:
    """
    Returns the primary name of a container. The daemon reports names with a leading `/`, which is stripped as
    `docker ps` does.

    :param names: The container's names, first one is the primary name
    :param truncate: Set to True to cut the name to NAME_PICK_SIZE
    :raises ValueError: If `names` is empty
    """
    if not names:
        raise ValueError("Container has no names")

    name = names[0]
    if name.startswith('/'):
        name = name[1:]
    return truncate_string(name, NAME_PICK_SIZE, truncate)


def format_port(port: PortMapping, truncate: bool) -> str:
    private_port = port.private_port or 0
    public_port = port.public_port or 0
    port_type = port.type or ''

    if not truncate:
        return f"{port.ip or ''}:{private_port}->{public_port}/{port_type}"

    if private_port == public_port or (port.private_port is not None and port.public_port is None):
        return f"{private_port}/{port_type}"
    return f"{private_port}->{public_port}/{port_type}"


def format_ports(ports: List[PortMapping], truncate: bool) -> str:
    return ", ".join(format_port(port, truncate) for port in ports)


def _to_seconds(created: int) -> int:
    if abs(created) > MILLISECONDS_THRESHOLD:
        # Truncate toward zero for pre-epoch values too
        return -(-created // 1000) if created < 0 else created // 1000
    return created


def _get_rough_period(seconds: int) -> Optional[str]:
    """
    Returns the rough length of a duration in words, or None if it is short enough to read as "now".
    """
    periods = [
        (547 * DAY, YEAR, 'year'),
        (345 * DAY, None, 'year'),
        (45 * DAY, MONTH, 'month'),
        (29 * DAY, None, 'month'),
        (10 * DAY + 12 * HOUR, WEEK, 'week'),
        (6 * DAY + 12 * HOUR, None, 'week'),
        (36 * HOUR, DAY, 'day'),
        (22 * HOUR, None, 'day'),
        (90 * MINUTE, HOUR, 'hour'),
        (45 * MINUTE, None, 'hour'),
        (90, MINUTE, 'minute'),
        (45, None, 'minute'),
    ]

    for threshold, unit, name in periods:
        if seconds > threshold:
            if unit is None:
                return f"an {name}" if name == 'hour' else f"a {name}"
            return f"{max(seconds // unit, 2)} {name}s"

    if seconds > 10:
        return f"{seconds} seconds"
    return None


def get_formatted_created(created: int, now: Optional[datetime] = None) -> str:
    """
    Converts the daemon's creation timestamp into a relative phrase like "3 minutes ago". The timestamp may be in
    seconds or in milliseconds. Falls back to the raw value when it does not map to a valid date.

    :param created: Seconds or milliseconds since the epoch
    :param now: Reference time, defaults to the current UTC time
    :return: The relative time, or `str(created)`
    """
    try:
        created_at = datetime.fromtimestamp(_to_seconds(created), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return str(created)

    if now is None:
        now = datetime.now(timezone.utc)

    delta = created_at - now
    seconds = int(delta.total_seconds())
    period = _get_rough_period(abs(seconds))

    if period is None:
        return "now"
    if seconds < 0:
        return f"{period} ago"
    return f"in {period}"


def get_display_row(container: RawContainer, truncate: bool) -> DisplayRow:
    """
    Generates the DisplayRow for a container. Status is never truncated and the created time ignores `truncate`.

    :param container: The RawContainer decoded from the daemon's response
    :param truncate: Set to False to show every field in full and ports with their host address
    :return: A DisplayRow
    """
    return DisplayRow(
        id=truncate_string(container.id, ID_PICK_SIZE, truncate),
        image=format_image(container.image, truncate),
        name=format_name(container.names, truncate),
        command=truncate_string(container.command, COMMAND_PICK_SIZE, truncate),
        created=get_formatted_created(container.created),
        status=container.status,
        ports=format_ports(container.ports, truncate),
    )


def get_display_rows(containers: List[RawContainer], truncate: bool) -> List[DisplayRow]:
    return [get_display_row(container, truncate) for container in containers]
