"""Client IP detection behind proxies/CDNs, and private-range filtering."""

from collections.abc import Iterable, Mapping

_MAPPED_V4_PREFIX = "::ffff:"


def extract_client_ip(
    headers: Mapping[str, str],
    peer: str | None,
    header_order: Iterable[str],
) -> str:
    """
    Return the first non-empty candidate from the configured headers, in order,
    then the transport peer address. Comma-separated values (X-Forwarded-For)
    yield their left-most entry. Empty string when nothing is available.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    for name in header_order:
        raw = lowered.get(name.lower())
        if not raw:
            continue
        first = str(raw).split(",")[0].strip()
        if first:
            return first
    return (peer or "").strip()


def normalize_ip(ip: str | None) -> str:
    if not ip:
        return ""
    s = str(ip).strip()
    if s.lower().startswith(_MAPPED_V4_PREFIX):
        s = s[len(_MAPPED_V4_PREFIX):]
    if "%" in s:
        s = s.split("%", 1)[0]
    return s


def detect_client_ip(
    headers: Mapping[str, str],
    peer: str | None,
    header_order: Iterable[str],
) -> str:
    return normalize_ip(extract_client_ip(headers, peer, header_order))


def is_private_ip(ip: str | None) -> bool:
    """
    Loopback and RFC 1918 ranges by prefix. Empty input counts as private so it
    is never sent to a geolocation provider.
    """
    if not ip:
        return True
    s = ip.strip()
    if not s:
        return True

    if s in ("127.0.0.1", "::1"):
        return True
    if s.startswith("10.") or s.startswith("192.168."):
        return True

    if s.startswith("172."):
        parts = s.split(".")
        try:
            second = int(parts[1])
        except (IndexError, ValueError):
            return False
        if 16 <= second <= 31:
            return True

    return False
