"""Request model written to by hooks before a request is sent."""

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote


@dataclass
class HttpApiRequest:
    """An HTTP request under construction.

    Hooks mutate this object freely; it is turned into an ``httpx.Request``
    only when the transport sends it.

    Attributes:
        method: HTTP method (e.g., "GET").
        host: Base address (e.g., "https://api.example.com/v1").
        path: Route relative to ``host``, or an absolute URL. May contain
              ``{name}`` placeholders filled by parameter hooks.
        query: Query string pairs, in order. Names may repeat.
        headers: Request headers.
        content: Raw request body.
        json: JSON request body.
        form: Form-encoded request body.
        timeout: Per-request timeout in seconds (None uses the client's).
    """
    method: str = "GET"
    host: Optional[str] = None
    path: str = ""
    query: list[tuple[str, str]] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None
    json: Any = None
    form: Optional[dict[str, Any]] = None
    timeout: Optional[float] = None

    def set_header(self, name: str, value: Any) -> None:
        """Set a header, replacing any value with the same name (case-insensitive)."""
        for existing in list(self.headers):
            if existing.lower() == name.lower():
                del self.headers[existing]
        self.headers[name] = str(value)

    def add_query(self, name: str, value: Any) -> None:
        """Append a query string pair."""
        self.query.append((name, _format_value(value)))

    def replace_route_value(self, name: str, value: Any) -> bool:
        """Fill the ``{name}`` placeholder in the path.

        Returns:
            True if the placeholder was present and replaced.
        """
        placeholder = "{" + name + "}"
        if placeholder not in self.path:
            return False
        self.path = self.path.replace(placeholder, quote(_format_value(value), safe=""))
        return True

    def build_url(self) -> str:
        """Join host and path into the URL to send.

        Raises:
            ValueError: If the path is relative and no host is set.
        """
        if "://" in self.path:
            return self.path
        if not self.host:
            raise ValueError(f"No host configured for relative path {self.path!r}")
        if not self.path:
            return self.host
        return f"{self.host.rstrip('/')}/{self.path.lstrip('/')}"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def to_pairs(value: Any) -> list[tuple[str, Any]]:
    """Flatten a dict or a model with ``to_dict()`` into name/value pairs.

    ``None`` values are dropped and sequences become repeated pairs.
    """
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    pairs: list[tuple[str, Any]] = []
    for name, item in value.items():
        if item is None:
            continue
        if isinstance(item, (list, tuple, set)):
            pairs.extend((name, element) for element in item if element is not None)
        else:
            pairs.append((name, item))
    return pairs
