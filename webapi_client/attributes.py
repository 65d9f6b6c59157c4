"""Built-in request-building hooks.

Action-level hooks are constructed with everything they need and called
with the context. Parameter-level hooks take their value from the parameter
they are declared on. ``Header`` and ``Timeout`` work at both levels.
"""

from typing import TYPE_CHECKING, Any, Optional

from .models import to_pairs

if TYPE_CHECKING:
    from .contexts import ApiActionContext
    from .descriptors import ApiParameterDescriptor


class HttpHost:
    """Sets the base address of the request."""

    def __init__(self, host: str):
        self.host = host

    async def before_request(self, context: "ApiActionContext") -> None:
        context.request.host = self.host


class HttpMethod:
    """Sets the HTTP method and, optionally, the route."""

    method = "GET"

    def __init__(self, method: Optional[str] = None, path: Optional[str] = None):
        if method is not None:
            self.method = method.upper()
        self.path = path

    async def before_request(self, context: "ApiActionContext") -> None:
        context.request.method = self.method
        if self.path is not None:
            context.request.path = self.path


class HttpGet(HttpMethod):
    method = "GET"

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path)


class HttpPost(HttpMethod):
    method = "POST"

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path)


class HttpPut(HttpMethod):
    method = "PUT"

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path)


class HttpPatch(HttpMethod):
    method = "PATCH"

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path)


class HttpDelete(HttpMethod):
    method = "DELETE"

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path)


class Header:
    """Sets a request header.

    On an action the value is fixed; on a parameter it is the bound value
    and a None value leaves the request untouched.

    Example:
        >>> Header("Accept", "application/json")   # action-level
        >>> Header("X-Request-Id")                  # parameter-level
    """

    def __init__(self, name: str, value: Any = None):
        self.name = name
        self.value = value

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        value = self.value if parameter is None else parameter.value
        if value is not None:
            context.request.set_header(self.name, value)


class Timeout:
    """Sets the request timeout in seconds."""

    def __init__(self, seconds: Optional[float] = None):
        self.seconds = seconds

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        seconds = self.seconds if parameter is None else parameter.value
        if seconds is None:
            return
        seconds = float(seconds)
        if seconds <= 0:
            raise ValueError(f"Timeout must be positive, got {seconds}")
        context.request.timeout = seconds


class PathQuery:
    """Writes the parameter into the route or the query string.

    A ``{name}`` placeholder in the path is filled with the value; otherwise
    the value is appended as query pairs. Dicts and models with ``to_dict()``
    expand to one pair per field, sequences to repeated pairs.

    Args:
        name: Name to use instead of the parameter's own.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        if parameter is None:
            raise TypeError("PathQuery must be declared on a parameter")
        value = parameter.value
        if value is None:
            return
        request = context.request

        if isinstance(value, dict) or hasattr(value, "to_dict"):
            for name, item in to_pairs(value):
                if not request.replace_route_value(name, item):
                    request.add_query(name, item)
            return

        name = self.name or parameter.name
        if isinstance(value, (list, tuple, set)):
            for item in value:
                if item is not None:
                    request.add_query(name, item)
        elif not request.replace_route_value(name, value):
            request.add_query(name, value)


class Url:
    """Uses the parameter value as the request URL."""

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        if parameter is None or parameter.value is None:
            raise ValueError("Url parameter requires a value")
        context.request.path = str(parameter.value)


class JsonContent:
    """Sends the parameter as the JSON request body."""

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        if parameter is None:
            raise TypeError("JsonContent must be declared on a parameter")
        value = parameter.value
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        context.request.json = value


class FormContent:
    """Adds the parameter's fields to the form-encoded request body."""

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None:
        if parameter is None:
            raise TypeError("FormContent must be declared on a parameter")
        if parameter.value is None:
            return
        form = context.request.form
        if form is None:
            form = context.request.form = {}
        for name, item in to_pairs(parameter.value):
            if name in form:
                existing = form[name]
                form[name] = (existing if isinstance(existing, list) else [existing]) + [item]
            else:
                form[name] = item
