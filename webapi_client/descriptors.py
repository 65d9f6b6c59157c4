"""Descriptors of API actions, their parameters and their results."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from .interfaces import (
    ApiActionAttribute,
    ApiActionFilterAttribute,
    ApiParameterAttribute,
    ApiReturnAttribute,
)
from .returns import AutoReturn


@dataclass
class ApiParameterDescriptor:
    """One formal parameter of an action.

    Attributes:
        name: Parameter name, used for keyword binding and by hooks.
        index: Position in the action's parameter list.
        parameter_type: Declared value type.
        value: Bound value. On a template this is the default used when
               the caller does not bind the parameter.
        attributes: Parameter-level hooks, run in order.
    """
    name: str
    index: int = 0
    parameter_type: Any = object
    value: Any = None
    attributes: tuple[ApiParameterAttribute, ...] = ()

    def __post_init__(self):
        if not isinstance(self.attributes, tuple):
            self.attributes = tuple(self.attributes)

    def clone(self) -> "ApiParameterDescriptor":
        """Copy the descriptor, sharing its hooks."""
        return dataclasses.replace(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ApiReturnDescriptor:
    """The result contract of an action.

    Attributes:
        data_type: The type the caller expects back; None for no result.
        attribute: Extractor producing a ``data_type`` value from the response.
    """
    data_type: Any = None
    attribute: ApiReturnAttribute = field(default_factory=AutoReturn)


@dataclass(frozen=True)
class ApiActionDescriptor:
    """Template of one API operation.

    A descriptor is built once and reused by every invocation. Hooks,
    filters and the return descriptor are shared; each invocation works on
    a ``clone()`` whose parameters are its own.

    Example:
        >>> get_user = ApiActionDescriptor(
        ...     name="get_user",
        ...     attributes=[HttpHost("https://api.example.com"), HttpGet("/users/{id}")],
        ...     parameters=[ApiParameterDescriptor("id", attributes=[PathQuery()])],
        ...     returns=ApiReturnDescriptor(User),
        ... )
    """
    name: str
    attributes: tuple[ApiActionAttribute, ...] = ()
    filters: tuple[ApiActionFilterAttribute, ...] = ()
    parameters: tuple[ApiParameterDescriptor, ...] = ()
    returns: ApiReturnDescriptor = field(default_factory=ApiReturnDescriptor)

    def __post_init__(self):
        for name in ("attributes", "filters"):
            if not isinstance(getattr(self, name), tuple):
                object.__setattr__(self, name, tuple(getattr(self, name)))
        # Parameters may be shared between templates; never renumber them in place.
        parameters = tuple(
            p if p.index == index else dataclasses.replace(p, index=index)
            for index, p in enumerate(self.parameters)
        )
        object.__setattr__(self, "parameters", parameters)

    def clone(self) -> "ApiActionDescriptor":
        """Copy the descriptor with fresh parameter descriptors."""
        return dataclasses.replace(
            self, parameters=tuple(p.clone() for p in self.parameters)
        )

    def bind(self, *args: Any, **kwargs: Any) -> "ApiActionDescriptor":
        """Clone the descriptor and bind call arguments to its parameters.

        Positional arguments bind in declaration order, keyword arguments by
        parameter name. Parameters left unbound keep their template value.

        Raises:
            TypeError: On surplus, unknown or duplicated arguments.
        """
        if len(args) > len(self.parameters):
            raise TypeError(
                f"{self.name}() takes {len(self.parameters)} arguments "
                f"but {len(args)} were given"
            )
        action = self.clone()
        for parameter, value in zip(action.parameters, args):
            parameter.value = value

        by_name = {p.name: p for p in action.parameters}
        for name, value in kwargs.items():
            parameter = by_name.get(name)
            if parameter is None:
                raise TypeError(f"{self.name}() got an unexpected argument {name!r}")
            if parameter.index < len(args):
                raise TypeError(f"{self.name}() got multiple values for argument {name!r}")
            parameter.value = value
        return action

    def get_parameter(self, name: str) -> Optional[ApiParameterDescriptor]:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def __str__(self) -> str:
        return self.name
