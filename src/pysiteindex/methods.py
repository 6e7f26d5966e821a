"""
Site index method enumeration.

Two published equation sets are supported:

- SHARMA-BRUNNER (default): Sharma, Brunner, Eid & Øyen (2011)
- TVEITE-BRAASTAD: Tveite (1977) spruce and Braastad (1980) pine

Both use Eriksson (1997) for birch.
"""

from enum import Enum
from typing import Any, Union

from .exceptions import UnsupportedMethodError

DEFAULT_METHOD_TOKEN = "default"


class SiteIndexMethod(str, Enum):
    """Equation set used to compute site index for a whole batch."""

    SHARMA_BRUNNER = "SHARMA-BRUNNER"
    """Generalized algebraic difference curves from national forest inventory data."""

    TVEITE_BRAASTAD = "TVEITE-BRAASTAD"
    """Classic Norwegian curves for spruce (Tveite 1977) and pine (Braastad 1980)."""

    @classmethod
    def default(cls) -> "SiteIndexMethod":
        return cls.SHARMA_BRUNNER

    @classmethod
    def from_string(cls, method: Any) -> "SiteIndexMethod":
        """
        Resolve a method token to a SiteIndexMethod member.

        Args:
            method: A member, ``"default"``, ``"SHARMA-BRUNNER"`` or
                ``"TVEITE-BRAASTAD"``. Only ``"default"`` ignores case;
                the method names must match exactly

        Returns:
            The corresponding SiteIndexMethod member

        Raises:
            UnsupportedMethodError: If the token is not recognized

        Example:
            >>> SiteIndexMethod.from_string("default")
            SiteIndexMethod.SHARMA_BRUNNER
        """
        if isinstance(method, cls):
            return method
        if not isinstance(method, str):
            raise UnsupportedMethodError(method, cls.list_tokens())
        if method.lower() == DEFAULT_METHOD_TOKEN:
            return cls.default()

        for member in cls:
            if member.value == method:
                return member

        raise UnsupportedMethodError(method, cls.list_tokens())

    @classmethod
    def list_tokens(cls) -> list[str]:
        """All accepted tokens, including ``"default"``."""
        return [DEFAULT_METHOD_TOKEN] + [member.value for member in cls]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SiteIndexMethod.{self.name}"


MethodLike = Union[SiteIndexMethod, str]

__all__ = [
    "SiteIndexMethod",
    "MethodLike",
    "DEFAULT_METHOD_TOKEN",
]
