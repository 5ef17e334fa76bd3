"""String-based identifier value objects."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Identity:
    """Identity a client authenticated with, usually a hex key fingerprint.

    An empty value means the server could not attribute the request.

    Examples::

        ident = Identity("3ecfcdf38fcbe141ae26a1030f81e96b753365a46760ae6b578698a97c59fd22")
        Identity().is_unknown  # True
    """

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Identity value must be str, not {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value

    @property
    def is_unknown(self) -> bool:
        return not self.value


__all__ = ["Identity"]
