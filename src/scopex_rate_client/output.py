"""Shared output slot consumed by the next workflow step."""

from typing import Any

CURRENT_RATE_KEY = "currentRate"


class StepOutput:
    """Mutable output object exposing ``current_rate``.

    Reading ``current_rate`` before anything was written returns None, but
    the slot is only reported as present once it has been assigned.

    Example:
        ```python
        output = StepOutput()
        assert CURRENT_RATE_KEY not in output
        output.current_rate = 83.45
        print(output.to_dict())  # {"currentRate": 83.45}
        ```
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @property
    def current_rate(self) -> float | None:
        return self._values.get(CURRENT_RATE_KEY)

    @current_rate.setter
    def current_rate(self, value: float | None) -> None:
        self._values[CURRENT_RATE_KEY] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def to_dict(self) -> dict[str, Any]:
        """Return the written values keyed by their workflow names."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"StepOutput({self._values!r})"
