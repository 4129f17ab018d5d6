from typing import Protocol


class Surface(Protocol):
    """Anything pixels can be drawn onto and rendered from: a Canvas or a FixedCanvas."""

    def set(self, x: float, y: float) -> None: ...

    def clear(self) -> None: ...

    def frame(self) -> str:
        """Render the current pixels as text."""
        ...
