"""Port for classifying downloaded media payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sirensync.domain.model import AudioFormat


@runtime_checkable
class MediaInspector(Protocol):
    def audio_format(self, raw: bytes) -> AudioFormat | None:
        """Return the detected audio format, or ``None`` when it is not recognised."""
        ...

    def is_image(self, data: bytes) -> bool: ...
