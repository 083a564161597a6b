"""Progress observer that records every event."""

from __future__ import annotations

from templatize.contracts.progress import MaterializeProgress


class RecordingProgress(MaterializeProgress):
    def __init__(self) -> None:
        self.events: list[tuple[str, str, int | None]] = []

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self.events.append(("start", phase, total))

    def item_done(self, phase: str) -> None:
        self.events.append(("item", phase, None))

    def phase_done(self, phase: str) -> None:
        self.events.append(("done", phase, None))

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.events.append(("error", phase, None))
