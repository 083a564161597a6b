"""Rich-based materialization progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from templatize.contracts.progress import MaterializeProgress


class RichMaterializeProgress(MaterializeProgress):
    """Terminal progress powered by Rich.

    Indeterminate phases (the clone) are reported as plain status lines, since
    ``git`` writes to the same terminal while they run. Counted phases (the
    substitution passes) get a live bar, started on first use::

        with RichMaterializeProgress() as progress:
            result = ProjectMaterializer(options, config, progress=progress).run()
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Clone": "[cyan]Clone[/]",
        "server": "[green]server[/]",
        "mobile": "[blue]mobile[/]",
        "root": "[magenta]root[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>14}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._started = False
        self._task_ids: dict[str, RichTaskID] = {}

    def __enter__(self) -> RichMaterializeProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._started:
            self._progress.stop()
            self._started = False

    def phase_start(self, phase: str, total: int | None = None) -> None:
        label = self._PHASE_LABELS.get(phase, phase)
        if total is None:
            self._console.print(f"{label} ...")
            return
        if not self._started:
            self._progress.start()
            self._started = True
        self._task_ids[phase] = self._progress.add_task(label, total=total)

    def item_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is not None:
            self._progress.advance(task_id)

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            self._console.print(f"[green]✓[/green] {phase}")
            return
        task = self._progress.tasks[task_id]
        if task.total is not None:
            self._progress.update(task_id, completed=task.total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            self._console.print(f"[red]✗[/red] {phase}")
            return
        self._progress.update(task_id, description=f"[red]✗[/red] {phase:>10}")
