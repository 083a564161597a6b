"""Project materialization: clone the template, then rewrite its tokens.

The sequence is linear::

    NOT_STARTED --clone()--> CLONED --template()--> TEMPLATED --finish()--> DONE

Each transition returns a :class:`PhaseResult`. A failed transition leaves the
state where it was and carries a :class:`PhaseFailure` naming the phase.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from templatize.contracts.config import ProjectOptions, TemplateConfig, TemplatePass
from templatize.contracts.exceptions import (
    InvalidTransitionError,
    MissingStructureError,
    TargetExistsError,
    TemplatizeError,
)
from templatize.contracts.progress import MaterializeProgress, NullMaterializeProgress
from templatize.core.git import GitClient
from templatize.core.walker import collect_tree, substitute_file

logger = logging.getLogger(__name__)

CLONE_PHASE = "Clone"


class MaterializeState(StrEnum):
    NOT_STARTED = "not-started"
    CLONED = "cloned"
    TEMPLATED = "templated"
    DONE = "done"


@dataclass(frozen=True)
class PhaseFailure:
    """A failed transition, tagged with the phase it happened in."""

    phase: str
    error: TemplatizeError

    def __str__(self) -> str:
        return f"{self.phase}: {self.error}"


@dataclass(frozen=True)
class PhaseResult:
    state: MaterializeState
    changed_files: tuple[Path, ...] = ()
    failure: PhaseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class MaterializeResult:
    state: MaterializeState
    target_dir: Path
    changed_files: list[Path] = field(default_factory=list)
    metadata_removed: bool = False
    next_steps: list[str] = field(default_factory=list)
    failure: PhaseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.state is MaterializeState.DONE


class ProjectMaterializer:
    """Drives one project from an empty target directory to a templated copy."""

    def __init__(
        self,
        options: ProjectOptions,
        config: TemplateConfig,
        *,
        git: GitClient | None = None,
        progress: MaterializeProgress | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._git = git or GitClient()
        self._progress = progress or NullMaterializeProgress()
        self._state = MaterializeState.NOT_STARTED
        self._metadata_removed = False
        self._next_steps: list[str] = []

    @property
    def state(self) -> MaterializeState:
        return self._state

    @property
    def target_dir(self) -> Path:
        return self._options.resolved_target_dir

    @property
    def metadata_removed(self) -> bool:
        return self._metadata_removed

    def _require(self, expected: MaterializeState, action: str) -> None:
        if self._state is not expected:
            raise InvalidTransitionError(f"cannot {action} from state {self._state.value!r}")

    def clone(self) -> PhaseResult:
        """Check out the template into the target directory and drop its history."""
        self._require(MaterializeState.NOT_STARTED, "clone")
        target = self.target_dir
        self._progress.phase_start(CLONE_PHASE)
        try:
            if target.exists():
                raise TargetExistsError(target)
            logger.info("Cloning repository from %s", self._config.repo_url)
            self._git.clone(self._config.repo_url, target)
        except TemplatizeError as exc:
            self._progress.phase_error(CLONE_PHASE, exc)
            return PhaseResult(state=self._state, failure=PhaseFailure(phase="cloning repository", error=exc))

        self._metadata_removed = self._git.remove_metadata(target)
        self._state = MaterializeState.CLONED
        self._progress.phase_done(CLONE_PHASE)
        return PhaseResult(state=self._state)

    def template(self) -> PhaseResult:
        """Run every configured substitution pass over the cloned tree."""
        self._require(MaterializeState.CLONED, "template")
        changed: list[Path] = []
        for template_pass in self._config.passes:
            try:
                changed.extend(self._run_pass(template_pass))
            except TemplatizeError as exc:
                self._progress.phase_error(template_pass.name, exc)
                failure = PhaseFailure(phase=f"templating {template_pass.name}", error=exc)
                return PhaseResult(state=self._state, changed_files=tuple(changed), failure=failure)
        self._state = MaterializeState.TEMPLATED
        return PhaseResult(state=self._state, changed_files=tuple(changed))

    def finish(self) -> PhaseResult:
        self._require(MaterializeState.TEMPLATED, "finish")
        self._next_steps = [step.format(target_dir=self.target_dir) for step in self._config.next_steps]
        self._state = MaterializeState.DONE
        return PhaseResult(state=self._state)

    def run(self) -> MaterializeResult:
        """Run all remaining transitions, stopping at the first failure."""
        transitions = {
            MaterializeState.NOT_STARTED: self.clone,
            MaterializeState.CLONED: self.template,
            MaterializeState.TEMPLATED: self.finish,
        }
        result = MaterializeResult(state=self._state, target_dir=self.target_dir)
        while self._state in transitions:
            phase = transitions[self._state]()
            result.state = phase.state
            result.changed_files.extend(phase.changed_files)
            if not phase.ok:
                result.failure = phase.failure
                break
        result.metadata_removed = self._metadata_removed
        result.next_steps = list(self._next_steps)
        return result

    def _pass_files(self, template_pass: TemplatePass) -> list[Path]:
        base = self.target_dir / template_pass.path
        if not base.exists():
            raise MissingStructureError(base, kind=f"{template_pass.name} directory")
        if template_pass.recursive:
            return collect_tree(base, self._config.skip_extensions)
        return [base / name for name in template_pass.files or ()]

    def _run_pass(self, template_pass: TemplatePass) -> list[Path]:
        files = self._pass_files(template_pass)
        self._progress.phase_start(template_pass.name, total=len(files))
        changed: list[Path] = []
        for path in files:
            if substitute_file(path, template_pass.table, missing_ok=template_pass.optional):
                changed.append(path)
            self._progress.item_done(template_pass.name)
        self._progress.phase_done(template_pass.name)
        logger.debug("Pass %s rewrote %d of %d files", template_pass.name, len(changed), len(files))
        return changed


__all__ = [
    "MaterializeResult",
    "MaterializeState",
    "PhaseFailure",
    "PhaseResult",
    "ProjectMaterializer",
]
