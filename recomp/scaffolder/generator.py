"""Artifact planning and materialisation.

Turns a kind, a raw name, and a FileSelection into a
:class:`~recomp.scaffolder.models.GenerationPlan`, expands the plan into
generated files, and writes them to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from recomp.config import ArtifactKind, FileSelection, default_base_dir
from recomp.errors import GenerationError, MissingArgumentError, TargetAlreadyExistsError
from recomp.utils import display_path, print_info, print_success

from .component_gen import ComponentGenerator
from .context_gen import ContextGenerator
from .filesystem import FileSystem
from .hook_gen import HookGenerator
from .models import GeneratedFile, GenerationPlan
from .naming import hook_base_name, to_pascal_case
from .templates import TemplateRenderer


class KindGenerator(Protocol):
    def folder_name(self, name: str) -> str: ...

    def build_files(self, name: str, selection: FileSelection) -> list[GeneratedFile]: ...


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ArtifactGenerator:
    """Plans and writes one component, context, or hook.

    Usage::

        generator = ArtifactGenerator()
        plan = generator.plan(ArtifactKind.HOOK, "use-toggle")
        generator.generate(plan)    # ./src/hooks/Toggle/{index.ts, ...}
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        fs: FileSystem | None = None,
        *,
        verbose: bool = True,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.fs = fs or FileSystem()
        self.verbose = verbose
        self.generators: dict[ArtifactKind, KindGenerator] = {
            ArtifactKind.COMPONENT: ComponentGenerator(self.renderer),
            ArtifactKind.CONTEXT: ContextGenerator(self.renderer),
            ArtifactKind.HOOK: HookGenerator(self.renderer),
        }

    # -- Public API --------------------------------------------------------

    def plan(
        self,
        kind: ArtifactKind,
        raw_name: Optional[str],
        directory: str | Path | None = None,
        selection: FileSelection | None = None,
    ) -> GenerationPlan:
        """Resolve names, directories, and optional files for one artifact.

        Raises:
            MissingArgumentError: If *raw_name* is missing or resolves to an
                empty identifier (e.g. a bare ``use-`` for a hook).
        """
        if not raw_name or not raw_name.strip():
            raise MissingArgumentError("name", f"{kind.label} name is required.")

        raw_name = raw_name.strip()
        if kind is ArtifactKind.HOOK:
            name = hook_base_name(raw_name)
        else:
            name = to_pascal_case(raw_name)
        if not name:
            raise MissingArgumentError("name", f"{kind.label} name is required.")

        selection = selection or FileSelection()
        if kind is not ArtifactKind.COMPONENT and selection.include_css:
            selection = selection.model_copy(update={"include_css": False})

        return GenerationPlan(
            kind=kind,
            raw_name=raw_name,
            name=name,
            folder_name=self.generators[kind].folder_name(name),
            base_dir=Path(directory) if directory is not None else default_base_dir(kind),
            selection=selection,
        )

    def materialize(self, plan: GenerationPlan) -> list[GeneratedFile]:
        """Expand *plan* into the directory entry followed by its files."""
        files = self.generators[plan.kind].build_files(plan.name, plan.selection)
        return [GeneratedFile(path=".", content=None), *files]

    def generate(self, plan: GenerationPlan) -> list[Path]:
        """Write every file of *plan* under ``plan.target_dir``.

        The target is checked before anything is written and again right
        before the staging directory is renamed onto it, once all writes
        have succeeded.

        Returns:
            Paths of the created directory and files, in plan order.

        Raises:
            TargetAlreadyExistsError: If the artifact directory exists.
            GenerationError: If a directory or file cannot be written.
        """
        target = plan.target_dir
        if self.fs.exists(target):
            raise TargetAlreadyExistsError(target)

        files = self.materialize(plan)
        self._report(f"Creating {plan.kind.value} '{plan.name}' in '{display_path(target)}'...")

        try:
            self.fs.create_dir(plan.base_dir)
            staging = self.fs.make_staging_dir(plan.base_dir, plan.folder_name)
        except OSError as exc:
            raise GenerationError(target, exc) from exc

        try:
            for generated in files:
                if not generated.is_directory:
                    self.fs.write_file(staging / generated.path, generated.content or "")
            if self.fs.exists(target):
                self.fs.discard(staging)
                raise TargetAlreadyExistsError(target)
            self.fs.commit(staging, target)
        except OSError as exc:
            self.fs.discard(staging)
            raise GenerationError(target, exc) from exc

        written: list[Path] = []
        for generated in files:
            if generated.is_directory:
                written.append(target)
                self._report(f"   -> Created directory: {display_path(target)}")
            else:
                path = target / generated.path
                written.append(path)
                self._report(f"   -> Created file:      {display_path(path)}")

        if self.verbose:
            print_success(f"{plan.kind.label} '{plan.name}' created successfully!")
        return written

    # -- Internal ----------------------------------------------------------

    def _report(self, message: str) -> None:
        if self.verbose:
            print_info(message)
