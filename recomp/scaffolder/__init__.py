"""recomp scaffolder -- generates React component, context, and hook folders.

Quick usage::

    from recomp.scaffolder import ArtifactGenerator
    from recomp.config import ArtifactKind, FileSelection

    generator = ArtifactGenerator()
    plan = generator.plan(
        ArtifactKind.COMPONENT,
        "user-profile",
        selection=FileSelection(include_css=False),
    )
    generator.generate(plan)
"""

from recomp.scaffolder.generator import ArtifactGenerator
from recomp.scaffolder.models import GeneratedFile, GenerationPlan
from recomp.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactGenerator",
    "GeneratedFile",
    "GenerationPlan",
    "TemplateRenderer",
]
