"""recomp -- scaffolding generator for React components, contexts, and hooks.

Quick usage::

    from recomp.config import ArtifactKind, FileSelection
    from recomp.scaffolder import ArtifactGenerator

    generator = ArtifactGenerator()
    plan = generator.plan(ArtifactKind.COMPONENT, "user-profile")
    generator.generate(plan)
"""

__version__ = "0.1.0"
