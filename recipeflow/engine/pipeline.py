"""Pipeline orchestrator — runs transforms in dependency order with adaptive gating."""

from __future__ import annotations

import logging
import time

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import (
    Layer,
    TransformRegistry,
    TransformSpec,
    get_registry,
    load_transforms,
)

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline.

    By default a failing transform is recorded in ``ctx.errors`` and the run
    continues. With ``fail_fast=True`` the exception propagates instead.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        fail_fast: bool = False,
    ) -> None:
        self.registry = registry or get_registry()
        self.fail_fast = fail_fast

    def run(self, ctx: LinkageContext, targets: set[str] | None = None) -> LinkageContext:
        """Run the pipeline on the given context.

        ``targets`` limits the run to those transforms plus their dependencies.
        """
        start = time.perf_counter()

        skip_ids = self._adaptive_gate(ctx)

        if targets is None:
            targets = {s.id for s in self.registry.all()}
        ordered = [s for s in self.registry.resolve_order(targets) if s.id not in skip_ids]

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        for spec in ordered:
            self._run_one(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: LinkageContext, layer: Layer) -> LinkageContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec)
        return ctx

    def _run_one(self, ctx: LinkageContext, spec: TransformSpec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            if self.fail_fast:
                raise
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return
        ctx.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)

    def _adaptive_gate(self, ctx: LinkageContext) -> set[str]:
        """Determine which transforms to skip based on what the context carries.

        - No rectangles measured yet: skip geometry transforms
        """
        skip: set[str] = set()
        if not ctx.has_geometry:
            skip.update(s.id for s in self.registry.get_layer(Layer.GEOMETRY))
        return skip


def create_pipeline(fail_fast: bool = False) -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    load_transforms()
    return Pipeline(fail_fast=fail_fast)
