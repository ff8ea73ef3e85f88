"""Tests for the pipeline orchestrator."""

import pytest

from recipeflow.engine.context import LinkageContext, Rect
from recipeflow.engine.pipeline import Pipeline, create_pipeline
from recipeflow.engine.registry import Layer, TransformRegistry, TransformSpec
from tests.conftest import COOKIES


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: LinkageContext) -> None:
        results.append("t1")

    def t2(ctx: LinkageContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=t1))
    reg.register(
        TransformSpec(id="T0.02", layer=Layer.NORMALIZATION, fn=t2, dependencies=["T0.01"])
    )

    pipeline = Pipeline(registry=reg)
    ctx = LinkageContext()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: LinkageContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = LinkageContext()
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]


def test_pipeline_fail_fast_reraises():
    reg = TransformRegistry()

    def fail(ctx: LinkageContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=fail))

    with pytest.raises(ValueError, match="test error"):
        Pipeline(registry=reg, fail_fast=True).run(LinkageContext())


def test_geometry_gated_without_rects():
    ctx = LinkageContext(
        ingredients=list(COOKIES.ingredients),
        instructions=list(COOKIES.instructions),
    )
    create_pipeline().run(ctx)

    assert "T2.01" in ctx.completed_transforms
    assert "T3.01" not in ctx.completed_transforms
    assert ctx.links
    assert ctx.shapes == []


def test_geometry_runs_with_rects():
    ctx = LinkageContext(
        ingredients=list(COOKIES.ingredients),
        instructions=list(COOKIES.instructions),
        ingredient_rects={0: Rect(0, 0, 100, 20)},
        instruction_rects={1: Rect(200, 0, 300, 40)},
    )
    create_pipeline().run(ctx)

    assert "T3.01" in ctx.completed_transforms
    assert not ctx.errors
    # Only the flour -> step 2 link has both rows measured
    assert [(s.link.ingredient_index, s.link.instruction_index) for s in ctx.shapes] == [(0, 1)]


def test_run_layer_only_touches_that_layer():
    ctx = LinkageContext(
        ingredients=list(COOKIES.ingredients),
        instructions=list(COOKIES.instructions),
    )
    create_pipeline().run_layer(ctx, Layer.NORMALIZATION)

    assert ctx.completed_transforms == {"T0.01"}
    assert ctx.scores is None
