"""Tests for the transform registry."""

import pytest

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry


def _noop(ctx: LinkageContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=_noop))
    reg.register(TransformSpec(id="T1.01", layer=Layer.SCORING, fn=_noop))
    layer0 = reg.get_layer(Layer.NORMALIZATION)
    assert len(layer0) == 1
    assert layer0[0].id == "T0.01"


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.NORMALIZATION, fn=_noop))
    reg.register(
        TransformSpec(id="T1.03", layer=Layer.SCORING, fn=_noop, dependencies=["T0.01"])
    )
    reg.register(TransformSpec(id="T1.04", layer=Layer.SCORING, fn=_noop))
    order = reg.resolve_order({"T1.03"})
    ids = [s.id for s in order]
    assert ids == ["T0.01", "T1.03"]


def test_resolve_order_detects_cycles():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="A", layer=Layer.SCORING, fn=_noop, dependencies=["B"]))
    reg.register(TransformSpec(id="B", layer=Layer.SCORING, fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order(None)


def test_global_registry_has_all_rules():
    ids = {s.id for s in get_registry().all()}
    assert {"T0.01", "T1.01", "T1.02", "T1.03", "T1.04", "T2.01", "T3.01"} <= ids
