"""Tests for the type descriptor registry.

Critical Invariants:
- Last registration of a name wins
- Renamed functions override named functions of the same name
- Invalid input is rejected before the descriptor changes
- Undefined identities behave as empty descriptors
"""

import functools

import pytest

from morphic import InvalidCapability, MorphicSettings, TypeRegistry, capability
from morphic.core.descriptor import TypeDescriptor


class Shape:
    pass


def area():
    return 0


def perimeter():
    return 0


def test_define_registers_named_functions_under_their_names(registry):
    registry.define(Shape, [area, perimeter], [])

    descriptor = registry.get(Shape)

    assert descriptor.capabilities == {"area": area, "perimeter": perimeter}
    assert descriptor.capability_names == {"area", "perimeter"}


def test_define_tracks_property_names(registry):
    registry.define(Shape, [], ["width", "height", "width"])

    assert registry.get(Shape).tracked_properties == {"width", "height"}


def test_define_is_additive_across_calls(registry):
    registry.define(Shape, [area], ["width"])
    registry.define(Shape, [perimeter], ["height"])

    descriptor = registry.get(Shape)
    assert descriptor.capability_names == {"area", "perimeter"}
    assert descriptor.tracked_properties == {"width", "height"}


def test_overwrite_last_wins(registry):
    """CRITICAL: Registering a name twice keeps only the second callable."""

    def first():
        return 1

    def second():
        return 2

    registry.define(Shape, renamed_fns={"x": first})
    registry.define(Shape, renamed_fns={"x": second})

    assert registry.get(Shape).capabilities["x"] is second


def test_renamed_overrides_named_in_same_call(registry):
    """CRITICAL: renamed_fns are registered after named_fns."""

    def x():
        return "named"

    def replacement():
        return "renamed"

    registry.define(Shape, [x], [], {"x": replacement})

    assert registry.get(Shape).capabilities["x"] is replacement


def test_renamed_registers_under_explicit_key(registry):
    registry.define(Shape, renamed_fns={"size": area})

    assert registry.get(Shape).capabilities == {"size": area}


@pytest.mark.parametrize(
    "bad",
    [
        42,
        "area",
        lambda: None,
        functools.partial(area),
    ],
    ids=["int", "str", "lambda", "partial"],
)
def test_define_rejects_unnamed_or_non_callable(registry, bad):
    with pytest.raises(InvalidCapability) as excinfo:
        registry.define(Shape, [bad], [])

    assert excinfo.value.value is bad


def test_invalid_capability_is_a_type_error():
    assert issubclass(InvalidCapability, TypeError)


def test_rejected_registration_leaves_descriptor_untouched(registry):
    """CRITICAL: Validation happens before any mutation."""
    registry.define(Shape, [area], ["width"])

    with pytest.raises(InvalidCapability):
        registry.define(Shape, [perimeter, 42], ["height"])

    descriptor = registry.get(Shape)
    assert descriptor.capability_names == {"area"}
    assert descriptor.tracked_properties == {"width"}


def test_rejected_registration_does_not_create_descriptor(registry):
    with pytest.raises(InvalidCapability):
        registry.define(Shape, [lambda: None], [])

    assert Shape not in registry


def test_define_rejects_non_callable_renamed_value(registry):
    with pytest.raises(InvalidCapability, match="non-callable"):
        registry.define(Shape, renamed_fns={"area": 3})


def test_define_rejects_empty_renamed_key(registry):
    with pytest.raises(InvalidCapability, match="non-empty string"):
        registry.define(Shape, renamed_fns={"": area})


def test_define_rejects_non_string_property(registry):
    with pytest.raises(InvalidCapability, match="must be a string"):
        registry.define(Shape, [], [1])


def test_renamed_accepts_lambdas(registry):
    registry.define(Shape, renamed_fns={"area": lambda: 10})

    assert registry.get(Shape).capabilities["area"]() == 10


def test_get_undefined_identity_returns_empty_descriptor(registry):
    descriptor = registry.get("never-defined")

    assert descriptor == TypeDescriptor(identity="never-defined")
    assert descriptor.is_empty()
    assert descriptor.tracked_properties == frozenset()
    assert "never-defined" not in registry


def test_get_returns_snapshot(registry):
    """Later registrations do not leak into earlier snapshots."""
    registry.define(Shape, [area], [])
    before = registry.get(Shape)

    registry.define(Shape, [perimeter], [])

    assert before.capability_names == {"area"}
    assert registry.get(Shape).capability_names == {"area", "perimeter"}


def test_snapshot_capabilities_are_read_only(registry):
    registry.define(Shape, [area], [])

    with pytest.raises(TypeError):
        registry.get(Shape).capabilities["perimeter"] = perimeter  # type: ignore[index]


def test_any_hashable_works_as_identity(registry):
    registry.define("shape", [area], [])
    registry.define(("shape", 2), [perimeter], [])

    assert registry.get("shape").capability_names == {"area"}
    assert registry.get(("shape", 2)).capability_names == {"perimeter"}


def test_introspection(registry):
    registry.define(Shape, [area], [])
    registry.define("circle", [], ["radius"])

    assert len(registry) == 2
    assert list(registry.identities()) == [Shape, "circle"]
    assert registry.is_defined("circle")
    assert not registry.is_defined("square")


def test_clear_drops_descriptors_and_baselines(registry):
    registry.define(Shape, [area], [])
    registry.add_baseline(lambda obj: True, "anything")

    registry.clear()

    assert len(registry) == 0
    assert registry.get(Shape).is_empty()
    assert registry.baseline_resolvers == ()


def test_registry_uses_default_settings(registry):
    assert registry.settings == MorphicSettings()


def test_registries_are_independent():
    registry1 = TypeRegistry()
    registry2 = TypeRegistry()

    registry1.define(Shape, [area], [])

    assert Shape in registry1
    assert Shape not in registry2


def test_capability_decorator_uses_function_name(registry):
    @capability(Shape, registry=registry)
    def volume():
        return 0

    assert registry.get(Shape).capabilities["volume"] is volume


def test_capability_decorator_with_explicit_name(registry):
    @capability(Shape, name="size", registry=registry)
    def compute_size():
        return 0

    assert registry.get(Shape).capabilities == {"size": compute_size}


def test_capability_decorator_defaults_to_module_registry(default_registry):
    @capability(Shape)
    def volume():
        return 0

    assert default_registry.get(Shape).capabilities["volume"] is volume


def test_define_rejects_bare_string_property_list(registry):
    with pytest.raises(InvalidCapability, match="not a string"):
        registry.define(Shape, [], "width")
