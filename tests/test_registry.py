import pytest

from filtervars import registry
from filtervars.registry import (
    Builder,
    Factory,
    Frequency,
    SimpleBuilder,
    Valuer,
    Variable,
    VariableError,
    get_value,
)


class MockVariable(Variable):
    cacheable = True

    def __init__(self, name="", result=None):
        self.name = name
        self.result = result
        self.calls = 0

    def value(self, ctx, data, cache):
        self.calls += 1
        return self.result


class UncachedVariable(MockVariable):
    cacheable = False


class FailingVariable(Variable):
    name = "failing"
    cacheable = True

    def value(self, ctx, data, cache):
        raise VariableError("broken")


class PrefixBuilder(Builder):
    name = "pre."

    def build(self, name):
        return MockVariable(name=name, result=name[len(self.name):])


class ProtocolVariable(Variable):
    name = "protocol"
    cacheable = False

    def value(self, ctx, data, cache):
        if isinstance(data, Frequency):
            return ("frequency", data.frequency_value(ctx, "k"))
        if isinstance(data, Valuer):
            return ("valuer", data.value(ctx, "k"))
        return ("none", None)


def test_register_none_raises():
    with pytest.raises(ValueError, match="cannot register a nil variable builder"):
        registry.register(None)


def test_register_empty_name_raises():
    with pytest.raises(ValueError, match="empty"):
        registry.register(SimpleBuilder(MockVariable()))


def test_register_and_get_default_registry():
    op = MockVariable(name="mock_registry_test")
    registry.register(SimpleBuilder(op))
    assert registry.get("mock_registry_test") is op


def test_duplicate_register_raises():
    factory = Factory()
    factory.register(SimpleBuilder(MockVariable(name="mock")))
    with pytest.raises(ValueError, match="mock variable builder already exists"):
        factory.register(SimpleBuilder(MockVariable(name="mock")))


def test_get_unknown_is_none():
    assert Factory().get("missing") is None


def test_prefix_builder_resolution():
    factory = Factory()
    factory.register(PrefixBuilder())
    variable = factory.get("pre.user.name")
    assert variable.name == "pre.user.name"
    assert variable.value(None, None, {}) == "user.name"


def test_prefix_not_matched_without_dot():
    factory = Factory()
    factory.register(PrefixBuilder())
    assert factory.get("pre") is None


def test_simple_builder_name_override():
    variable = MockVariable(name="inner")
    builder = SimpleBuilder(variable, name="outer")
    assert builder.name == "outer"
    assert builder.build("anything") is variable
    factory = Factory()
    factory.register(builder)
    assert factory.get("outer") is variable
    assert factory.get("inner") is None


def test_get_value_caches_cacheable():
    variable = MockVariable(name="cached", result=5)
    cache = {}
    assert get_value(None, variable, None, cache) == 5
    assert get_value(None, variable, None, cache) == 5
    assert variable.calls == 1
    assert cache == {"cached": 5}


def test_get_value_uses_existing_cache_entry():
    variable = MockVariable(name="cached", result=5)
    assert get_value(None, variable, None, {"cached": 7}) == 7
    assert variable.calls == 0


def test_get_value_skips_cache_for_uncacheable():
    variable = UncachedVariable(name="fresh", result=3)
    cache = {}
    get_value(None, variable, None, cache)
    get_value(None, variable, None, cache)
    assert variable.calls == 2
    assert cache == {}


def test_get_value_none_variable_raises():
    with pytest.raises(VariableError, match="empty variable"):
        get_value(None, None, None, {})


def test_get_value_error_propagates_and_not_cached():
    cache = {}
    with pytest.raises(VariableError, match="broken"):
        get_value(None, FailingVariable(), None, cache)
    assert cache == {}


def test_describe_lists_builders():
    factory = Factory()
    factory.register(PrefixBuilder())
    text = factory.describe()
    assert text.startswith("Variables: ")
    assert "pre. PrefixBuilder" in text


def test_print_registry_outputs_header(capsys):
    registry.register(SimpleBuilder(MockVariable(name="mock_print_test")))
    registry.print_registry()
    out = capsys.readouterr().out
    assert out.startswith("Variables: ")
    assert "mock_print_test SimpleBuilder" in out


def test_protocols_detect_data():
    class FreqData:
        def frequency_value(self, ctx, key):
            return 1

    class ValueData:
        def value(self, ctx, key):
            return 2

    variable = ProtocolVariable()
    assert get_value(None, variable, FreqData(), {}) == ("frequency", 1)
    assert get_value(None, variable, ValueData(), {}) == ("valuer", 2)
    assert get_value(None, variable, {}, {}) == ("none", None)