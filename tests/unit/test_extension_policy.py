from types import SimpleNamespace

from proxy_lib.introspection import ReflectionIntrospector
from proxy_lib.policy import ExtensionPolicy
from tests.helpers import (
    ClassWithAllowDynamicProperties,
    ClassWithMagicMethods,
    FrozenPoint,
    SimpleClass,
)


class CountingIntrospector(ReflectionIntrospector):
    def __init__(self):
        self.calls = 0

    def is_canonical_any_type(self, record_type):
        self.calls += 1
        return super().is_canonical_any_type(record_type)


def test_explain_reports_each_signal():
    policy = ExtensionPolicy(ReflectionIntrospector())
    assert policy.explain(SimpleNamespace) == {
        'canonical_any_type': True,
        'marked_dynamic': False,
        'catch_all_write': False,
    }
    assert policy.explain(ClassWithAllowDynamicProperties)['marked_dynamic'] is True
    assert policy.explain(ClassWithMagicMethods)['catch_all_write'] is True


def test_allows_dynamic_keys():
    policy = ExtensionPolicy(ReflectionIntrospector())
    assert policy.allows_dynamic_keys(SimpleNamespace) is True
    assert policy.allows_dynamic_keys(ClassWithAllowDynamicProperties) is True
    assert policy.allows_dynamic_keys(ClassWithMagicMethods) is True
    assert policy.allows_dynamic_keys(SimpleClass) is False
    assert policy.allows_dynamic_keys(FrozenPoint) is False


def test_answer_is_cached_per_type():
    intro = CountingIntrospector()
    policy = ExtensionPolicy(intro)
    for _ in range(3):
        assert policy.allows_dynamic_keys(SimpleClass) is False
    assert intro.calls == 1
    policy.allows_dynamic_keys(SimpleNamespace)
    assert intro.calls == 2
