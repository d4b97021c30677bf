import mock
from pytest import fixture, mark, raises

from libsyndication.format import AdapterKey, Fingerprint, FormatKind, Version
from libsyndication.parser.base import ParserVariant
from libsyndication.parser.rss import RSS20
from libsyndication.registry import (REGISTRY, AdapterRegistry, resolve,
                                     supported_versions)


MATRIX = {
    FormatKind.APML: [Version(0, 6)],
    FormatKind.ATOM: [Version(0, 3), Version(1, 0)],
    FormatKind.BLOGML: [Version(2, 0)],
    FormatKind.OPML: [Version(1, 0), Version(1, 1), Version(2, 0)],
    FormatKind.RSD: [Version(0, 6), Version(1, 0)],
    FormatKind.RSS: [Version(0, 9), Version(0, 91), Version(0, 92),
                     Version(1, 0), Version(2, 0)],
}


@fixture
def fx_variants():
    return [
        ParserVariant(FormatKind.RSS, Version(2, 0), feed=mock.Mock()),
        ParserVariant(FormatKind.RSS, Version(0, 92), feed=mock.Mock()),
    ]


def test_registry_covers_matrix():
    assert len(REGISTRY) == sum(len(versions) for versions in MATRIX.values())
    for format, versions in MATRIX.items():
        assert supported_versions(format) == frozenset(versions)
        for version in versions:
            variant = resolve(AdapterKey(format, version))
            assert variant.format is format
            assert variant.version == version
    assert REGISTRY.formats == frozenset(MATRIX)
    assert supported_versions(FormatKind.UNKNOWN) == frozenset()


@mark.parametrize('key', [
    AdapterKey(FormatKind.RSS, Version(0, 5)),
    AdapterKey(FormatKind.RSS, Version(2, 0, 1)),
    AdapterKey(FormatKind.RSS, Version(0, 90)),
    AdapterKey(FormatKind.ATOM, Version(0, 9)),
    AdapterKey(FormatKind.RSS, None),
    AdapterKey(FormatKind.UNKNOWN, None),
])
def test_resolve_exact_match_only(key):
    assert resolve(key) is None


def test_resolve_fingerprint():
    assert resolve(Fingerprint(FormatKind.RSS, Version(2, 0))) is RSS20
    assert resolve(None) is None


def test_registry_is_immutable():
    key = AdapterKey(FormatKind.RSS, Version(2, 0))
    with raises(TypeError):
        REGISTRY[key] = None
    with raises(TypeError):
        REGISTRY._variants[key] = None
    with raises(AttributeError):
        REGISTRY.something = None


def test_registry_mapping(fx_variants):
    registry = AdapterRegistry(fx_variants)
    assert len(registry) == 2
    assert AdapterKey(FormatKind.RSS, Version(2, 0)) in registry
    assert AdapterKey(FormatKind.RSS, Version(0, 91)) not in registry
    assert frozenset(registry) == frozenset(v.key for v in fx_variants)
    assert registry[fx_variants[0].key] is fx_variants[0]
    assert registry.resolve(fx_variants[1].key) is fx_variants[1]


def test_registry_duplicate(fx_variants):
    with raises(ValueError):
        AdapterRegistry(fx_variants + [
            ParserVariant(FormatKind.RSS, Version(2, 0), feed=mock.Mock())
        ])


def test_registry_type_error():
    with raises(TypeError):
        AdapterRegistry([object()])


def test_registry_repr():
    assert 'RSS 2.0' in repr(REGISTRY)
    assert 'APML 0.6' in repr(REGISTRY)
