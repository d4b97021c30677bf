from pytest import fixture

from libsyndication.settings import LoadSettings


@fixture
def fx_settings():
    return LoadSettings()


@fixture
def fx_strict_settings():
    return LoadSettings(strict_versions=True)
