import transkit
from transkit.version import FALLBACK_VERSION, __version__, installed_version


def test_version_is_exposed():
    assert isinstance(__version__, str)
    assert transkit.__version__ == __version__


def test_missing_distribution_uses_fallback():
    assert installed_version("transkit-not-installed") == FALLBACK_VERSION
