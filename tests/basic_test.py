import builtins
import importlib
import importlib.metadata as metadata
import io
import logging

import quantparse


def test_version_is_a_string():
    assert isinstance(quantparse.__version__, str)
    assert quantparse.__version__


def test_version_fallback_reads_pyproject(monkeypatch):
    # Pretend the distribution is not installed
    monkeypatch.setattr(metadata, "version", lambda _: (_ for _ in ()).throw(metadata.PackageNotFoundError))

    fake_toml = b"[project]\nname = 'quantparse'\nversion = '9.8.7'\n"
    monkeypatch.setattr(builtins, "open", lambda *_: io.BytesIO(fake_toml))

    # Reload the module so the fallback branch executes
    importlib.reload(quantparse)

    assert quantparse.__version__ == "9.8.7"


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("quantparse").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
