import logging

import pytest

from plotscript.app import flags


@pytest.fixture(autouse=True)
def _reset_flags_and_logging(monkeypatch):
    monkeypatch.delenv(flags.ENV_VAR, raising=False)
    flags.reload()
    yield
    flags.reload()
    pkg_logger = logging.getLogger("plotscript")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
