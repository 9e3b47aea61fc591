from __future__ import annotations

import logging

import pytest

from repobot.conf import settings
from repobot.dispatch.log import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolate_repobot_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests hermetic: default bot inputs, no Actions env, clean logger."""

    monkeypatch.setattr(settings, "TRIGGER_PHRASE", "@claude", raising=False)
    monkeypatch.setattr(settings, "PROMPT", "", raising=False)
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO", raising=False)
    monkeypatch.setattr(settings, "LOG_FILE", None, raising=False)

    for var in ("GITHUB_EVENT_NAME", "GITHUB_EVENT_PATH"):
        monkeypatch.delenv(var, raising=False)

    yield

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
