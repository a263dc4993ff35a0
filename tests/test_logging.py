from __future__ import annotations

import logging

from passforge.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("passforge.cli").name == "passforge.cli"
    assert get_logger("passforge").name == "passforge"
    assert get_logger("plugin").name == "passforge.plugin"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(verbose=True)
    root = configure_logging(verbose=True)
    ours = [h for h in root.handlers if getattr(h, "_passforge", False)]
    assert len(ours) == 1
    assert root.level == logging.DEBUG
    configure_logging(verbose=False)
    assert logging.getLogger(ROOT_LOGGER).level == logging.WARNING


def test_secrets_never_logged(caplog) -> None:
    from passforge.generate import SeededSource, random_password

    root = logging.getLogger(ROOT_LOGGER)
    root.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
            from passforge.generate import RandomRequest, generate

            password = generate(RandomRequest(30, True, True), SeededSource("top-secret"))
        assert caplog.records
        assert all(password not in r.getMessage() for r in caplog.records)
        assert all("top-secret" not in r.getMessage() for r in caplog.records)
        assert password == random_password(30, True, True, source=SeededSource("top-secret"))
    finally:
        root.propagate = False
