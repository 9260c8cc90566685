import logging
import sys

from enclavecodec.utils.logging import get_logger


def test_get_logger_single_stderr_handler():
    log = get_logger()
    assert get_logger() is log
    assert log.name == "enclavecodec"
    assert len(log.handlers) == 1
    handler = log.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is not sys.stdout


def test_child_loggers_share_the_package_handler():
    child = get_logger("x509")
    assert child.name == "enclavecodec.x509"
    assert child.handlers == []
    assert child.parent is get_logger()
