import logging
import os

from datetime import datetime

from fieldvisit import log


def test_get_logfile(tmpdir):
    fn = log.get_logfile(str(tmpdir), now=datetime(2017, 3, 15, 10, 30, 0))
    assert fn == os.path.join(str(tmpdir), "20170315", "fieldvisit_20170315T103000.log")


def test_setuplog_stdout_only():
    logger = log.setuplog(name="tests", log_level=30)
    assert logger.level == 30
    assert len(logger.handlers) == 1


def test_setuplog_replaces_handlers(tmpdir):
    path = os.path.join(str(tmpdir), "sub", "test.log")
    log.setuplog(name="tests", path=path)
    logger = log.setuplog(name="tests", path=path)
    assert len(logger.handlers) == 2
    assert os.path.isdir(os.path.join(str(tmpdir), "sub"))


def test_setuplog_overwrite(tmpdir):
    path = os.path.join(str(tmpdir), "test.log")
    with open(path, "w") as f:
        f.write("old content\n")
    logger = log.setuplog(name="tests", path=path, append=False)
    for h in logger.handlers:
        h.flush()
    with open(path, "r") as f:
        assert "old content" not in f.read()


def test_start_logger(logger, tmpdir):
    assert logger.level == logging.DEBUG
    logger.warning("measurement grade not recognized")
    for h in logger.handlers:
        h.flush()
    logfile = logger.handlers[1].baseFilename
    with open(logfile, "r") as f:
        content = f.read()
    assert "measurement grade not recognized" in content
    assert "starting..." in content


def test_start_logger_quiet(tmpdir):
    logger = log.start_logger(False, True, log_path=str(tmpdir))
    assert logger.level == logging.WARNING


def test_get_logger():
    assert log.get_logger().name == "fieldvisit"
    assert log.get_logger("fieldvisit").name == "fieldvisit"
    assert log.get_logger("fieldvisit.models.grade").name == "fieldvisit.models.grade"
    assert log.get_logger("tests").name == "fieldvisit.tests"


def test_setuplog_sub_logger(tmpdir):
    logger = log.setuplog(name="tests", log_level=30)
    assert logger.name == "fieldvisit.tests"
    assert logger.level == 30
