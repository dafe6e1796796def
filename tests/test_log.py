import logging

from links_folder.log import LevelColorFormatter, setup_logging


def make_record(level, msg):
    return logging.LogRecord("links_folder.test", level, __file__, 1, msg, None, None)


def test_formatter_tags_level():
    formatter = LevelColorFormatter()
    assert "WARN" in formatter.format(make_record(logging.WARNING, "careful"))
    line = formatter.format(make_record(logging.ERROR, "broke"))
    assert "ERRR" in line
    assert line.endswith("broke")


def test_setup_logging_installs_one_handler():
    logger = logging.getLogger("links_folder")
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    handlers = [h for h in logger.handlers if isinstance(h.formatter, LevelColorFormatter)]
    assert len(handlers) == 1
    assert logger.level == logging.INFO
    logger.setLevel(logging.NOTSET)
