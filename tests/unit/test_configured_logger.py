import logging

from studio.confpatch.configured_logger import LOGGER_NAME, new_logger


def test_new_logger_does_not_stack_handlers():
    new_logger()
    log = new_logger(level=logging.DEBUG)
    assert len(log.handlers) == 1
    assert log.level == logging.DEBUG
    assert log.propagate is False


def test_module_loggers_reach_the_tool_logger(capsys):
    new_logger(level=logging.DEBUG)
    logging.getLogger(LOGGER_NAME + '.patch').debug('reading %s', 'x.json')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'DEBUG: reading x.json' in captured.err


def test_new_logger_to_file(tmpdir):
    outfile = str(tmpdir.join('tool.log'))
    log = new_logger(name='confpatch_file_test', outfile=outfile)
    log.info('hello')
    log.handlers[0].flush()
    with open(outfile) as f:
        assert 'INFO: hello' in f.read()
