import logging
from io import StringIO
from unittest import mock

from . import *

from shellopts import log


class TestColoredStreamHandler(TestCase):
    def setUp(self):
        self.handler = log.ColoredStreamHandler()
        fmt = '%(coloredlevel)s: %(message)s'
        self.handler.setFormatter(logging.Formatter(fmt))

    def test_info(self):
        record = logging.LogRecord(
            'name', log.INFO, 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1;34minfo\033[0m: message')

    def test_error(self):
        record = logging.LogRecord(
            'name', log.ERROR, 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1;31merror\033[0m: message')

    def test_unknown_level(self):
        record = logging.LogRecord(
            'name', 'unknown', 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1mlevel unknown\033[0m: message')


class TestLogger(TestCase):
    def setUp(self):
        self.out = StringIO()
        self.logger = logging.getLogger('shellopts.test.{}'.format(id(self)))
        self.logger.propagate = False
        self.handler = log._init_logging(self.logger, 'shellopts', False,
                                         self.out)

    def test_error(self):
        self.logger.error('set: foo: invalid option name')
        self.assertEqual(self.out.getvalue(), (
            'shellopts: \033[1;31merror\033[0m: set: foo: invalid option name\n'
        ))

    def test_debug_hidden(self):
        self.logger.debug('registered option')
        self.assertEqual(self.out.getvalue(), '')

    def test_debug(self):
        logger = logging.getLogger('shellopts.test.debug.{}'.format(id(self)))
        logger.propagate = False
        log._init_logging(logger, 'prog', True, self.out)
        logger.debug('registered option')
        self.assertEqual(self.out.getvalue(), (
            'prog: \033[1;35mdebug\033[0m: registered option ' +
            '\033[90m({})\033[0m\n'.format(logger.name)
        ))


class TestInit(TestCase):
    def setUp(self):
        self.logger = logging.getLogger('shellopts')

    def test_colors(self):
        with mock.patch.object(self.logger, 'addHandler'), \
             mock.patch.object(self.logger, 'setLevel'):  # noqa
            with mock.patch('colorama.init') as colorama:
                log.init(environ={})
                colorama.assert_called_once_with()

            with mock.patch('colorama.init') as colorama:
                log.init(color='always', environ={})
                colorama.assert_called_once_with(strip=False)

            with mock.patch('colorama.init') as colorama:
                log.init(color='never', environ={})
                colorama.assert_called_once_with(strip=True, convert=False)

    def test_clicolor(self):
        with mock.patch.object(self.logger, 'addHandler'), \
             mock.patch.object(self.logger, 'setLevel'):  # noqa
            with mock.patch('colorama.init') as colorama:
                log.init(environ={'CLICOLOR_FORCE': '1'})
                colorama.assert_called_once_with(strip=False)

            with mock.patch('colorama.init') as colorama:
                log.init(color='always', environ={'CLICOLOR': '0'})
                colorama.assert_called_once_with(strip=True, convert=False)

            with mock.patch('colorama.init') as colorama:
                log.init(color='never', environ={'CLICOLOR': '1'})
                colorama.assert_called_once_with()

    def test_debug(self):
        with mock.patch.object(self.logger, 'addHandler'), \
             mock.patch('colorama.init'):  # noqa
            with mock.patch.object(self.logger, 'setLevel') as setLevel:
                log.init(environ={})
                setLevel.assert_called_once_with(log.INFO)

            with mock.patch.object(self.logger, 'setLevel') as setLevel:
                log.init(debug=True, environ={})
                setLevel.assert_called_once_with(log.DEBUG)

    def test_handler(self):
        with mock.patch('colorama.init'), \
             mock.patch.object(self.logger, 'setLevel'), \
             mock.patch.object(self.logger, 'addHandler') as addHandler:  # noqa
            handler = log.init(prog='sh', environ={})
        addHandler.assert_called_once_with(handler)
        self.assertIsInstance(handler, log.ColoredStreamHandler)
