import logging
import logging.handlers
import os
import shutil
import tempfile
import unittest

from frameseq.lib import loggeria


class BelowErrorFilterTest(unittest.TestCase):

    def make_record(self, level):
        return logging.LogRecord("frameseq", level, __file__, 1, "msg", None, None)

    def test_passes_below_error(self):
        log_filter = loggeria.BelowErrorFilter()
        for level in (logging.DEBUG, logging.INFO, logging.WARNING):
            self.assertTrue(log_filter.filter(self.make_record(level)))

    def test_blocks_error_and_above(self):
        log_filter = loggeria.BelowErrorFilter()
        for level in (logging.ERROR, logging.CRITICAL):
            self.assertFalse(log_filter.filter(self.make_record(level)))


class SetupLoggingTest(unittest.TestCase):

    def setUp(self):
        self.logger = loggeria.get_frameseq_logger()
        self.old_level = self.logger.level
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        loggeria.setup_frameseq_logging(logging.getLevelName(self.old_level))
        shutil.rmtree(self.tmpdir)

    def owned_handlers(self):
        return [h for h in self.logger.handlers if getattr(h, loggeria._OWNED, False)]

    def test_logger_name(self):
        self.assertEqual(self.logger.name, "frameseq")

    def test_level_map(self):
        self.assertEqual(loggeria.LEVEL_MAP["DEBUG"], logging.DEBUG)
        self.assertEqual(loggeria.LEVEL_MAP["NOTSET"], logging.NOTSET)

    def test_console_handlers_split_by_level(self):
        loggeria.setup_frameseq_logging()
        handlers = self.owned_handlers()
        self.assertEqual(len(handlers), 2)
        levels = sorted(h.level for h in handlers)
        self.assertEqual(levels, [logging.NOTSET, logging.ERROR])

    def test_setup_replaces_handlers(self):
        loggeria.setup_frameseq_logging()
        loggeria.setup_frameseq_logging()
        self.assertEqual(len(self.owned_handlers()), 2)

    def test_setup_sets_level(self):
        loggeria.setup_frameseq_logging("DEBUG")
        self.assertEqual(self.logger.level, logging.DEBUG)

    def test_file_handler(self):
        path = os.path.join(self.tmpdir, "logs", "frameseq.log")
        loggeria.setup_frameseq_logging(log_filepath=path)
        self.assertTrue(os.path.isdir(os.path.dirname(path)))
        file_handlers = [
            h for h in self.owned_handlers()
            if isinstance(h, logging.handlers.TimedRotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)

    def test_set_log_level(self):
        loggeria.set_frameseq_log_level("ERROR")
        self.assertEqual(self.logger.level, logging.ERROR)


if __name__ == '__main__':
    unittest.main()
