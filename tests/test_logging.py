import logging
import os
import shutil
import tempfile
from pathlib import Path
from unittest import mock

from cosmsig import logging as cosmsig_logging
from cosmsig.logging import get_logger, Logger

from . import CosmsigTestCase


class _Widget(Logger):

    def __init__(self, name):
        self._name = name
        Logger.__init__(self)

    def diagnostic_name(self):
        return self._name


class TestLogging(CosmsigTestCase):

    def test_get_logger_strips_package_prefix(self):
        self.assertEqual("cosmsig.signature", get_logger("cosmsig.signature").name)
        self.assertEqual("cosmsig.signature", get_logger("signature").name)
        self.assertIs(cosmsig_logging.cosmsig_logger, get_logger("cosmsig"))

    def test_logger_mixin_names(self):
        w = _Widget("alice")
        self.assertEqual(f"cosmsig.{__name__}._Widget.[alice]", w.logger.name)
        self.assertTrue(self.logger.name.endswith("TestLogging"))

    def test_verbosity_filters(self):
        logger = get_logger("some_test_module")
        old_level = cosmsig_logging.cosmsig_logger.level
        try:
            cosmsig_logging._process_verbosity_log_levels("info,some_test_module=error")
            self.assertEqual(logging.INFO, cosmsig_logging.cosmsig_logger.level)
            self.assertEqual(logging.ERROR, logger.level)
            with self.assertRaises(Exception):
                cosmsig_logging._process_verbosity_log_levels("a=b=c")
        finally:
            cosmsig_logging.cosmsig_logger.setLevel(old_level)
            logger.setLevel(logging.NOTSET)

    def test_formatter_shortens_names(self):
        record = logging.LogRecord("cosmsig.signature", logging.INFO, __file__, 1, "hi", None, None)
        text = cosmsig_logging.console_formatter.format(record)
        self.assertEqual("I | signature | hi", text)
        self.assertEqual("cosmsig.signature", record.name)

    def test_rejection_is_logged(self):
        from cosmsig.signature import decode_signature
        from cosmsig.util import UnsupportedTypeError
        env = {"pub_key": {"type": "tendermint/PubKeyEd25519", "value": "AAAA"}, "signature": "AAAA"}
        with self.assertLogs("cosmsig.signature", level="INFO") as cm:
            with self.assertRaises(UnsupportedTypeError):
                decode_signature(env)
        self.assertIn("unsupported pubkey type", cm.output[0])


class TestConfigureLogging(CosmsigTestCase):

    def setUp(self):
        super().setUp()
        root = logging.getLogger()
        self._handlers_before = list(root.handlers)
        self._root_level = root.level
        self._cosmsig_level = cosmsig_logging.cosmsig_logger.level
        self.log_dir = Path(tempfile.mkdtemp())
        # configure_logging refuses to run twice per process; start each test from scratch
        for attr_name in ("_logfile_path", "console_stderr_handler"):
            patcher = mock.patch.object(cosmsig_logging, attr_name, None)
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self._handlers_before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(self._root_level)
        cosmsig_logging.cosmsig_logger.setLevel(self._cosmsig_level)
        get_logger("signature").setLevel(logging.NOTSET)
        shutil.rmtree(self.log_dir)
        super().tearDown()

    def test_file_logging(self):
        cosmsig_logging.configure_logging(log_directory=self.log_dir)
        logfile = cosmsig_logging.get_logfile_path()
        self.assertEqual(self.log_dir, logfile.parent)
        self.assertTrue(logfile.name.startswith("cosmsig_log_"))
        get_logger("cosmsig.pubkey").warning("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(logfile, encoding="utf-8") as f:
            content = f.read()
        self.assertIn("| pubkey | hello file", content)
        self.assertIn("cosmsig version", content)

    def test_old_logs_are_pruned(self):
        old_names = [f"cosmsig_log_20000101T0000{i:02d}Z_1.log" for i in range(12)]
        for name in old_names:
            (self.log_dir / name).touch()
        cosmsig_logging.configure_logging(log_directory=self.log_dir)
        remaining = set(os.listdir(self.log_dir))
        self.assertNotIn(old_names[0], remaining)
        self.assertNotIn(old_names[1], remaining)
        self.assertTrue(set(old_names[2:]) <= remaining)
        self.assertIn(cosmsig_logging.get_logfile_path().name, remaining)
        self.assertEqual(11, len(remaining))

    def test_verbosity_is_applied(self):
        cosmsig_logging.configure_logging(verbosity="debug,signature=error")
        self.assertIsNone(cosmsig_logging.get_logfile_path())
        self.assertEqual(logging.DEBUG, cosmsig_logging.cosmsig_logger.level)
        self.assertEqual(logging.ERROR, get_logger("signature").level)
        self.assertEqual(logging.DEBUG, cosmsig_logging.console_stderr_handler.level)

    def test_no_verbosity_means_warnings_only(self):
        cosmsig_logging.configure_logging()
        self.assertEqual(logging.WARNING, cosmsig_logging.console_stderr_handler.level)
        self.assertEqual(logging.WARNING, logging.getLogger().level)
