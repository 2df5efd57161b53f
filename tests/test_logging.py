import logging
import tempfile
import unittest
from pathlib import Path

from rich.logging import RichHandler

from dvsplit.logging import configure_logging

class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("dvsplit")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    def test_console_and_file_handlers(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = configure_logging("DEBUG", log_dir=Path(tmp))
            logger = logging.getLogger("dvsplit")
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertTrue(any(isinstance(h, RichHandler) for h in logger.handlers))
            logging.getLogger("dvsplit.segmentation.planner").info("planned")
            for handler in logger.handlers:
                handler.flush()
            self.assertIn("planned", log_file.read_text())
            self.tearDown()

    def test_repeated_calls_do_not_duplicate_handlers(self):
        configure_logging("INFO", file_logging=False)
        configure_logging("WARNING", file_logging=False)
        logger = logging.getLogger("dvsplit")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

if __name__ == "__main__":
    unittest.main()
