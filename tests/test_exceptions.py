import unittest

import frameseq
from frameseq.lib import exceptions


class ExceptionsTest(unittest.TestCase):

    def test_frame_spec_error_hierarchy(self):
        err = exceptions.FrameSpecError("1-x")
        self.assertIsInstance(err, exceptions.FrameSeqError)
        self.assertIsInstance(err, ValueError)

    def test_frame_spec_error_without_token(self):
        err = exceptions.FrameSpecError()
        self.assertIsNone(err.token)
        self.assertEqual(str(err), exceptions.FrameSpecError.message)

    def test_frame_spec_error_with_token(self):
        err = exceptions.FrameSpecError("1-x")
        self.assertEqual(err.token, "1-x")
        self.assertIn("'1-x'", str(err))

    def test_invalid_arguments_error_hierarchy(self):
        err = exceptions.InvalidArgumentsError("nope")
        self.assertIsInstance(err, exceptions.FrameSeqError)
        self.assertIsInstance(err, TypeError)

    def test_config_error_hierarchy(self):
        self.assertTrue(issubclass(exceptions.ConfigError, ValueError))

    def test_package_exports(self):
        self.assertIs(frameseq.FrameSpecError, exceptions.FrameSpecError)
        self.assertIs(frameseq.InvalidArgumentsError, exceptions.InvalidArgumentsError)
        self.assertEqual(frameseq.Sequence.create("1-3").spec, "1-3")


if __name__ == '__main__':
    unittest.main()
