'''
exceptions module

This module handles all custom exceptions for the frameseq library.
All exceptions inherit off of FrameSeqError and a matching builtin, so
callers may catch either.
'''


class FrameSeqError(Exception):
    '''
    Base class for frameseq errors
    '''


class FrameSpecError(FrameSeqError, ValueError):
    '''
    A token in a frame spec string is malformed, e.g. "1-10xf" or "1-2x0".

    The offending token is kept on the exception so that UIs can highlight it.
    '''
    message = "Please provide a valid set of frames. Example: 1, 2-5, 10-20x2"

    def __init__(self, token=None):
        self.token = token
        message = self.message
        if token is not None:
            message = "%s (got %r)" % (message, token)
        super(FrameSpecError, self).__init__(message)


class InvalidArgumentsError(FrameSeqError, TypeError):
    '''
    Arguments given to the Sequence factory don't match any supported shape
    '''


class ConfigError(FrameSeqError, ValueError):
    '''
    Something wrong with a config file or a config value
    '''
