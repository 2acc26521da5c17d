"""Frame sequences: ordered sets of frame numbers and their compact spec notation.

    >>> from frameseq import Sequence
    >>> Sequence.create("1-10x2, 20").spec
    '1-9x2,20'
"""
from frameseq.lib import config

# The version string is updated by the build system.
__version__ = "0.1.0"

# Read the config and set up logging upon module import.
CONFIG = config.load_config()

from frameseq.lib.exceptions import (  # noqa: E402
    FrameSeqError,
    FrameSpecError,
    InvalidArgumentsError,
)
from frameseq.lib.sequence import Sequence  # noqa: E402

__all__ = [
    "CONFIG",
    "FrameSeqError",
    "FrameSpecError",
    "InvalidArgumentsError",
    "Sequence",
]
