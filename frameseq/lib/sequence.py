"""A Sequence is an ordered set of integers representing frames.

To create a sequence, use the create method and pass either:

nothing: an empty sequence.
range: one, two, or three numbers representing first, last, step.
frame spec: e.g. string  "1-10, 14, 20-50x4"
iterable of numbers: something that implements __iter__, e.g. a list.

Ranges are inclusive and first/last may be given in either order, e.g.
len(Sequence.create("3-1")) == 3. Non-integer numbers are truncated toward
zero. Frames are always sorted and unique.

A Sequence has methods to split itself into chunks, to combine with other
sequences, and to derive new sequences. Every such method returns a new
Sequence. Only the chunk size of a Sequence may change after creation.
"""
import itertools
import logging
import math
import numbers
import re

from frameseq.lib import progressions
from frameseq.lib.exceptions import FrameSpecError, InvalidArgumentsError

logger = logging.getLogger(__name__)

RX_DOLLAR_F = re.compile(r"\$(\d?)F")
RX_HASHES = re.compile(r"#+")

PROGRESSION_SPEC_REGEX = re.compile(
    r"(?P<first>-?[0-9]+)(-(?P<last>-?[0-9]+)(x(?P<step>[1-9][0-9]*))?)?"
)

SPLIT_SPEC_REGEX = re.compile(r"[\s,]+")


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _truncate(value, label="Frames"):
    """Truncate a number toward zero. Label names the value in errors."""
    if not _is_number(value):
        raise InvalidArgumentsError("%s must be numbers, got %r" % (label, value))
    try:
        return int(math.trunc(value))
    except (ValueError, OverflowError):
        raise InvalidArgumentsError("%s must be finite numbers, got %r" % (label, value))


def _canonical(iterable):
    """Sorted unique list of truncated frames."""
    return sorted(set(_truncate(frame) for frame in iterable))


def _range(first, last=None, step=None):
    """Inclusive range of frames from first to last.

    If last is missing the range is just first. First and last are
    swapped if necessary, so the range is never empty. Step is at least 1.
    """
    first = _truncate(first, "Range bounds")
    last = first if last is None else _truncate(last, "Range bounds")
    step = 1 if step is None else _truncate(step, "Steps")

    first, last = sorted([first, last])
    return list(range(first, last + 1, max(1, step)))


def _parse_spec(spec):
    """Expand a frame spec string to a sorted unique list of frames.

    Tokens are separated by any run of whitespace or commas, and each
    token must look like first<-last<xstep>>. An empty spec, or one with
    leading or trailing separators, has an empty token and is rejected.
    """
    if not isinstance(spec, str):
        raise InvalidArgumentsError("A frame spec must be a string, got %r" % (spec,))
    frames = []
    for token in SPLIT_SPEC_REGEX.split(spec):
        match = PROGRESSION_SPEC_REGEX.fullmatch(token)
        if not match:
            logger.debug("Rejected frame spec token %r in %r", token, spec)
            raise FrameSpecError(token)
        first, last, step = [
            None if value is None else int(value)
            for value in match.group("first", "last", "step")
        ]
        frames += _range(first, last, step)
    return _canonical(frames)


def _resolve_frames(*args):
    """Convert any supported argument shape to a sorted unique list of frames."""
    if not args:
        return []
    arg = args[0]
    if _is_number(arg):
        if len(args) > 3:
            raise InvalidArgumentsError(
                "A range takes at most first, last and step, got %d args" % len(args))
        return _range(*args)
    if len(args) > 1:
        raise InvalidArgumentsError(
            "Only ranges take more than one arg, got %r" % (args,))
    if isinstance(arg, str):
        return _parse_spec(arg)
    if isinstance(arg, Sequence):
        return list(arg)
    if hasattr(arg, "__iter__"):
        return _canonical(arg)
    logger.debug("Can't resolve frames from %r", arg)
    raise InvalidArgumentsError(
        "Arg must be a number, a frame spec, or an iterable of numbers. Got %r" % (arg,))


def _frames_of(other):
    """Frames of a Sequence, or canonical frames of some other iterable."""
    if isinstance(other, Sequence):
        return other._frames
    return _canonical(other)


def _spec(frames, range_sep="-", step_sep="x", block_sep=","):
    """Render frames in the most compact notation.

    Each progression becomes a block: a single frame, first-last, or
    first-lastxstep.
    """
    blocks = []
    for prog in progressions.create(frames):
        if len(prog) == 1:
            blocks.append("%d" % prog[0])
            continue
        gap = prog[1] - prog[0]
        if gap == 1:
            blocks.append("%d%s%d" % (prog[0], range_sep, prog[-1]))
        else:
            blocks.append("%d%s%d%s%d" % (prog[0], range_sep, prog[-1], step_sep, gap))
    return block_sep.join(blocks)


class Sequence(object):
    """A collection of frames with the ability to generate chunks."""

    def __init__(self, iterable=(), chunk_size=1):
        """Instantiate from an iterable of numbers.

        The frames are truncated, sorted, and deduplicated. Chunk size
        defaults to 1 and is clamped to a minimum of 1. Strings and single
        numbers belong to Sequence.create().
        """
        if isinstance(iterable, (str, bytes)) or not hasattr(iterable, "__iter__"):
            raise InvalidArgumentsError(
                "Sequence() takes an iterable of numbers, got %r. Use Sequence.create() "
                "or Sequence.from_spec() for spec strings and ranges." % (iterable,))
        self._frames = tuple(_canonical(iterable))
        self._chunk_size = 1
        self.chunk_size = chunk_size

    @classmethod
    def create(cls, *args, **kw):
        """Factory which resolves any of the supported argument shapes.

        Sequence.create()                  # empty
        Sequence.create(1, 10, 2)          # 1-9x2
        Sequence.create("1-10x2, 20-30x5") # 1-9x2,20-30x5
        Sequence.create([1, 2, 3, 4, 5])   # 1-5

        Raises FrameSpecError for a bad spec string and
        InvalidArgumentsError for any other unsupported argument.
        """
        return cls(_resolve_frames(*args), **kw)

    @classmethod
    def empty(cls, **kw):
        return cls((), **kw)

    @classmethod
    def from_range(cls, first, last=None, step=None, **kw):
        return cls(_range(first, last, step), **kw)

    @classmethod
    def from_spec(cls, spec, **kw):
        return cls(_parse_spec(spec), **kw)

    @classmethod
    def from_list(cls, iterable, **kw):
        return cls(iterable, **kw)

    @staticmethod
    def permutations(template, **kw):
        """Generate strings for every combination of the given frame specs.

        Keywords map names in a %-style template to frame specs, e.g.
        permutations("image_%(u)02d.%(frame)04d.tif", u="1-2", frame="10-11")
        """
        for vals in itertools.product(
            *(iter(Sequence.create(spec)) for spec in kw.values())
        ):
            subs = dict(zip(kw, vals))
            yield template % subs

    @property
    def frames(self):
        """A list of the frames, sorted and unique."""
        return list(self._frames)

    @property
    def first(self):
        """The first frame, or None if the sequence is empty."""
        return self._frames[0] if self._frames else None

    @property
    def last(self):
        """The last frame, or None if the sequence is empty."""
        return self._frames[-1] if self._frames else None

    @property
    def length(self):
        return len(self._frames)

    @property
    def spec(self):
        """A compact representation of the sequence, e.g. "1-9x2,20"."""
        return _spec(self._frames)

    @property
    def step(self):
        """The step if the sequence is a progression, otherwise None.

        Sequences with fewer than 2 frames have a step of 1.
        """
        return progressions.step(self._frames)

    def is_progression(self, arr=None):
        """Is this sequence, or the given list, an arithmetic progression."""
        if arr is None:
            arr = self._frames
        return progressions.is_progression(list(arr))

    @property
    def chunk_size(self):
        """Return chunk size."""
        return self._chunk_size

    @chunk_size.setter
    def chunk_size(self, value):
        """Set the maximum number of frames per chunk. Min is 1."""
        self._chunk_size = max(1, _truncate(value, "Chunk sizes"))

    def progressions(self):
        """Split into Sequences that are each arithmetic progressions.

        Sequence.create([1, 2, 3, 10, 13, 16]).progressions()
        # [Sequence.create('1-3'), Sequence.create('10-16x3')]
        """
        return [Sequence(prog) for prog in progressions.create(self._frames)]

    def chunks(self, enforce_progressions=True):
        """Return list of chunks according to chunk size.

        We walk along the frames and close the current chunk when it
        holds chunk_size frames or we reach the last frame. If
        enforce_progressions is True, we also close it when the next frame
        would stop it from being a progression, so chunks may be smaller
        than chunk_size.
        """
        result = []
        chunk = []
        frames = self._frames
        last_index = len(frames) - 1
        for i, frame in enumerate(frames):
            chunk.append(frame)
            if (
                len(chunk) == self._chunk_size
                or i == last_index
                or (
                    enforce_progressions
                    and not progressions.is_progression(chunk + [frames[i + 1]])
                )
            ):
                result.append(Sequence(chunk))
                chunk = []
        logger.debug(
            "Split %d frames into %d chunks (chunk_size=%d, enforce_progressions=%s)",
            len(frames), len(result), self._chunk_size, enforce_progressions)
        return result

    def chunk_count(self, enforce_progressions=True):
        """The number of chunks that chunks() will emit."""
        if not enforce_progressions:
            return int(math.ceil(len(self._frames) / float(self._chunk_size)))
        return len(self.chunks(enforce_progressions))

    def best_chunk_size(self):
        """Determine the chunk size that spreads frames evenly over the chunks.

        For example, if chunk size is 70 and there are 100 frames, 2
        chunks will be generated with 70 and 30 frames. It would be
        better to have 50 frames per chunk and this method returns that
        number. It doesn't account for chunks that end early to enforce
        progressions.
        """
        num = len(self._frames)
        if not num:
            return 1
        count = int(math.ceil(num / float(self._chunk_size)))
        return int(math.ceil(num / float(count)))

    def intersecting_chunks(self, other):
        """Chunks of this sequence that share at least one frame with other.

        s = Sequence.create("1-12", chunk_size=3)
        s.intersecting_chunks(Sequence.create([1, 10]))
        # [Sequence.create('1-3'), Sequence.create('10-12')]
        """
        if not isinstance(other, Sequence):
            other = Sequence(other)
        return [chunk for chunk in self.chunks() if chunk.intersects(other)]

    def intersects(self, other):
        """Test if the sequence shares any frames with another sequence."""
        other_frames = _frames_of(other)
        if not self._frames or not other_frames:
            return False
        if self._frames[0] > other_frames[-1] or self._frames[-1] < other_frames[0]:
            return False
        other_set = set(other_frames)
        return any(frame in other_set for frame in self._frames)

    def intersection(self, other):
        """A new Sequence with the frames found in both sequences."""
        other_set = set(_frames_of(other))
        return Sequence([frame for frame in self._frames if frame in other_set])

    def union(self, other):
        """A new Sequence with the frames found in either sequence."""
        return Sequence(list(self._frames) + list(_frames_of(other)))

    def difference(self, other):
        """A new Sequence with the frames of this sequence that are not in other."""
        other_set = set(_frames_of(other))
        return Sequence([frame for frame in self._frames if frame not in other_set])

    def offset(self, value):
        """Generate a new Sequence with all frames offset by value.

        The new Sequence has the same chunk size.
        """
        return Sequence(
            [frame + value for frame in self._frames], chunk_size=self._chunk_size
        )

    def scale(self, value):
        """Generate a new Sequence with all frames multiplied by value.

        Results are truncated toward zero, so frames may merge. The new
        Sequence has the same chunk size.
        """
        return Sequence(
            [math.trunc(frame * value) for frame in self._frames],
            chunk_size=self._chunk_size,
        )

    def fill(self, step=1):
        """Generate a new Sequence from first to last with the given step.

        Sequence.create([1, 2, 10, 11]).fill() # 1-11

        An empty sequence fills to an empty sequence. The new Sequence has
        the same chunk size.
        """
        if not self._frames:
            return Sequence(chunk_size=self._chunk_size)
        return Sequence(
            _range(self.first, self.last, step), chunk_size=self._chunk_size
        )

    def subsample(self, count):
        """Take a selection of frames from the sequence.

        Return value is a new sequence where the frames are plucked in the
        most distributed way. Each frame is taken from the middle of its
        share of the sequence, so Sequence.create("1-10").subsample(3) is
        2,6,9.
        """
        num = len(self._frames)
        if not num:
            return Sequence()
        count = min(max(1, _truncate(count, "Subsample counts")), num)

        res = []
        gap = num / float(count)
        pos = gap / 2.0

        for _ in range(count):
            res.append(self._frames[int(pos)])
            pos += gap

        return Sequence(res)

    def expand(self, template):
        """Expand a hash template with this sequence.

        Example /some/directory_###/image.#####.exr. The template is invalid
        if it contains no hashes. First we replace the hashes with a
        format placeholder that specifies the padding as a number. Then we
        use format to replace the placeholders with frames.
        """
        if not RX_HASHES.search(template):
            raise ValueError("Template must contain hashes.")

        format_template = RX_HASHES.sub(
            lambda match: "{{0:0{:d}d}}".format(len(match.group(0))), template
        )

        return [format_template.format(frame) for frame in self._frames]

    def expand_format(self, *templates):
        """Expand templates containing {frame} format fields.

        Templates are cycled, so give either one template, or one per frame.
        """
        result = []
        for frame, template in zip(self._frames, itertools.cycle(templates)):
            result.append(template.format(frame=frame))
        return result

    def expand_dollar_f(self, *templates):
        """Expand $ templates such as those containing $3F or $F.

        If a single template is given, such as image.$2F.exr, and the sequence
        contains [1,2,4] then the result will be:
        ["image.01.exr", "image.02.exr", "image.04.exr"]

        If there are 3 templates, such as a_1/image.$2F.exr, a_2/image.$2F.exr,
        and a_4/image.$2F.exr then each frame is paired with its own template.
        There are always len(sequence) elements in the result. If the number
        of templates is something else, we cycle or clip.
        """
        def _placeholder(match):
            padding = int(match.group(1) or 0)
            return "{{frame:0{:d}d}}".format(padding) if padding else "{frame}"

        result = []
        for frame, template in zip(self._frames, itertools.cycle(templates)):
            format_template = RX_DOLLAR_F.sub(_placeholder, template)
            result.append(format_template.format(frame=frame))
        return result

    def to(self, range_sep, step_sep, block_sep):
        """The spec with custom separators, e.g. to(":", "%", ";") -> "1:10;14;20:48%4"."""
        return _spec(self._frames, range_sep, step_sep, block_sep)

    def __iter__(self):
        return iter(self._frames)

    def __len__(self):
        return len(self._frames)

    def __contains__(self, frame):
        return frame in self._frames

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._frames == other._frames

    def __hash__(self):
        return hash(self._frames)

    def __str__(self):
        """String representation is the spec."""
        return self.spec

    def __repr__(self):
        """Repr contains whats necessary to recreate."""
        if not self._frames:
            return "Sequence.create()"
        return "Sequence.create(%r)" % (self.spec,)
