"""
URI path split into segments.

```python
>>> path = parse('/a/./b/../c/')
>>> path.segments
(PathSegment('a'), PathSegment('.'), PathSegment('b'), PathSegment('..'), PathSegment('c'))
>>> str(normalize(path))
'/a/c/'
>>> str(parse('/a') / 'b' / 'c')
'/a/b/c'
```

Parser is permissive: any string is parsed, nothing is decoded, percent-encoded
sequences are opaque text. Only `None` (or a non-text object) is rejected.
"""

from collections import namedtuple
from typing import (
    Optional, Union,
    Iterable, Tuple,
)
import yarl
from .errors import InvalidInputError


#: Path separator.
SEP = '/'

#: Dot-segments.
DOTS = ('.', '..')


class PathSegment(str):
    """Single path component between separators. Can be empty (from `//`)."""

    __slots__ = ()

    def __repr__(self):
        return 'PathSegment({})'.format(str.__repr__(self))

    @property
    def is_empty(self) -> bool:
        """True if segment is empty, e.g. between `//`."""
        return not self

    @property
    def is_dot(self) -> bool:
        """True for dot-segment: `.` (current) or `..` (parent)."""
        return self in DOTS


class ParsedPath(namedtuple('ParsedPath', 'segments is_absolute has_trailing_slash')):
    """
    Parsed URI path. Immutable value.

    - segments           - tuple of PathSegment
    - is_absolute        - path starts with "/"
    - has_trailing_slash - path ends with "/" (never for bare "/" or "")
    """

    __slots__ = ()

    def __new__(cls, segments: Iterable[str] = (), is_absolute: bool = False, has_trailing_slash: bool = False):
        segments = tuple(s if type(s) is PathSegment else PathSegment(s) for s in segments)
        return super().__new__(cls, segments, bool(is_absolute), bool(has_trailing_slash))

    def __str__(self):
        return to_string(self)

    def __truediv__(self, other):
        """
        Join two paths. If `other` is absolute, `self` is discarded.
        An empty `other` results in a path that ends with a separator.
        """
        other = _coerce(other)
        if other.is_absolute:
            return other
        if not other.segments:
            return ParsedPath(self.segments, self.is_absolute, bool(self.segments))
        return ParsedPath(self.segments + other.segments, self.is_absolute, other.has_trailing_slash)

    def __rtruediv__(self, other):
        """See: __truediv__()."""
        return _coerce(other) / self

    def joinpath(self, *other):
        """Calling this method is equivalent to combining the path with each of the other arguments in turn."""
        path = self
        for p in other:
            path = path / p
        return path

    @property
    def name(self) -> PathSegment:
        """The final path segment or empty segment if there is none."""
        if self.segments:
            return self.segments[-1]
        return PathSegment()

    @property
    def parent(self) -> 'ParsedPath':
        """The logical parent of the path (the last segment is removed)."""
        return ParsedPath(self.segments[:-1], self.is_absolute, False)

    @classmethod
    def from_url(cls, url: Union[str, yarl.URL]) -> 'ParsedPath':
        """
        Parse raw (still percent-encoded) path of the full URL.

        String URL is taken as already encoded, nothing is requoted.
        """
        if url is None or not isinstance(url, (str, yarl.URL)):
            raise InvalidInputError(url, 'url')
        if isinstance(url, str):
            url = yarl.URL(url, encoded=True)
        return parse(url.raw_path)


def _coerce(path: Union[ParsedPath, str, yarl.URL, None]) -> ParsedPath:
    """Parse path if necessary."""
    if isinstance(path, ParsedPath):
        return path
    return parse(path)


def _split(path: str) -> Tuple[Tuple[str, ...], bool, bool]:
    if not path:
        return (), False, False
    is_absolute = path.startswith(SEP)
    trailing = path.endswith(SEP) and path != SEP
    start = 1 if is_absolute else 0
    if len(path) == start:
        # bare "/"
        return (), is_absolute, trailing
    end = len(path) - 1 if trailing else len(path)
    return tuple(path[start:end].split(SEP)), is_absolute, trailing


def parse(path: Union[str, yarl.URL]) -> ParsedPath:
    """
    Parse URI path string.

    Leading "/" (absolute) and final "/" (trailing slash) are stored as flags,
    all other separators split segments. Empty segments are kept, see `normalize()`.
    `yarl.URL` is accepted, its raw path is parsed.

    Raises InvalidInputError if `path` is None.
    """
    if isinstance(path, yarl.URL):
        path = path.raw_path
    elif not isinstance(path, str):
        raise InvalidInputError(path, 'path')
    return ParsedPath(*_split(path))


def normalize(path: Union[ParsedPath, str]) -> ParsedPath:
    """
    Return new normalized path.

    Empty and "." segments are removed, ".." removes previous segment.
    Absolute path can not go above root, in relative path leading ".." are kept.
    If path ends with dot-segment or empty segment it ends with "/" after normalization.
    """
    if path is None:
        raise InvalidInputError(path, 'path')
    path = _coerce(path)
    segments = []
    for seg in path.segments:
        if seg == '..':
            if segments and segments[-1] != '..':
                segments.pop()
            elif not path.is_absolute:
                segments.append(seg)
        elif seg and seg != '.':
            segments.append(seg)
    last: Optional[str] = path.segments[-1] if path.segments else None
    trailing = bool(segments) and (path.has_trailing_slash or last == '' or last in DOTS)
    return ParsedPath(segments, path.is_absolute, trailing)


def to_string(path: ParsedPath) -> str:
    """Build path string. `to_string(parse(s)) == s` for every `s`."""
    if path is None:
        raise InvalidInputError(path, 'path')
    return ''.join((
        SEP if path.is_absolute else '',
        SEP.join(path.segments),
        SEP if path.has_trailing_slash else '',
    ))
