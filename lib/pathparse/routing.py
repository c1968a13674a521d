"""
Route patterns with named parameters.

```python
>>> parser = PathParser.create('/users/:userid/blog-posts')
>>> result = parser.parse('/users/joao/blog-posts')
>>> result.parameter_value('userid')
ParameterValue(name='userid', value='joao', starts_at=7, ends_at=11)
>>> parser.parse('/users/joao') is None
True
```

Pattern must start with "/". Named parameter is ":" followed by letters and/or digits
and ends on "/", on next parameter or on the pattern end. Percent-encoded sequences
(`%XX`) are allowed, characters reserved by URI (`?#[]@!{}+*`) are not.
"""

import re
from collections import namedtuple
from typing import (
    Optional, Union, Callable, Any,
    List, Tuple,
)
import yarl
from multidict import MultiDict, MultiDictProxy
from .errors import InvalidInputError, InvalidPatternError
from .logs import log
from .options import PathParserOptions
from .segments import ParsedPath, parse as parse_path


#: Characters reserved by the URI standard (or by the developer).
RESERVED_CHARACTERS = frozenset('?#[]@!{}+*')

#: Pattern tokens: separator(s), ":name", "%XX" and literal text. Covers every character.
_RE_TOKEN = re.compile(r'(?P<sep>/+)|:(?P<name>[^\W_]*)|%(?P<hex>[0-9A-Fa-f]{0,2})|(?P<lit>[^/:%]+)')

#: Value of the named parameter (without "/", "#" and "?").
_PARAM_VALUE = r'[^/#?]'


#: Value of named parameter in a parse result.
#: - name - parameter name (without ":")
#: - value - captured value, can be empty if `allow_empty_parameter_values` is set
#: - starts_at - 0-based index in the input where the value starts
#: - ends_at - 0-based index of character that follows the value
ParameterValue = namedtuple('ParameterValue', 'name value starts_at ends_at')


class ParseResult(namedtuple('ParseResult', 'input parameter_values matching_parser')):
    """
    The result of successfully matching an input against a PathParser.

    - input - the string that was matched
    - parameter_values - read-only multi-dict view {name: ParameterValue}
    - matching_parser - PathParser which executed this match
    """

    __slots__ = ()

    def parameter_value(self, name: str) -> Optional[ParameterValue]:
        """Value of a parameter (name without ":") or None if the name does not exist."""
        return self.parameter_values.get(name)

    @property
    def path(self) -> ParsedPath:
        """Matched input split into segments."""
        return parse_path(self.input)


class PathParser:
    """
    Parser that matches arbitrary input paths against the known route pattern.

    >>> PathParser.create('/Users/:id', case_sensitive=True)
    >>> PathParser.create('/users/:id', PathParserOptions(collapse_empty_path_segments=True))
    """

    def __init__(self, matching_path: str, options: Optional[PathParserOptions] = None, **changes):
        if options is None:
            options = PathParserOptions.default()
        if changes:
            options = options.replace(**changes)
        if matching_path is None or not isinstance(matching_path, str) or not matching_path.strip():
            raise InvalidPatternError(matching_path, 'null or blank matching path')
        #: Pattern against which inputs are matched.
        self.matching_path: str = matching_path.strip()
        #: Parser configuration.
        self.options: PathParserOptions = options
        pattern, names = _compile_pattern(self.matching_path, options)
        #: Named parameters in declaration order.
        self.named_parameters: Tuple[str, ...] = tuple(names)
        #: Compiled pattern.
        self.regex = re.compile(pattern, 0 if options.case_sensitive else re.IGNORECASE)
        #: Number of characters before the first named parameter.
        self.prefix_length: int = self.matching_path.find(':')
        if self.prefix_length == -1:
            self.prefix_length = len(self.matching_path)
        log.debug(f'PathParser {self.matching_path!r} -> {self.regex.pattern!r}')

    @classmethod
    def create(cls, matching_path: str, options: Optional[PathParserOptions] = None, **changes) -> 'PathParser':
        """
        Create a PathParser.

        Parameters
        ----------
        matching_path : str
            The pattern against which to match inputs.
        options : PathParserOptions or None
            Configuration, default options if None.
        changes
            Option fields to change, see `PathParserOptions`.

        Raises InvalidPatternError when the matching path is not correct.
        """
        return cls(matching_path, options, **changes)

    def __repr__(self):
        return (f'{self.__class__.__name__}(matching_path={self.matching_path!r}, regex={self.regex.pattern!r},'
                f' named_parameters={self.named_parameters!r}, prefix_length={self.prefix_length})')

    def parse(self, path: Union[str, yarl.URL]) -> Optional[ParseResult]:
        """Test the input path against the pattern. Returns ParseResult or None if it does not match."""
        if isinstance(path, yarl.URL):
            path = path.raw_path
        elif not isinstance(path, str):
            raise InvalidInputError(path)
        r = self.regex.fullmatch(path)
        if r is None:
            return None
        values = MultiDict()
        for i, name in enumerate(self.named_parameters):
            group = f'_{i}'
            values.add(name, ParameterValue(name, r.group(group), r.start(group), r.end(group)))
        return ParseResult(path, MultiDictProxy(values), self)


def _compile_pattern(path: str, options: PathParserOptions) -> Tuple[str, List[str]]:
    """Check route pattern and build regex. Returns (regex, names)."""

    def fail(pos, reason):
        if pos >= len(path):
            raise InvalidPatternError(path, f"the path cannot end with ':' or '%' ({reason})")
        c = path[pos]
        if c in RESERVED_CHARACTERS:
            reason = f'character {c!r} is reserved by the URI standard or by the developer'
        raise InvalidPatternError(path, reason, pos)

    if path[0] != '/':
        fail(0, f"expected character '/' but got {path[0]!r}")
    parts = []
    names = []
    last = sep = None
    for r in _RE_TOKEN.finditer(path):
        last = r.lastgroup
        if last == 'sep':
            sep = r['sep']
            parts.append('/+' if options.collapse_empty_path_segments else re.escape(r['sep']))
        elif last == 'lit':
            lit = r['lit']
            for i, c in enumerate(lit):
                if c in RESERVED_CHARACTERS:
                    fail(r.start() + i, '')
            parts.append(re.escape(lit))
        elif last == 'hex':
            if len(r['hex']) < 2:
                nth = 'first' if not r['hex'] else 'second'
                fail(r.end(), f"the {nth} character after a '%' must be a hexadecimal digit")
            parts.append(re.escape(r[0]))
        else:
            name = r['name']
            if not name:
                fail(r.end(), 'expected a letter or digit after \':\'')
            if path[r.end():r.end() + 1] not in ('', '/', ':'):
                fail(r.end(), "expected a letter, digit, '/' or ':' after parameter name")
            if name in names:
                raise InvalidPatternError(path, f'the parameter name {name!r} has already been used in the path',
                                          r.start('name'))
            quantifier = '*' if options.allow_empty_parameter_values else '+'
            parts.append(f'(?P<_{len(names)}>{_PARAM_VALUE}{quantifier})')
            names.append(name)
    if options.match_trailing_delimiter:
        if last == 'sep' and options.collapse_empty_path_segments:
            parts[-1] = f'(?:{parts[-1]})?'
        elif last == 'sep':
            # only the final "/" is optional
            parts[-1] = re.escape(sep[:-1]) + '/?'
        else:
            parts.append('/*' if options.collapse_empty_path_segments else '/?')
    return ''.join(parts), names


#: Router match: route target and parse result.
RouteMatch = namedtuple('RouteMatch', 'target result')

#: Router entry.
RouteEntry = namedtuple('RouteEntry', 'parser target')


class Router:
    """
    Set of route patterns, the first matching route wins.

    >>> router = Router()
    >>>
    >>> @router.route('/users/:userid')
    >>> def user(userid):
    >>>     ...
    >>>
    >>> m = router.match('/users/joao')
    >>> m.target(m.result.parameter_value('userid').value)
    """

    def __init__(self, options: Optional[PathParserOptions] = None):
        #: Default options for all routes.
        self.options: PathParserOptions = PathParserOptions.default() if options is None else options
        self.routes: List[RouteEntry] = []

    def add_route(self, pattern: str, target: Any = None, *,
                  options: Optional[PathParserOptions] = None, **changes) -> PathParser:
        """Add route pattern. Returns its parser."""
        if options is None:
            options = self.options
        parser = PathParser.create(pattern, options, **changes)
        self.routes.append(RouteEntry(parser, target))
        return parser

    def route(self, pattern: str, **changes) -> Callable:
        """Decorator. Add route with decorated function as target."""
        def decorator(method):
            self.add_route(pattern, method, **changes)
            return method

        return decorator

    def match(self, path: Union[str, yarl.URL]) -> Optional[RouteMatch]:
        """Find the first route matching `path`. Returns RouteMatch or None."""
        if not isinstance(path, (str, yarl.URL)):
            raise InvalidInputError(path)
        for route in self.routes:
            result = route.parser.parse(path)
            if result is not None:
                return RouteMatch(route.target, result)
        log.debug(f'No route for {path!r}')
        return None
