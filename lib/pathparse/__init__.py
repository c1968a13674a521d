"""
Tiny URI path parser.

Split a path into segments, normalize dot-segments, build it back
and match paths against route patterns with named parameters.

```python
>>> from pathparse import parse, normalize, PathParser
>>> str(normalize(parse('/a/./b/../c')))
'/a/c'
>>> PathParser.create('/users/:id').parse('/users/42').parameter_value('id').value
'42'
```
"""

#: pathparse version.
__version__ = '0.1.0'

from .errors import PathParseError, InvalidInputError, InvalidPatternError  # noqa E402
from .segments import PathSegment, ParsedPath, parse, normalize, to_string  # noqa E402
from .options import PathParserOptions                                      # noqa E402
from .routing import (                                                      # noqa E402
    PathParser, ParseResult, ParameterValue,
    Router, RouteMatch,
)
from .logs import log                                                       # noqa E402


__all__ = ['PathParseError', 'InvalidInputError', 'InvalidPatternError',
           'PathSegment', 'ParsedPath', 'parse', 'normalize', 'to_string',
           'PathParserOptions', 'PathParser', 'ParseResult', 'ParameterValue', 'Router', 'RouteMatch',
           'log']
