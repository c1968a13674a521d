"""
Route pattern parser configuration.
"""

from collections import namedtuple


class PathParserOptions(namedtuple('PathParserOptions', 'case_sensitive match_trailing_delimiter'
                                                       ' allow_empty_parameter_values collapse_empty_path_segments',
                                   defaults=(False, True, False, False))):
    """
    Options controlling the parser sensitivity and delimiters.

    Parameters
    ----------
    case_sensitive : bool
        Whether the parser should respect case of literal parts. Default: False.
    match_trailing_delimiter : bool
        Should the parser succeed even if the pattern has a trailing delimiter
        and the input not, or vice-versa. Default: True.
    allow_empty_parameter_values : bool
        Should the parser accept an empty input path segment where there is
        a named parameter. Default: False.
    collapse_empty_path_segments : bool
        When true, the parser is insensitive to multiple delimiters in a row.
        It is not standard URI (segments can be empty), but paths often get
        like that accidentally, e.g. from joining paths carelessly. Default: False.

    >>> opts = PathParserOptions.default().replace(case_sensitive=True)
    """

    __slots__ = ()

    @classmethod
    def default(cls) -> 'PathParserOptions':
        """Preconfigured default options."""
        return cls()

    def replace(self, **changes) -> 'PathParserOptions':
        """Return new options with given fields changed. Unknown field raises TypeError."""
        unknown = set(changes) - set(self._fields)
        if unknown:
            raise TypeError(f'Unknown PathParser option(s): {", ".join(sorted(unknown))}')
        return self._replace(**{k: bool(v) for k, v in changes.items()})
