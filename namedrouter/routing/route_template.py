"""
Route Templates
Segment parsing and prefix joining for route path templates

A template such as ``/user/:id/files/*path`` is made of ``/``-delimited
segments: literals, named parameters (``:id``, one segment) and a trailing
wildcard (``*path``, the rest of the path).
"""
import posixpath
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

from namedrouter.defaults import PARAMETER_MARKER, WILDCARD_MARKER

LITERAL = 'literal'
PARAMETER = 'parameter'
WILDCARD = 'wildcard'


@dataclass(frozen=True)
class RouteSegment:
    """
    A non-empty segment of a route template

    Literal:   ``users``  (kind='literal', parameter_name=None)
    Parameter: ``:id``    (kind='parameter', parameter_name='id')
    Wildcard:  ``*splat`` (kind='wildcard', parameter_name='splat')
    """

    value: str
    kind: str = LITERAL
    parameter_name: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.kind != LITERAL


def classify_segment(part: str) -> RouteSegment:
    """Classify a single non-empty template segment"""
    marker = part[:1]
    if marker == PARAMETER_MARKER:
        return RouteSegment(part, PARAMETER, part[1:])
    if marker == WILDCARD_MARKER:
        return RouteSegment(part, WILDCARD, part[1:])
    return RouteSegment(part)


def parse_template(template: str) -> Iterator[RouteSegment]:
    """
    Yield the non-empty segments of a template in order

    Examples::

        "/"                  -> (nothing)
        "/about/us"          -> RouteSegment("about"), RouteSegment("us")
        "/user/:id"          -> RouteSegment("user"), RouteSegment(":id", "parameter", "id")
        "/item/*splat"       -> RouteSegment("item"), RouteSegment("*splat", "wildcard", "splat")
    """
    for part in template.split('/'):
        if part:
            yield classify_segment(part)


def parameter_names(template: str) -> List[str]:
    """Placeholder names of a template, in template order"""
    return [
        segment.parameter_name
        for segment in parse_template(template)
        if segment.is_placeholder
    ]


def join_paths(absolute: str, relative: str) -> str:
    """
    Join a group prefix and a relative path

    Both sides are joined with ``/`` and cleaned (duplicate slashes, ``.``
    and ``..`` collapse). A trailing slash on the relative path is kept.

    Examples::

        join_paths("/api", "v1")          -> "/api/v1"
        join_paths("/api/v1", "/submit")  -> "/api/v1/submit"
        join_paths("/", "/users/")        -> "/users/"
        join_paths("/api", "")            -> "/api"
    """
    if not relative:
        return absolute

    joined = '/'.join(part for part in (absolute, relative) if part)
    final = posixpath.normpath(re.sub(r'/{2,}', '/', joined))

    if relative.endswith('/') and not final.endswith('/'):
        final += '/'
    return final
