from __future__ import annotations

import re


_SLASH_RUN = re.compile(r"/{2,}")


def collapse_slashes(path: str) -> str:
    return _SLASH_RUN.sub("/", path)


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments (RFC 3986 section 5.2.4).

    The input is consumed left to right through a cursor; the output is a
    list of segments, each holding its leading "/" when it had one, so
    removing the last segment is a pop.
    """
    output: list[str] = []
    pos = 0
    end = len(path)
    while pos < end:
        if path.startswith("../", pos):
            pos += 3
        elif path.startswith("./", pos):
            pos += 2
        elif path.startswith("/./", pos):
            pos += 2
        elif _rest_is(path, pos, "/."):
            output.append("/")
            pos = end
        elif path.startswith("/../", pos):
            pos += 3
            if output:
                output.pop()
        elif _rest_is(path, pos, "/.."):
            if output:
                output.pop()
            output.append("/")
            pos = end
        elif _rest_is(path, pos, ".") or _rest_is(path, pos, ".."):
            pos = end
        else:
            segment_end = path.find("/", pos + 1)
            if segment_end == -1:
                segment_end = end
            output.append(path[pos:segment_end])
            pos = segment_end
    return "".join(output)


def normalize_path(path: str) -> str:
    """Collapse slash runs and resolve dot-segments; always rooted at "/"."""
    if not path:
        return "/"
    resolved = remove_dot_segments(collapse_slashes(path))
    if not resolved.startswith("/"):
        resolved = "/" + resolved
    return resolved


def _rest_is(path: str, pos: int, token: str) -> bool:
    return len(path) - pos == len(token) and path.startswith(token, pos)
