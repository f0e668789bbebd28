"""Split a string on a single-character delimiter."""


def split_string(text: str, token: str, keep_trailing: bool = False) -> list[str]:
    """Split `text` at each occurrence of `token`.

    Empty segments between consecutive delimiters are kept. Like reading
    lines, a delimiter at the very end does not open a new segment, and
    empty input yields no segments:

        split_string("a,b,c and d", ",")  ->  ["a", "b", "c and d"]
        split_string("a,,b,", ",")        ->  ["a", "", "b"]

    With keep_trailing=True every delimiter separates two segments, so
    joining the result with `token` gives back `text`.
    """
    if len(token) != 1:
        raise ValueError(f"token must be a single character, got {token!r}")

    segments = text.split(token)
    if not keep_trailing and segments[-1] == "":
        segments.pop()
    return segments
