"""Line-oriented text case transforms."""

import uuid
from typing import Callable, Dict, Iterable, Iterator


def lower_case(line: str) -> str:
    return line.lower()


def upper_case(line: str) -> str:
    return line.upper()


def sentence_case(line: str) -> str:
    """Trim, then uppercase the first character and lowercase the rest."""
    text = line.strip()
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def title_case(line: str) -> str:
    """Capitalize every run of letters and digits, keeping everything else as is.

    Any non-alphanumeric character starts a new word: "hello-world o'neil"
    becomes "Hello-World O'Neil".
    """
    result = []
    at_word_start = True
    for char in line:
        if not char.isalnum():
            result.append(char)
            at_word_start = True
        elif at_word_start:
            result.append(char.upper())
            at_word_start = False
        else:
            result.append(char.lower())
    return "".join(result)


TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "lower": lower_case,
    "upper": upper_case,
    "sentence": sentence_case,
    "title": title_case,
}


def transform_lines(lines: Iterable[str], mode: str) -> Iterator[str]:
    """Apply one transform per input line; trailing newlines are stripped."""
    transform = TRANSFORMS[mode]
    for line in lines:
        yield transform(line.rstrip("\r\n"))


def new_uuid() -> str:
    return str(uuid.uuid4()).lower()
