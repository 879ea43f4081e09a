"""Line-oriented delimited field parser.

Quoting follows RFC 4180 within a single line: a field may be wrapped in
double quotes, a doubled quote inside quotes is a literal quote, and the
delimiter is literal inside quotes. Quoted fields spanning lines are not
supported; an unterminated quote simply runs to the end of the line.
"""

from enum import Enum, auto

QUOTE = '"'


class ScanState(Enum):
    NORMAL = auto()
    IN_QUOTES = auto()


def parse_fields(line: str, delimiter: str) -> list[str]:
    fields: list[str] = []
    buffer: list[str] = []
    state = ScanState.NORMAL
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if state is ScanState.IN_QUOTES:
            if char == QUOTE:
                if index + 1 < length and line[index + 1] == QUOTE:
                    buffer.append(QUOTE)
                    index += 1
                else:
                    state = ScanState.NORMAL
            else:
                buffer.append(char)
        elif char == delimiter:
            fields.append("".join(buffer).strip())
            buffer.clear()
        elif char == QUOTE:
            state = ScanState.IN_QUOTES
        else:
            buffer.append(char)
        index += 1
    fields.append("".join(buffer).strip())
    return fields


def field_count(line: str, delimiter: str) -> int:
    return len(parse_fields(line, delimiter))
