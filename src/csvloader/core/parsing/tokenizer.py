"""
Line tokenizer for comma-separated text.

Handles quoted fields containing commas and doubled quotes ("") as an
escaped literal quote. Dialect is fixed: comma delimiter, double-quote
quoting.
"""

DELIMITER = ","
QUOTE = '"'


def split_line(line: str) -> list[str]:
    """
    Split one line into trimmed field strings.

    An unterminated quote is closed implicitly at end of line. An empty
    line yields a single empty field.

    Args:
        line: Raw line without its line terminator

    Returns:
        List of fields, each stripped of surrounding whitespace

    Examples:
        >>> split_line('"say ""hi"" now",C')
        ['say "hi" now', 'C']
        >>> split_line('a,,b ')
        ['a', '', 'b']
    """
    fields: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    length = len(line)
    i = 0

    while i < length:
        ch = line[i]

        if ch == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                buffer.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == DELIMITER and not in_quotes:
            fields.append("".join(buffer))
            buffer = []
        else:
            buffer.append(ch)

        i += 1

    fields.append("".join(buffer))
    return [field.strip() for field in fields]
