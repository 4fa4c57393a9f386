"""String helpers."""


def reverse_string(string: str) -> str:
    """Return the characters of ``string`` in reverse order."""
    return string[::-1]


def remove_whitespace(string: str) -> str:
    """Return ``string`` with every whitespace character dropped."""
    return "".join(char for char in string if not char.isspace())