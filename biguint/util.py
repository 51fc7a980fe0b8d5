"""
Distributed under the MIT/X11 software license

Utility functions - error reporting and byte buffer rendering
"""

# Bytes per underscore/semicolon separated group (8 hex digits)
GROUP_BYTES = 4


def error(format_str: str, *args) -> bool:
    """
    Error reporting function

    Formats error message and prints it with "ERROR: " prefix.
    Always returns False for use in return statements.

    Args:
        format_str: Format string (supports %s, %d, etc.)
        *args: Arguments for format string

    Returns:
        Always returns False

    Example:
        if x.compare(y) < 0:
            return error("Subtract() : underflow %s - %s", x, y)
    """
    try:
        message = format_str % args if args else format_str
    except (TypeError, ValueError):
        # Fallback if formatting fails
        message = format_str + " " + " ".join(str(arg) for arg in args)

    print(f"ERROR: {message}")
    return False


def format_bytes(data) -> str:
    """
    Render a little-endian byte buffer for debugging, e.g. "[21 43 65 87; 78 56 34 12]"

    Bytes are shown in storage order (least significant first) without
    zero padding, with a ";" after every group of four.
    """
    parts = []
    for i, b in enumerate(data):
        if i != 0 and i % GROUP_BYTES == 0:
            parts[-1] += ";"
        parts.append(f"{b:x}")
    return "[" + " ".join(parts) + "]"
