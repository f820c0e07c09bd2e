def lower_text(text: str) -> str:
    """Lower-case ``text`` one character at a time, keeping its length.

    ``str.lower`` expands a few characters (``"İ"`` becomes ``"i"`` plus a
    combining dot); only the first character of such an expansion is kept,
    which is the simple case mapping.
    """
    if text.isascii():
        return text.lower()
    return "".join(ch.lower()[0] for ch in text)
