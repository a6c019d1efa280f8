def is_typed_char(text: str) -> bool:
    """Key text that counts as a keystroke; control codes like DEL (\\x7f) do not."""
    return bool(text) and text.isprintable()
