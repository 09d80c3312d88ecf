"""Translation key derivation."""


def derive_key(source: str) -> str:
    """
    Turn a source string into a translation key:
    "Hello World" -> "hello_world", "user-profile" -> "user_profile".
    """
    lowered = source.lower().replace('-', '_')
    joined = '_'.join(lowered.split())
    return ''.join(c for c in joined if c.isalnum() or c == '_')
