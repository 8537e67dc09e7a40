# repl/util.py


def escape_quotes(text: str) -> str:
    """
    Make text safe to drop between double quotes in a Clojure string literal.
    Backslashes go first so the quote escapes aren't doubled.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')
