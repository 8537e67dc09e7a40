# repl/lang.py
"""
Language tags for a REPL session.

A session speaks either Clojure ("clj") or ClojureScript ("cljs"). Both share the
same reader syntax, so the tag only decides how snippets are wrapped.
"""

from enum import Enum


class LangParseError(ValueError):
    """Raised when a session asks for a language tag we don't know."""

    message = "couldn't parse language, should be clj or cljs"

    def __init__(self, tag):
        super().__init__(self.message)
        self.tag = tag


class Lang(Enum):
    CLOJURE = "clj"
    CLOJURESCRIPT = "cljs"

    @property
    def display_name(self) -> str:
        return "Clojure" if self is Lang.CLOJURE else "ClojureScript"

    def __str__(self) -> str:
        return self.value


_TAGS = {lang.value: lang for lang in Lang}


def parse_lang(tag: str) -> Lang:
    """
    Exact, case-sensitive lookup of a session tag. No trimming.
    """
    if not isinstance(tag, str) or tag not in _TAGS:
        raise LangParseError(tag)
    return _TAGS[tag]
