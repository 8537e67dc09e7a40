# repl/harness.py
"""
Build the Clojure text that gets sent to a REPL.

bootstrap() runs once per session; build_eval() wraps every submission.
Both are pure and return plain strings.
"""

from repl.lang import Lang
from repl.util import escape_quotes

# Reader conditionals pick the right namespaces on the runtime side, so the
# same text works for clj and cljs.
_BOOTSTRAP = """
(set! *print-length* 50)
(require '#?(:clj clojure.repl, :cljs cljs.repl))
#?(:clj (require 'clojure.stacktrace))
(str "Ready to evaluate " #?(:clj "Clojure", :cljs "ClojureScript") "!")
"""


def bootstrap() -> str:
    return _BOOTSTRAP


def _in_ns(code: str, ns: str) -> str:
    return f"(clojure.core/in-ns '{ns}) {code}"


def build_eval(code: str, ns: str, lang: Lang) -> str:
    """
    Wrap user code so it evaluates inside `ns`.

    For Clojure the whole thing is read back from a string and evaluated in a
    try/catch that prints the stack trace to *err*. ClojureScript gets the
    namespace switch only; errors surface however the runtime reports them.
    """
    wrapped = _in_ns(code, ns)

    if lang is Lang.CLOJURESCRIPT:
        return wrapped

    if lang is Lang.CLOJURE:
        return f"""
(try
  (clojure.core/eval (clojure.core/read-string {{:read-cond :allow}} "(do {escape_quotes(wrapped)})"))
  (catch Throwable e
    (binding [*out* *err*]
      (clojure.stacktrace/print-stack-trace e)
      (println))))
"""

    raise TypeError(f"expected a Lang, got {lang!r}; resolve tags with parse_lang() first")
