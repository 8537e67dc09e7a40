import pytest

from repl.lang import Lang, LangParseError, parse_lang


def test_clj_resolves_to_clojure():
    assert parse_lang("clj") is Lang.CLOJURE


def test_cljs_resolves_to_clojurescript():
    assert parse_lang("cljs") is Lang.CLOJURESCRIPT


def test_tags_map_to_distinct_langs():
    assert parse_lang("clj") is not parse_lang("cljs")
    assert parse_lang("clj") is parse_lang("clj")


@pytest.mark.parametrize("tag", ["python", "", " ", "clj ", " cljs", "CLJ", "Cljs", "cljc", "cl"])
def test_unknown_tags_fail(tag):
    with pytest.raises(LangParseError) as exc:
        parse_lang(tag)
    assert exc.value.tag == tag
    assert str(exc.value) == "couldn't parse language, should be clj or cljs"


def test_non_string_tag_fails():
    with pytest.raises(LangParseError):
        parse_lang(None)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_lang("python")


def test_str_and_display_name():
    assert str(Lang.CLOJURE) == "clj"
    assert str(Lang.CLOJURESCRIPT) == "cljs"
    assert Lang.CLOJURE.display_name == "Clojure"
    assert Lang.CLOJURESCRIPT.display_name == "ClojureScript"
