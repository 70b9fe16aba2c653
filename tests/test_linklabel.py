import pytest

from cmarkhtml.linklabel import (
    ReferenceKind,
    ReferenceLabel,
    normalize_label,
    scan_link_label_rest,
)


def _reject(_rest):
    return None


def _accept(_rest):
    return 0


def test_whitespace_normalization():
    text = "«\t\tBlurry Eyes\t\t»][blurry_eyes]"
    consumed, label = scan_link_label_rest(text, _reject)
    assert label == "« Blurry Eyes »"
    assert text[consumed - 1] == "]"
    assert consumed == 18


def test_return_carriage_linefeed_ok():
    result = scan_link_label_rest("hello\r\nworld\r\n]", _accept)
    assert result == (15, "hello world ")


def test_single_space_kept_verbatim():
    assert scan_link_label_rest("a b]rest", _reject) == (4, "a b")


def test_nested_open_bracket_rejected():
    assert scan_link_label_rest("a[b]", _reject) is None


def test_only_whitespace_rejected():
    assert scan_link_label_rest("   ]", _reject) is None


def test_unterminated_label_rejected():
    assert scan_link_label_rest("abc", _reject) is None


def test_two_linebreaks_rejected():
    assert scan_link_label_rest("a\n\nb]", _accept) is None


def test_linebreak_handler_can_abort():
    assert scan_link_label_rest("a\nb]", _reject) is None


def test_linebreak_handler_skip_is_applied():
    result = scan_link_label_rest("a\n> b]", lambda rest: 2 if rest.startswith("> ") else 0)
    assert result == (6, "a b")


def test_backslash_escapes_closing_bracket():
    assert scan_link_label_rest("a\\]b]", _reject) == (5, "a\\]b")


def test_trailing_backslash_rejected():
    assert scan_link_label_rest("a\\", _reject) is None


def test_limit_on_non_ascii_length():
    assert scan_link_label_rest("é" * 500 + "]", _reject) is None
    consumed, label = scan_link_label_rest("é" * 499 + "]", _reject)
    assert consumed == 500
    assert label == "é" * 499


def test_normalize_label_is_case_insensitive():
    assert normalize_label("Foo BAR") == normalize_label("foo bar")
    assert normalize_label("Straße") == normalize_label("STRASSE")


def test_reference_label_key():
    ref = ReferenceLabel(ReferenceKind.FOOTNOTE, "Note")
    assert ref.key == "note"
    assert ref.kind is ReferenceKind.FOOTNOTE


@pytest.mark.parametrize("text", ["\t]", "\n]"])
def test_whitespace_only_variants_rejected(text):
    assert scan_link_label_rest(text, _accept) is None