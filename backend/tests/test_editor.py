from webzine_cms.text.editor import (
    build_link_html,
    build_table_html,
    count_words,
    find_replace,
    has_text_content,
    html_to_text,
)
from webzine_cms.text.html_clean import clean_html_content


def test_html_to_text_keeps_block_boundaries():
    assert html_to_text("<p>Hello <b>big</b></p><p>world</p>") == "Hello big world"
    assert html_to_text("<p>wo<b>rd</b></p>") == "word"
    assert html_to_text("<p>AT&amp;T</p>") == "AT&T"


def test_count_words():
    assert count_words("<p>Hello <b>big</b></p><p>world</p>") == 3
    assert count_words("<p>ആദ്യ ലേഖനം</p>") == 2
    assert count_words("") == 0
    assert count_words(None) == 0
    assert count_words("<p>&nbsp;</p>") == 0


def test_has_text_content():
    assert has_text_content("<p>x</p>")
    assert not has_text_content("<p> </p>")
    assert not has_text_content("<p>&nbsp;</p><p><br></p>")
    assert not has_text_content('<img src="a.png">')
    assert not has_text_content("")


def test_find_replace_case_insensitive():
    assert find_replace("<p>Hello hello</p>", "hello", "hi") == "<p>hi hi</p>"


def test_find_replace_regex_pattern():
    assert find_replace("<p>2023 and 2024</p>", r"\d{4}", "YEAR") == "<p>YEAR and YEAR</p>"


def test_find_replace_literal_replacement():
    """Backreference syntax in the replacement is inserted as-is."""
    assert find_replace("abc", "b", r"\1") == "a\\1c"


def test_find_replace_invalid_pattern_is_noop():
    assert find_replace("<p>(text</p>", "(", "x") == "<p>(text</p>"


def test_find_replace_empty_find_is_noop():
    assert find_replace("<p>text</p>", "", "x") == "<p>text</p>"


def test_build_table_html():
    html = build_table_html(2, 3)
    assert html.startswith("<table")
    assert html.count("<tr>") == 2
    assert html.count("<td") == 6
    assert html.endswith("<p><br/></p>")


def test_build_table_html_clamps_to_one_cell():
    html = build_table_html(0, -2)
    assert html.count("<tr>") == 1
    assert html.count("<td") == 1


def test_inserted_table_survives_cleaning():
    """The trailing <p><br/></p> placeholder disappears once the editor content is cleaned."""
    cleaned = clean_html_content(build_table_html(1, 1))
    assert cleaned.startswith("<table")
    assert cleaned.endswith("</table>")


def test_build_link_html_escapes():
    html = build_link_html("https://example.com/?a=1&b=2", "Read <more>")
    assert 'href="https://example.com/?a=1&amp;b=2"' in html
    assert ">Read &lt;more&gt;</a>" in html
    assert 'target="_blank"' in html
    assert 'rel="noopener noreferrer"' in html


def test_build_link_html_defaults_text_to_url():
    html = build_link_html("https://example.com")
    assert html.endswith(">https://example.com</a>")
