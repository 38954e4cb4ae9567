from click.testing import CliRunner

from webzine_cms.cli import cli


def test_slugify_command(sample_malayalam_title):
    result = CliRunner().invoke(cli, ["slugify", sample_malayalam_title])
    assert result.exit_code == 0
    assert result.output.strip() == "aadya-lekhanam"


def test_slugify_joins_arguments():
    result = CliRunner().invoke(cli, ["slugify", "Hello", "World"])
    assert result.output.strip() == "hello-world"


def test_slugify_empty_result_fails():
    result = CliRunner().invoke(cli, ["slugify", "!!!"])
    assert result.exit_code == 1


def test_clean_html_from_stdin():
    result = CliRunner().invoke(cli, ["clean-html"], input="<div>Just text</div>")
    assert result.exit_code == 0
    assert result.output.strip() == "<p>Just text</p>"


def test_clean_html_from_file(tmp_path):
    path = tmp_path / "draft.html"
    path.write_text("<p><h2>Title</h2></p>", encoding="utf-8")
    result = CliRunner().invoke(cli, ["clean-html", str(path)])
    assert result.output.strip() == "<h2>Title</h2>"


def test_words_command():
    result = CliRunner().invoke(cli, ["words"], input="<p>one two</p><p>three</p>")
    assert result.exit_code == 0
    assert result.output.strip() == "3"
