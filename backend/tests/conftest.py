import pytest


@pytest.fixture
def sample_malayalam_title():
    return "ആദ്യ ലേഖനം"


@pytest.fixture
def sample_editor_html():
    # Typical Chrome contentEditable output: first line bare, later lines in divs
    return "Hello<div>World</div><div><br></div><p></p>"
