import pytest


@pytest.fixture
def sample_text():
    return b"The soup pleased the dog.\nThe cat caught the rat."
