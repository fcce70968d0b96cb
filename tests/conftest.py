import pytest


def build_file(root, name, lines):
    """
    Helper function to write one value per line under root.
    Returns the path of the created file as a string.
    """
    p = root / name
    p.write_text("".join("%s\n" % line for line in lines))
    return str(p)


@pytest.fixture
def numbers_file(tmp_path):
    return build_file(tmp_path, "numbers.txt", [1, 2, 3, 4, 5])
