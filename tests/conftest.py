import pytest


@pytest.fixture
def corpus(tmp_path):
    """A small on-disk corpus: document list, noise words and three documents."""
    (tmp_path / "noisewords.txt").write_text("the\nand\na\nof\n", encoding="utf-8")
    (tmp_path / "doc1.txt").write_text(
        "The deep sea. Deep, deep water and the world!\n", encoding="utf-8"
    )
    (tmp_path / "doc2.txt").write_text(
        "A world of worlds; world world.\nDeep don't 42\n", encoding="utf-8"
    )
    (tmp_path / "doc3.txt").write_text("sea sea sea water\n", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("doc1.txt\ndoc2.txt doc3.txt\n", encoding="utf-8")
    return tmp_path
