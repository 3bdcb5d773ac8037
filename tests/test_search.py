from littlesearch.posting import KeywordIndex, Occurrence
from littlesearch.search_cli import merge_top_documents, parse_query, top5_search
from littlesearch.index_builder import build_index

def _index(table):
    index = KeywordIndex()
    for keyword, occs in table.items():
        index.keywords_index[keyword] = [Occurrence(d, f) for d, f in occs]
    return index

def test_two_keyword_merge():
    index = _index({
        "kw1": [("docA", 5), ("docB", 3)],
        "kw2": [("docC", 5), ("docD", 2)],
    })
    assert top5_search(index, "kw1", "kw2") == ["docA", "docC", "docB", "docD"]

def test_kw1_wins_ties_and_limit():
    index = _index({
        "kw1": [("a", 4), ("b", 2), ("c", 2), ("d", 1)],
        "kw2": [("e", 4), ("f", 2), ("g", 1)],
    })
    assert top5_search(index, "kw1", "kw2") == ["a", "e", "b", "c", "f"]
    assert top5_search(index, "kw2", "kw1") == ["e", "a", "f", "b", "c"]

def test_neither_keyword_indexed():
    index = _index({"kw1": [("a", 1)]})
    assert top5_search(index, "nope", "never") is None

def test_single_keyword_fewer_than_five():
    index = _index({"kw1": [("a", 3), ("b", 1)]})
    assert top5_search(index, "kw1", "missing") == ["a", "b"]
    assert top5_search(index, "missing", "kw1") == ["a", "b"]

def test_single_keyword_capped_at_five():
    index = _index({"kw1": [(f"d{n}", 10 - n) for n in range(8)]})
    assert top5_search(index, "kw1", "missing") == ["d0", "d1", "d2", "d3", "d4"]

def test_document_under_both_keywords_once():
    index = _index({
        "kw1": [("a", 5), ("b", 1)],
        "kw2": [("b", 6), ("a", 2), ("c", 1)],
    })
    assert top5_search(index, "kw1", "kw2") == ["b", "a", "c"]

def test_drain_skips_duplicates():
    index = _index({
        "kw1": [("a", 9)],
        "kw2": [("b", 3), ("a", 2), ("c", 1)],
    })
    assert top5_search(index, "kw1", "kw2") == ["a", "b", "c"]

def test_same_keyword_twice():
    index = _index({"kw1": [("a", 2), ("b", 1)]})
    assert top5_search(index, "kw1", "kw1") == ["a", "b"]

def test_merge_limit():
    first = [Occurrence("a", 3), Occurrence("b", 2)]
    second = [Occurrence("c", 1)]
    assert merge_top_documents(first, second, limit=2) == ["a", "b"]

def test_parse_query():
    index = KeywordIndex(noise_words={"the"})
    assert parse_query(index, "Deep, world!") == ("deep", "world")
    assert parse_query(index, "deep OR world") == ("deep", "world")
    assert parse_query(index, "deep") is None
    assert parse_query(index, "one two three") is None

def test_search_built_index(corpus):
    index = build_index(corpus / "docs.txt", corpus / "noisewords.txt")
    assert top5_search(index, "deep", "sea") == ["doc1.txt", "doc3.txt", "doc2.txt"]
    assert top5_search(index, "world", "water") == ["doc2.txt", "doc1.txt", "doc3.txt"]
