"""
Index builder: constructs the keyword index from a list of documents.
Reads the noise words and the document list, scans each document into a
keyword table and merges it into the index, in document-list order.
"""

from pathlib import Path

from .tokenizer import get_keyword, get_words_from_file, read_document_file, tokenize
from .posting import KeywordIndex, Occurrence


class SourceNotFoundError(FileNotFoundError):
    """A noise-word list, document list or document could not be found."""

    def __init__(self, kind: str, path: Path) -> None:
        super().__init__(f"{kind} not found: {path}")
        self.kind = kind
        self.path = Path(path)


def _resolve(name: str, base_dir: Path | None) -> Path:
    """Resolve a listed document name against base_dir, then the cwd."""
    path = Path(name)
    if base_dir is not None and not path.is_absolute():
        candidate = Path(base_dir) / path
        if candidate.exists():
            return candidate
    return path


def _read_source(kind: str, path: Path) -> str:
    """Read a source file; any failure to open it is a SourceNotFoundError."""
    try:
        return read_document_file(path)
    except OSError as e:
        raise SourceNotFoundError(kind, path) from e


def load_noise_words(noise_words_file: Path) -> set[str]:
    """
    Read noise words (whitespace-separated) into a lower-case set.
    """
    noise_words_file = Path(noise_words_file)
    return {word.lower() for word in tokenize(_read_source("Noise-word list", noise_words_file))}


def load_document_list(docs_file: Path) -> list[str]:
    """
    Read document names (whitespace-separated), keeping their order.
    """
    docs_file = Path(docs_file)
    return tokenize(_read_source("Document list", docs_file))


def load_keywords(
    doc_file: str | None,
    noise_words: set[str],
    *,
    base_dir: Path | None = None,
) -> dict[str, Occurrence] | None:
    """
    Scan a document and count its keywords.
    Returns {keyword: Occurrence(doc_file, count)}; doc_file as given is the
    document identifier.
    """
    if doc_file is None:
        return None
    path = _resolve(doc_file, base_dir)
    try:
        words = get_words_from_file(path)
    except OSError as e:
        raise SourceNotFoundError("Document", path) from e

    kws: dict[str, Occurrence] = {}
    for word in words:
        keyword = get_keyword(word, noise_words)
        if keyword is None:
            continue
        occurrence = kws.get(keyword)
        if occurrence is None:
            kws[keyword] = Occurrence(doc_file, 1)
        else:
            occurrence.frequency += 1
    return kws


def make_index(
    index: KeywordIndex,
    docs_file: Path,
    noise_words_file: Path,
) -> list[str]:
    """
    Fill index with the keywords of every document listed in docs_file.
    - Noise words are loaded first and kept on the index.
    - Documents are scanned and merged one at a time, in list order.
    - A name listed more than once is indexed only the first time.
    - A source that cannot be opened raises SourceNotFoundError; documents
      merged before it stay in the index.
    Returns the distinct document names, in the order indexed.
    """
    index.noise_words.update(load_noise_words(noise_words_file))

    docs_file = Path(docs_file)
    doc_names = load_document_list(docs_file)
    base_dir = docs_file.parent
    indexed: list[str] = []
    seen: set[str] = set()
    for doc_name in doc_names:
        if doc_name in seen:
            continue
        seen.add(doc_name)
        kws = load_keywords(doc_name, index.noise_words, base_dir=base_dir)
        index.merge_keywords(kws)
        indexed.append(doc_name)
    return indexed


def build_index(docs_file: Path, noise_words_file: Path) -> KeywordIndex:
    """
    Build a fresh keyword index from a document list and a noise-word list.
    """
    index = KeywordIndex()
    make_index(index, docs_file, noise_words_file)
    return index
