"""
Keyword normalizer and document tokenizer for the keyword index.
Splits text on whitespace, extracts visible text from HTML documents,
and decides which raw words are indexable keywords.
"""

import string
import warnings
from pathlib import Path
from typing import Iterable
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

# Characters that may trail a keyword and are stripped from it
PUNCTUATION = ".,?:;!"
LETTERS = string.ascii_lowercase

HTML_SUFFIXES = (".html", ".htm")

_TOKENIZER = WhitespaceTokenizer()


def get_keyword(word: str | None, noise_words: Iterable[str] = ()) -> str | None:
    """
    Return word as a keyword, or None if it is not one.

    A keyword is a word that, after its trailing punctuation is stripped,
    consists only of letters and is not a noise word. Matching is
    case-insensitive; the keyword is returned lower case.
    """
    if word is None:
        return None
    lowered = word.lower()
    cut = len(lowered)
    letter_seen = False
    for j in range(len(lowered) - 1, -1, -1):
        ch = lowered[j]
        if ch in LETTERS:
            letter_seen = True
        elif ch in PUNCTUATION:
            # Punctuation is only legal in the trailing block
            if letter_seen:
                return None
            cut = j
        else:
            return None

    keyword = lowered[:cut]
    if not keyword or keyword in noise_words:
        return None
    return keyword


def tokenize(text: str) -> list[str]:
    """Split text into raw whitespace-separated words."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_document_file(filepath: Path) -> str:
    """
    Read document content, handling common encodings.
    """
    for encoding in ("utf-8", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    # latin-1 maps every byte
    return Path(filepath).read_text(encoding="latin-1")


def get_words_from_file(filepath: Path) -> list[str]:
    """
    Read a document and return its raw words. HTML documents are reduced
    to their visible text first.
    """
    filepath = Path(filepath)
    content = read_document_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return tokenize(content)
