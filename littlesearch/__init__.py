"""Little search engine: keyword index and two-keyword search package."""

from .posting import Occurrence, KeywordIndex, insert_last_occurrence
from .index_builder import SourceNotFoundError, build_index, load_keywords, make_index
from .tokenizer import get_keyword, tokenize
from .search_cli import top5_search
