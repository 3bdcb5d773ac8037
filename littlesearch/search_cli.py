"""
Search component for the keyword index.

Answers "kw1 or kw2" queries:
- A document matches if either keyword occurs in it; it is listed once.
- Results are in descending order of frequency, ties going to kw1.
- At most TOP_K documents are returned; None means nothing matched.

Usage (from repo root):
    python -m littlesearch.search_cli \
        --docs docs.txt \
        --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import SourceNotFoundError, build_index
from .posting import KeywordIndex, Occurrence

TOP_K = 5


def merge_top_documents(
    first: List[Occurrence],
    second: List[Occurrence],
    limit: int = TOP_K,
) -> List[str]:
    """
    Merge two occurrence lists (each in descending frequency) into at most
    limit distinct documents. On equal frequency the first list wins and
    only its cursor advances.
    """
    result: List[str] = []
    i = j = 0
    while len(result) < limit and (i < len(first) or j < len(second)):
        if j >= len(second) or (
            i < len(first) and first[i].frequency >= second[j].frequency
        ):
            occ = first[i]
            i += 1
        else:
            occ = second[j]
            j += 1
        if occ.document not in result:
            result.append(occ.document)
    return result


def top5_search(
    index: KeywordIndex,
    kw1: str,
    kw2: str,
    limit: int = TOP_K,
) -> Optional[List[str]]:
    """
    Return up to limit documents containing kw1 or kw2, or None if neither
    keyword is in the index.
    """
    kw1_occs = index.get_occurrences(kw1)
    kw2_occs = index.get_occurrences(kw2)
    if not kw1_occs and not kw2_occs:
        return None
    return merge_top_documents(kw1_occs, kw2_occs, limit=limit)


def parse_query(index: KeywordIndex, raw_query: str) -> Optional[tuple[str, str]]:
    """
    Split "kw1 kw2" or "kw1 or kw2" into two keywords, normalized the same
    way indexed words are. A word that is not a keyword is kept lower case
    so it simply matches nothing. Returns None if the query is malformed.
    """
    words = raw_query.split()
    if len(words) == 3 and words[1].lower() == "or":
        words = [words[0], words[2]]
    if len(words) != 2:
        return None
    kws = [index.get_keyword(w) or w.lower() for w in words]
    return kws[0], kws[1]


def run_search_loop(index: KeywordIndex, top_k: int = TOP_K) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {len(index.documents())} documents, {len(index)} keywords.")
    print("Enter two keywords (kw1 or kw2). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        query = parse_query(index, raw_query)
        if query is None:
            print("Please enter exactly two keywords.")
            continue

        kw1, kw2 = query
        docs = top5_search(index, kw1, kw2, limit=top_k)
        if not docs:
            print("No documents matched the query.")
            continue

        print(f"Top {len(docs)} results for {kw1!r} or {kw2!r}:")
        for rank, doc in enumerate(docs, start=1):
            print(f"{rank:2d}. {doc}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Two-keyword search CLI.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing the noise words to skip.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=TOP_K,
        help="Number of top results to show.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        index = build_index(args.docs, args.noise)
    except SourceNotFoundError as e:
        print(e)
        sys.exit(1)

    run_search_loop(index, top_k=args.top)


if __name__ == "__main__":
    main()
