"""
Build the keyword index and print analytics about it.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt

Optionally show the occurrence list of some keywords:
    python build_index.py --docs docs.txt --noise noisewords.txt --keyword deep --keyword world

Output:
  - Analytics table printed to console (documents, keywords, occurrences)
  - Occurrence lists, in descending frequency, for each --keyword given
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from littlesearch.index_builder import SourceNotFoundError, make_index
from littlesearch.posting import KeywordIndex


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing the noise words (default: noisewords.txt)",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Keyword whose occurrence list to print (repeatable)",
    )
    args = parser.parse_args()

    index = KeywordIndex()
    try:
        doc_names = make_index(index, args.docs, args.noise)
    except SourceNotFoundError as e:
        print(e)
        sys.exit(1)

    num_docs = len(doc_names)
    num_keywords = len(index)
    num_occurrences = sum(len(occs) for occs in index.to_dict().values())

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {num_docs} |")
    print(f"| Number of unique keywords   | {num_keywords} |")
    print(f"| Number of occurrences       | {num_occurrences} |")
    print()
    print("=" * 50)

    for keyword in args.keyword:
        kw = index.get_keyword(keyword) or keyword.lower()
        occs = index.get_occurrences(kw)
        if not occs:
            print(f"{kw}: not indexed")
            continue
        print(f"{kw}: " + " ".join(str(occ) for occ in occs))
    print()


if __name__ == "__main__":
    main()
