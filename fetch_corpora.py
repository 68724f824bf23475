#!/usr/bin/env python3
#
# Build language corpora for testing width table consumers. Books are fetched
# from Project Gutenberg mirrors, grouped by the language named in their
# header into <language>-corpus.text, and each corpus is run through
# wcswidths.py to record the expected line widths in <language>-corpus.widths.
#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import argparse
import glob
import os
import random
import sys
import urllib.request

import wcswidths

# At least one ASCII book, one mostly CJK and one with non-ASCII Latin text.
CORPUS = ["1493", "2650-0", "25229-0"]

MIRRORS = [
    "https://mirror.csclub.uwaterloo.ca/gutenberg",
    "https://mirrors.xmission.com/gutenberg",
    "https://www.mirrorservice.org/sites/ftp.ibiblio.org/pub/docs/books/gutenberg",
]

HEADER_LINES = 99


def book_url(mirror: str, name: str) -> str:
    """URL of a book file, e.g. 2650-0 lives at <mirror>/2/6/5/2650/2650-0.txt."""
    book_id = name.split("-", 1)[0]
    if not book_id.isdigit() or int(book_id) <= 0:
        raise ValueError(f"not a Gutenberg book number: {name!r}")
    dirs = "".join(f"{d}/" for d in book_id[:-1])
    return f"{mirror}/{dirs}{book_id}/{name}.txt"


def fetch_book(name: str, local_prefix: str = "") -> str:
    """Download a book once and return the path of its text with CRs removed."""
    raw = os.path.join(local_prefix, f"{name}.gutenberg")
    text = os.path.join(local_prefix, f"{name}.text")
    if not os.path.exists(raw):
        url = book_url(random.choice(MIRRORS), name)
        print(f"Downloading {url}...")
        try:
            urllib.request.urlretrieve(url, raw)
        except Exception as e:
            if os.path.exists(raw):
                os.remove(raw)
            sys.stderr.write(f"Error downloading {name}: {e}\n")
            sys.exit(1)

    with open(raw, "rb") as src, open(text, "wb") as dst:
        dst.write(src.read().replace(b"\r", b""))
    return text


def detect_language(path: str) -> str:
    with open(path, encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, 1):
            if lineno > HEADER_LINES:
                break
            fields = line.split()
            if fields and fields[0] == "Language:" and len(fields) > 1:
                return fields[-1].lower()
    raise LookupError(f"{path}: language not found")


def build_corpora(names: list[str], local_prefix: str = "") -> list[str]:
    """Fetch books and write one corpus and one widths file per language."""
    for stale in glob.glob(os.path.join(local_prefix, "*-corpus.text")) + glob.glob(
        os.path.join(local_prefix, "*-corpus.widths")
    ):
        os.remove(stale)

    corpora: dict[str, str] = {}
    for name in names:
        text = fetch_book(name, local_prefix)
        language = detect_language(text)
        corpus = corpora.setdefault(language, os.path.join(local_prefix, f"{language}-corpus.text"))
        print(f"{name}: {language}")
        with open(text, "rb") as src, open(corpus, "ab") as dst:
            dst.write(src.read())

    widths = []
    for corpus in sorted(corpora.values()):
        out = corpus[: -len(".text")] + ".widths"
        with open(corpus, "rb") as src, open(out, "wb") as dst:
            wcswidths.run(src, dst)
        widths.append(out)
    return widths


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Build Project Gutenberg width test corpora.")
    parser.add_argument("-C", "--directory", default="", help="where books and corpora are kept")
    parser.add_argument("books", nargs="*", default=CORPUS, help="Gutenberg book files, e.g. 2650-0")
    args = parser.parse_args(argv)

    if args.directory:
        os.makedirs(args.directory, exist_ok=True)
    try:
        widths = build_corpora(args.books, args.directory)
    except (LookupError, ValueError) as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)
    print(f"Done. Generated {', '.join(widths)}.")


if __name__ == "__main__":
    main()
