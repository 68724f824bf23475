#!/usr/bin/env python3
#
# Generate wcwidth.awk by splicing the width data produced by
# generate_width_data.py into an AWK template. The line of the template that
# contains "# XXX" is replaced with the ranges as a string literal.
#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import argparse
import os
import sys
from typing import Iterable, Iterator

FOLD_WIDTH = 71
PLACEHOLDER = "# XXX"
INDENT = "    "


def table_literal(lines: Iterable[str], fold_width: int = FOLD_WIDTH) -> list[str]:
    """Render range lines as a continued AWK string literal.

    Ranges of width -1 are left out since that is the lookup default.
    """
    kept = [line.strip() for line in lines if line.strip() and not line.startswith("-1 ")]
    joined = ",".join(kept)
    chunks = [joined[i : i + fold_width] for i in range(0, len(joined), fold_width)] or [""]
    out = [f'{INDENT}"{chunk}" \\' for chunk in chunks[:-1]]
    out.append(f'{INDENT}"{chunks[-1]}"')
    return out


def render_template(template: Iterable[str], insert: list[str]) -> Iterator[str]:
    for line in template:
        if PLACEHOLDER in line:
            for ins in insert:
                yield ins + "\n"
        else:
            yield line


def generate(template_path: str, width_data_path: str, output_path: str):
    try:
        with open(width_data_path, encoding="ascii") as data:
            insert = table_literal(data)
        with open(template_path, encoding="utf-8") as template:
            lines = list(render_template(template, insert))
    except OSError as e:
        sys.stderr.write(f"Cannot load input: {e}\n")
        sys.exit(1)

    tmp = output_path + ".tmp"
    with open(tmp, "w", encoding="utf-8", newline="\n") as f:
        f.writelines(lines)
    os.replace(tmp, output_path)
    print(f"{output_path}: file generated successfully")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Embed width data into an AWK template.")
    parser.add_argument("--template", default="template.awk")
    parser.add_argument("--width-data", default="width-data")
    parser.add_argument("--output", default="wcwidth.awk")
    args = parser.parse_args(argv)
    generate(args.template, args.width_data, args.output)


if __name__ == "__main__":
    main()
