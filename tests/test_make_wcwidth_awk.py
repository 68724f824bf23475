#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import pytest

import make_wcwidth_awk

WIDTH_DATA = "-1 0 31\n1 32 126\n-1 127 159\n0 768 879\n"

TEMPLATE = """BEGIN {
    WCWIDTH_TABLE = \\
    # XXX
}
"""


def test_table_literal_drops_unprintable_ranges():
    lines = make_wcwidth_awk.table_literal(WIDTH_DATA.splitlines(True))
    assert lines == ['    "1 32 126,0 768 879"']


def test_table_literal_folds():
    lines = make_wcwidth_awk.table_literal(WIDTH_DATA.splitlines(True), fold_width=5)
    assert lines == [
        '    "1 32 " \\',
        '    "126,0" \\',
        '    " 768 " \\',
        '    "879"',
    ]


def test_table_literal_empty():
    assert make_wcwidth_awk.table_literal(["-1 0 1114111\n"]) == ['    ""']


def test_render_template():
    out = "".join(make_wcwidth_awk.render_template(TEMPLATE.splitlines(True), ['    "a" \\', '    "b"']))
    assert out == 'BEGIN {\n    WCWIDTH_TABLE = \\\n    "a" \\\n    "b"\n}\n'


def test_generate(tmp_path, capsys):
    (tmp_path / "template.awk").write_text(TEMPLATE)
    (tmp_path / "width-data").write_text(WIDTH_DATA)
    output = tmp_path / "wcwidth.awk"

    make_wcwidth_awk.main(
        [
            "--template", str(tmp_path / "template.awk"),
            "--width-data", str(tmp_path / "width-data"),
            "--output", str(output),
        ]
    )

    assert output.read_text() == 'BEGIN {\n    WCWIDTH_TABLE = \\\n    "1 32 126,0 768 879"\n}\n'
    assert not (tmp_path / "wcwidth.awk.tmp").exists()
    assert capsys.readouterr().out == f"{output}: file generated successfully\n"


def test_generate_missing_input(tmp_path, capsys):
    (tmp_path / "template.awk").write_text(TEMPLATE)
    output = tmp_path / "wcwidth.awk"
    with pytest.raises(SystemExit) as exc:
        make_wcwidth_awk.generate(str(tmp_path / "template.awk"), str(tmp_path / "width-data"), str(output))
    assert exc.value.code == 1
    assert "Cannot load input" in capsys.readouterr().err
    assert not output.exists()
