"""Tests for importsweep.passes.sort: import block detection and ordering."""

from __future__ import annotations

import textwrap

import pytest

from importsweep.passes.sort import collation_key, import_sort_key, sort_import_statements


class TestImportSortKey:
    def test_single_quotes(self):
        assert import_sort_key("import a from './a';") == "./a"

    def test_double_quotes(self):
        assert import_sort_key('import { b } from "react";') == "react"

    def test_multiline_block(self):
        assert import_sort_key("import {\n  b,\n} from 'm';") == "m"

    def test_no_from_clause(self):
        assert import_sort_key("import './styles.css';") == ""


class TestSortImportStatements:
    def test_lexicographic_order_includes_dot_prefix(self):
        text = textwrap.dedent("""\
            import { z } from './zeta';
            import React from 'react';
            import { a } from './alpha';

            console.log(z, a, React);
        """)
        expected = textwrap.dedent("""\
            import { a } from './alpha';
            import { z } from './zeta';
            import React from 'react';

            console.log(z, a, React);
        """)
        assert sort_import_statements(text) == expected

    def test_blocks_without_from_sort_first(self):
        text = "import React from 'react';\nimport './styles.css';\n"
        assert sort_import_statements(text) == (
            "import './styles.css';\nimport React from 'react';\n"
        )

    def test_multiline_block_kept_intact(self):
        text = textwrap.dedent("""\
            import {
              c,
              b,
            } from './b';
            import a from './a';
        """)
        expected = textwrap.dedent("""\
            import a from './a';
            import {
              c,
              b,
            } from './b';
        """)
        assert sort_import_statements(text) == expected

    def test_imports_hoisted_above_other_lines(self):
        text = textwrap.dedent("""\
            import b from './b';
            const x = 1;
            import a from './a';
            export default x;
        """)
        expected = textwrap.dedent("""\
            import a from './a';
            import b from './b';

            const x = 1;
            export default x;
        """)
        assert sort_import_statements(text) == expected

    def test_other_lines_keep_their_order(self):
        text = "import b from './b';\n// one\nfoo();\n// two\nimport a from './a';\n"
        result = sort_import_statements(text)
        rest = result.split("\n")[3:]
        assert rest == ["// one", "foo();", "// two", ""]

    def test_no_imports_unchanged(self):
        text = "const a = 1;\n\nexport default a;\n"
        assert sort_import_statements(text) == text

    def test_already_sorted_unchanged(self):
        text = "import a from './a';\nimport b from './b';\n\nrun(a, b);\n"
        assert sort_import_statements(text) == text

    def test_idempotent(self):
        text = textwrap.dedent("""\
            import b from './b';
            const x = 1;
            import a from './a';
            import {
              y,
            } from 'y';
            export default x;
        """)
        once = sort_import_statements(text)
        assert sort_import_statements(once) == once

    def test_imports_only_file(self):
        text = "import b from './b';\nimport a from './a';"
        assert sort_import_statements(text) == "import a from './a';\nimport b from './b';"

    def test_equal_keys_keep_original_order(self):
        text = "import { b } from 'm';\nimport { a } from 'm';\n"
        assert sort_import_statements(text) == text

    def test_statements_sharing_a_line_stay_together(self):
        text = "import z from './z'; import y from './y';\nimport a from './a';\n"
        assert sort_import_statements(text) == (
            "import a from './a';\nimport z from './z'; import y from './y';\n"
        )

    def test_keep_prologue(self):
        text = textwrap.dedent("""\
            'use client';

            import b from './b';
            import a from './a';

            render(a, b);
        """)
        expected = textwrap.dedent("""\
            'use client';

            import a from './a';
            import b from './b';

            render(a, b);
        """)
        assert sort_import_statements(text, keep_prologue=True) == expected

    def test_prologue_moves_without_keep_prologue(self):
        text = "// header\nimport b from './b';\nimport a from './a';\n"
        assert sort_import_statements(text) == (
            "import a from './a';\nimport b from './b';\n\n// header\n"
        )

    def test_typescript_grammar(self):
        text = "import type { B } from './b';\nimport { A } from './a';\nlet v = <A>b;\n"
        result = sort_import_statements(text, "typescript")
        assert result.startswith("import { A } from './a';\nimport type { B } from './b';\n")

    def test_case_insensitive_with_punctuation_first(self):
        text = textwrap.dedent("""\
            import b from './Button';
            import a from './api';
            import u from './_utils';
        """)
        expected = textwrap.dedent("""\
            import u from './_utils';
            import a from './api';
            import b from './Button';
        """)
        assert sort_import_statements(text) == expected

    def test_crlf_line_endings_kept(self):
        text = "import b from './b';\r\nimport a from './a';\r\nfoo();\r\n"
        result = sort_import_statements(text)
        assert result == "import a from './a';\r\nimport b from './b';\r\n\r\nfoo();\r\n"
        assert sort_import_statements(result) == result

    def test_crlf_last_line_without_newline_moved(self):
        text = "import b from './b';\r\nfoo();\r\nimport a from './a';"
        assert sort_import_statements(text) == (
            "import a from './a';\r\nimport b from './b';\r\n\r\nfoo();"
        )


class TestCollationKey:
    @pytest.mark.parametrize("lower, higher", [
        ("./_utils", "./api"),
        ("./api", "./Button"),
        ("./alpha", "./zeta"),
        ("./zeta", "react"),
        ("../x", "./x"),
        ("./x", "@/x"),
        ("./9", "./a"),
        ("", "./a"),
        ("./button", "./Button"),
        ("./resume", "./résumé"),
        ("./résumé", "./resumes"),
    ])
    def test_ordering(self, lower, higher):
        assert collation_key(lower) < collation_key(higher)

    def test_equal_strings_equal_keys(self):
        assert collation_key("./Api") == collation_key("./Api")
