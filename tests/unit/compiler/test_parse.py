from textwrap import dedent
from unittest.mock import ANY, Mock

import pytest

from rmsm_kit.compiler import ParseResult, parse
from rmsm_kit.filesystem.tree import Directory, File
from rmsm_kit.observability import names

NESTED_HEADINGS = dedent(
    """\
    # Level 1

    ## Level 2

    ### Level 3

    ## Hello

    ```ts #code-id
    console.log("hello");
    ```
    """
)


class TestFilesystem:
    def test_no_code_blocks_yields_empty_filesystem(self) -> None:
        result = parse("# Just a heading\n\nSome prose.\n")

        assert result == ParseResult()
        assert result.to_payload() == {"filesystem": {}}

    def test_explicit_file_path(self) -> None:
        result = parse("```ts file://a/b.ts\nCONTENT\n```\n")

        assert result.filesystem == {
            "a": Directory(children={"b.ts": File(contents="CONTENT")})
        }
        assert result.to_payload() == {
            "filesystem": {"a": {"directory": {"b.ts": {"file": {"contents": "CONTENT"}}}}}
        }

    def test_dot_prefixed_path_normalizes(self) -> None:
        result = parse("```txt file://./././test.txt\ntest content\n```\n")

        assert result.filesystem == {"test.txt": File(contents="test content")}

    def test_heading_based_names(self) -> None:
        content = dedent(
            """\
            # Heading

            ```ts #code-id
            first
            ```

            ```ts
            second
            ```

            ```ts
            third
            ```
            """
        )

        assert parse(content).filesystem == {
            "code-id.ts": File(contents="first"),
            "heading-1.ts": File(contents="second"),
            "heading-2.ts": File(contents="third"),
        }

    def test_heading_as_filename(self) -> None:
        content = '## package.json\n\n```json\n{"name": "demo"}\n```\n'

        assert parse(content).filesystem == {
            "package.json": File(contents='{"name": "demo"}')
        }

    def test_orphan_blocks_are_numbered(self) -> None:
        content = "```js\na\n```\n\n```js\nb\n```\n"

        assert parse(content).filesystem == {
            "1.js": File(contents="a"),
            "2.js": File(contents="b"),
        }

    def test_redeclared_file_last_write_wins(self) -> None:
        content = "```txt file://a.txt\nold\n```\n\n```txt file://a.txt\nnew\n```\n"

        result = parse(content)
        assert result.filesystem == {"a.txt": File(contents="new")}
        assert result.errors == ()

    def test_file_directory_conflict_is_reported(self) -> None:
        content = dedent(
            """\
            ```txt file://path/to/file.txt
            file content
            ```

            ```txt file://path/to/file.txt/nested.txt
            nested content
            ```
            """
        )

        result = parse(content)
        assert result.errors == ("path/to/file.txt has already been defined as a file",)
        assert result.filesystem == {
            "path": Directory(
                children={
                    "to": Directory(
                        children={"file.txt": File(contents="file content")}
                    )
                }
            )
        }

    def test_empty_path_is_reported_and_skipped(self) -> None:
        content = "```js file://././.\nsome code\n```\n\n```js file://ok.js\nok\n```\n"

        result = parse(content)
        assert result.errors == ("Invalid file path",)
        assert result.filesystem == {"ok.js": File(contents="ok")}

    def test_invalid_directive_is_reported_and_skipped(self) -> None:
        result = parse("```js rmsm://invalid\nsome code\n```\n")

        assert result.errors == ("Invalid rmsm protocol value: invalid",)
        assert result.filesystem == {}
        assert result.startup is None


class TestStartup:
    def test_startup_block_sets_script(self) -> None:
        result = parse("```bash rmsm://startup\nnpm install\n```\n")

        assert result.startup == "npm install"
        assert result.filesystem == {}
        assert result.to_payload() == {"filesystem": {}, "startup": "npm install"}

    def test_first_startup_block_wins(self) -> None:
        content = dedent(
            """\
            ```bash rmsm://startup
            npm install
            ```

            ```bash rmsm://startup
            yarn install
            ```
            """
        )

        result = parse(content)
        assert result.startup == "npm install"
        assert result.errors == ("Multiple startup blocks provided, using the first one",)

    def test_startup_must_be_bash(self) -> None:
        result = parse('```javascript rmsm://startup\nconsole.log("Hello")\n```\n')

        assert result.startup is None
        assert result.errors == ("Startup blocks must be bash scripts",)
        assert result.to_payload() == {
            "filesystem": {},
            "errors": ["Startup blocks must be bash scripts"],
        }

    def test_rejected_startup_does_not_block_a_later_one(self) -> None:
        content = "```sh rmsm://startup\nls\n```\n\n```bash rmsm://startup\npwd\n```\n"

        result = parse(content)
        assert result.startup == "pwd"
        assert result.errors == ("Startup blocks must be bash scripts",)


class TestIdFilter:
    @pytest.mark.parametrize("ids", [(), ("level-1",), ("hello",), ("code-id",)])
    def test_included(self, ids: tuple[str, ...]) -> None:
        assert "code-id.ts" in parse(NESTED_HEADINGS, *ids).filesystem

    @pytest.mark.parametrize("ids", [("level-2",), ("level-3",), ("missing",)])
    def test_excluded_after_scope_closes(self, ids: tuple[str, ...]) -> None:
        assert parse(NESTED_HEADINGS, *ids).filesystem == {}

    def test_filter_applies_before_naming(self) -> None:
        content = dedent(
            """\
            # Skipped

            ```ts
            a
            ```

            # Kept

            ```ts
            b
            ```

            ```ts
            c
            ```
            """
        )

        assert parse(content, "kept").filesystem == {
            "kept-1.ts": File(contents="b"),
            "kept-2.ts": File(contents="c"),
        }


class TestMetrics:
    def test_records_parse_metrics(self) -> None:
        hook = Mock()
        content = "```ts file://a.ts\na\n```\n\n```js rmsm://bogus\nb\n```\n"

        parse(content, metrics_hook=hook)

        hook.record_latency.assert_called_once_with(names.PARSE_DURATION, ANY)
        hook.increment.assert_any_call(names.CODE_BLOCKS_TOTAL, 2)
        hook.increment.assert_any_call(names.CODE_BLOCKS_INCLUDED, 2)
        hook.increment.assert_any_call(names.FILES_WRITTEN_TOTAL, 1)
        hook.increment.assert_any_call(names.PARSE_DIAGNOSTICS_TOTAL, 1)

    def test_custom_parser_is_used(self) -> None:
        parser = Mock()
        parser.parse.return_value.nodes = ()

        result = parse("ignored", parser=parser)

        parser.parse.assert_called_once_with("ignored")
        assert result == ParseResult()


def test_results_are_independent_between_calls() -> None:
    content = "```js\na\n```\n"

    assert parse(content).filesystem == parse(content).filesystem == {
        "1.js": File(contents="a")
    }
