from rmsm_kit.errors import MergeConflictError
from rmsm_kit.filesystem.merge import merge_trees
from rmsm_kit.filesystem.tree import Directory, File


def test_disjoint_trees_union() -> None:
    merged, conflicts = merge_trees(
        [{"a.txt": File(contents="a")}, {"b.txt": File(contents="b")}]
    )

    assert merged == {"a.txt": File(contents="a"), "b.txt": File(contents="b")}
    assert conflicts == []


def test_directories_merge_recursively() -> None:
    merged, conflicts = merge_trees(
        [
            {"src": Directory(children={"a.ts": File(contents="a")})},
            {"src": Directory(children={"b.ts": File(contents="b")})},
        ]
    )

    assert merged == {
        "src": Directory(
            children={"a.ts": File(contents="a"), "b.ts": File(contents="b")}
        )
    }
    assert conflicts == []


def test_identical_files_do_not_conflict() -> None:
    merged, conflicts = merge_trees(
        [{"a.txt": File(contents="same")}, {"a.txt": File(contents="same")}]
    )

    assert merged == {"a.txt": File(contents="same")}
    assert conflicts == []


def test_different_files_keep_first() -> None:
    merged, conflicts = merge_trees(
        [{"a.txt": File(contents="first")}, {"a.txt": File(contents="second")}]
    )

    assert merged == {"a.txt": File(contents="first")}
    assert [str(c) for c in conflicts] == [
        "Conflicting definitions of a.txt across documents: file contents differ"
    ]


def test_file_directory_clash_keeps_merging_rest() -> None:
    merged, conflicts = merge_trees(
        [
            {"x": File(contents="file"), "keep.txt": File(contents="1")},
            {
                "x": Directory(children={"y.txt": File(contents="y")}),
                "also.txt": File(contents="2"),
            },
        ]
    )

    assert merged == {
        "x": File(contents="file"),
        "keep.txt": File(contents="1"),
        "also.txt": File(contents="2"),
    }
    assert len(conflicts) == 1
    assert isinstance(conflicts[0], MergeConflictError)
    assert conflicts[0].path == "x"
    assert "defined as a file and as a directory" in str(conflicts[0])


def test_nested_conflict_path_is_reported() -> None:
    _, conflicts = merge_trees(
        [
            {"a": Directory(children={"b": File(contents="1")})},
            {"a": Directory(children={"b": Directory()})},
        ]
    )

    assert [c.path for c in conflicts] == ["a/b"]


def test_inputs_are_not_mutated() -> None:
    first = {"src": Directory(children={"a.ts": File(contents="a")})}
    second = {"src": Directory(children={"b.ts": File(contents="b")})}

    merge_trees([first, second])

    assert first == {"src": Directory(children={"a.ts": File(contents="a")})}
