# Compiler
from .compiler import MergedResult, ParseResult, ProjectBuilder, multiparse, parse

# Errors
from .errors import (
    InvalidPathError,
    MergeConflictError,
    PathConflictError,
    ProjectBuildError,
    StartupBlockError,
)

# Filesystem
from .filesystem import (
    Directory,
    File,
    FileEntry,
    VirtualFileSystemTree,
    iter_files,
    tree_from_payload,
)

# Markdown
from .markdown import (
    CodeBlockNode,
    HeadingNode,
    LocalizedCodeBlock,
    MarkdownParser,
    ParserConfig,
    create_markdown_parser,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Compiler
    "MergedResult",
    "ParseResult",
    "ProjectBuilder",
    "multiparse",
    "parse",
    # Errors
    "InvalidPathError",
    "MergeConflictError",
    "PathConflictError",
    "ProjectBuildError",
    "StartupBlockError",
    # Filesystem
    "Directory",
    "File",
    "FileEntry",
    "VirtualFileSystemTree",
    "iter_files",
    "tree_from_payload",
    # Markdown
    "CodeBlockNode",
    "HeadingNode",
    "LocalizedCodeBlock",
    "MarkdownParser",
    "ParserConfig",
    "create_markdown_parser",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
