# src/rmsm_kit/errors.py


class ProjectBuildError(ValueError):
    """A single code block or merge entry could not be applied.

    Never fatal: the compiler records ``str(error)`` as a diagnostic and
    moves on to the next block.
    """


class InvalidPathError(ProjectBuildError):
    def __init__(self) -> None:
        super().__init__("Invalid file path")


class PathConflictError(ProjectBuildError):
    def __init__(self, path: str, existing: str) -> None:
        self.path = path
        self.existing = existing
        super().__init__(f"{path} has already been defined as a {existing}")


class StartupBlockError(ProjectBuildError):
    pass


class MergeConflictError(ProjectBuildError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Conflicting definitions of {path} across documents: {reason}")
