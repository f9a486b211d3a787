class PfpError(Exception):
    """
    Base class for all errors raised by pfp.

    The command-line interface catches this class at the top level, prints the
    message to stderr and exits with a non-zero status.
    """

    pass


class ConfigError(PfpError):
    """
    Exception raised when the configuration cannot be read or is invalid.

    Example:
        >>> error = ConfigError("Parse config: Expecting value")
        >>> str(error)
        'Parse config: Expecting value'
    """

    pass


class PatternError(ConfigError):
    """
    Exception raised when a marker or ignore pattern cannot be compiled.

    Invalid patterns are reported before any directory is scanned, so a typo in
    the configuration never silently matches nothing.

    Attributes:
        pattern (str): The offending pattern.
        reason (str): Description of the compilation failure.

    Example:
        >>> error = PatternError("[a-", "unterminated character set")
        >>> str(error)
        "Invalid pattern '[a-': unterminated character set"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the pattern and the compiler's message.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Why compilation failed.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class DescendError(PfpError):
    """
    Exception raised when a directory tree cannot be classified.

    This is raised for directory entries whose names are not valid UTF-8. Such a
    name cannot be turned into a path string safely, so the whole scan is
    aborted instead of returning a partial result.

    Example:
        >>> error = DescendError("entry is not utf8 string in /srv/data")
        >>> str(error)
        'entry is not utf8 string in /srv/data'
    """

    pass


class EnvVarError(PfpError):
    """
    Exception raised when a path references an environment variable that is not set.

    Attributes:
        name (str): Name of the missing variable.

    Example:
        >>> error = EnvVarError("PROJECTS")
        >>> str(error)
        'Env var error: environment variable not found: PROJECTS'
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Env var error: environment variable not found: {name}")


class EmptyPickError(PfpError):
    """
    Exception raised when the selector returns no selection.

    This happens when the user cancels the selector (e.g., presses Escape).

    Example:
        >>> str(EmptyPickError())
        'Empty pick!'
    """

    def __init__(self, message: str = "Empty pick!") -> None:
        super().__init__(message)


class CommandError(PfpError):
    """
    Exception raised when an external program (fzf or tmux) cannot be run.

    Attributes:
        command (str): The program that failed to start.

    Example:
        >>> error = CommandError("fzf", "No such file or directory")
        >>> str(error)
        'Failed to run fzf: No such file or directory'
    """

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        super().__init__(f"Failed to run {command}: {reason}")
