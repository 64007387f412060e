"""Process invocation and desktop utility wrappers."""

from editkit.shell.process import ProcessResult, invoke, run_shell

__all__ = ["ProcessResult", "invoke", "run_shell"]
