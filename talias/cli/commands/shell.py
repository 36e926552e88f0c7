from __future__ import annotations

from enum import Enum

import typer

_POSIX_TEMPLATE = """\
{name}() {{
  local cmd
  cmd="$(command talias "$@")" || return $?
  if [ -n "$cmd" ]; then
    eval "$cmd"
  fi
}}
"""

_FISH_TEMPLATE = """\
function {name}
    set -l cmd (command talias $argv | string collect)
    or return $status
    if test -n "$cmd"
        eval $cmd
    end
end
"""


class Shell(str, Enum):
    bash = "bash"
    zsh = "zsh"
    fish = "fish"


def wrapper_script(shell: Shell, name: str) -> str:
    """Shell function that runs talias and evaluates what it prints."""
    template = _FISH_TEMPLATE if shell is Shell.fish else _POSIX_TEMPLATE
    return template.format(name=name)


def register_shell_command(app: typer.Typer) -> None:
    @app.command("shell-init")
    def shell_init(
        shell: Shell = typer.Argument(Shell.bash, help="Target shell."),
        name: str = typer.Option("t", "--name", "-n", help="Name of the wrapper function."),
    ) -> None:
        """Print a wrapper function; add `eval "$(talias shell-init)"` to your rc file."""
        if not name.replace("_", "").replace("-", "").isalnum():
            typer.echo(f"Invalid function name: {name}", err=True)
            raise typer.Exit(2)
        typer.echo(wrapper_script(shell, name), nl=False)
