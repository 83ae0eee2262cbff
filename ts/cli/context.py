from __future__ import annotations

from dataclasses import dataclass

import typer

from ts.core.config import Config, load_config
from ts.core.errors import ErrorCode
from ts.core.result import Err
from ts.core.workspace import Workspace, detect_workspace
from ts.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()

    root_result = detect_workspace()
    if isinstance(root_result, Err):
        console.error(root_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    root = root_result.value

    config = Config()
    workspace = Workspace(root=root)
    if workspace.config_path.exists():
        config_result = load_config(workspace.config_path)
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value

    workspace = Workspace(root=root, config=config)
    paths_result = workspace.check_paths()
    if isinstance(paths_result, Err):
        console.error(paths_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(workspace=workspace, console=console)
