"""fn-adapter CLI 엔트리"""
import inspect
import os
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fn_adapter.config import AppConfig, PipelineDefinition, load_config
from fn_adapter.errors import error_to_dict
from fn_adapter.logger import LOG_LEVEL_ENV, setup_logger
from fn_adapter.result import Success, Failure
from fn_adapter.runner import run_pipeline
from fn_adapter.steps import BUILTIN_STEPS

console = Console()

app = typer.Typer(
    name="fn-adapter",
    help="fn-adapter - 고차 함수 어댑터와 파이프라인 실행기",
    add_completion=False,
)


def _load_config_or_exit(path: Optional[Path], as_json: bool = False) -> AppConfig:
    match load_config(path):
        case Success(config):
            setup_logger(level=os.getenv(LOG_LEVEL_ENV) or config.logging.level)
            return config
        case Failure(error):
            _print_error(error, as_json)
            raise typer.Exit(1)


def _print_error(error, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps({"error": error_to_dict(error)}, ensure_ascii=False))
    else:
        console.print(f"[bold red]Error: {escape(error.message)}[/bold red]")


@app.callback()
def main_callback() -> None:
    """fn-adapter CLI"""
    pass


@app.command()
def version() -> None:
    """버전 정보 출력"""
    from fn_adapter import __version__
    console.print(f"[bold blue]fn-adapter[/bold blue] version [green]{__version__}[/green]")


@app.command("steps")
def list_steps() -> None:
    """내장 단계 목록 출력"""
    table = Table(title="내장 단계")
    table.add_column("이름", style="cyan")
    table.add_column("설명", style="green")
    table.add_column("async", style="yellow")

    for step in BUILTIN_STEPS.values():
        is_async = "yes" if inspect.iscoroutinefunction(step.fn) else ""
        table.add_row(step.name, step.description, is_async)

    console.print(table)
    console.print("\n[dim]module:attr 형태로 임의의 callable도 지정 가능[/dim]")


@app.command("pipelines")
def list_pipelines(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="설정 파일 경로"),
) -> None:
    """설정된 파이프라인 목록 출력"""
    config = _load_config_or_exit(config_path)

    table = Table(title="파이프라인")
    table.add_column("이름", style="cyan")
    table.add_column("모드", style="yellow")
    table.add_column("단계", style="green")
    table.add_column("설명")

    for name in config.pipelines.list_names():
        definition = config.pipelines.available[name]
        label = f"{name} (default)" if name == config.pipelines.default else name
        table.add_row(label, definition.mode, " -> ".join(definition.steps), definition.description)

    console.print(table)


@app.command("run")
def run(
    value: str = typer.Argument(..., help="파이프라인 입력값"),
    pipeline: Optional[str] = typer.Option(None, "--pipeline", "-p", help="설정된 파이프라인 이름"),
    steps: Optional[list[str]] = typer.Option(None, "--step", "-s", help="임시 파이프라인 단계 (반복 가능)"),
    async_mode: bool = typer.Option(False, "--async", help="pipe_async로 실행"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="설정 파일 경로"),
    as_json: bool = typer.Option(False, "--json", help="JSON으로 출력"),
) -> None:
    """파이프라인을 VALUE에 적용"""
    config = _load_config_or_exit(config_path, as_json)

    if steps:
        definition = PipelineDefinition(steps=steps)
    else:
        name = pipeline or config.pipelines.default
        definition = config.pipelines.get_pipeline(name)
        if definition is None:
            if as_json:
                typer.echo(json.dumps({"error": {
                    "code": "PIPELINE_NOT_FOUND", "pipeline": name,
                    "message": f"Unknown pipeline {name!r}",
                }}))
            else:
                console.print(f"[bold red]Error: Unknown pipeline {name!r}[/bold red]")
                console.print(f"[dim]사용 가능: {', '.join(config.pipelines.list_names())}[/dim]")
            raise typer.Exit(1)

    if async_mode:
        definition = definition.model_copy(update={"mode": "async"})

    try:
        result = run_pipeline(definition, value, config.empty_pipeline)
    except Exception as e:
        if as_json:
            typer.echo(json.dumps({"error": {"code": "STEP_FAILED", "type": type(e).__name__, "message": str(e)}}))
        else:
            console.print(f"[bold red]Step failed: {type(e).__name__}: {escape(str(e))}[/bold red]")
        raise typer.Exit(2)

    match result:
        case Success(output):
            if as_json:
                typer.echo(json.dumps({"result": output}, default=str, ensure_ascii=False))
            else:
                console.print(repr(output), markup=False, highlight=False)
        case Failure(error):
            _print_error(error, as_json)
            raise typer.Exit(1)


def cli() -> None:
    """CLI 진입점"""
    app()


if __name__ == "__main__":
    cli()
