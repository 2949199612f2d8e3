"""Command-line interface for animation-validator.

Provides ``check`` (report lost bindings) and ``fix`` (repair them and save
the modified clip files) over a JSON scene document.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from animation_validator import __version__
from animation_validator.errors import SceneFormatError
from animation_validator.report import format_report
from animation_validator.scene import LoadedScene, SceneLoader
from animation_validator.session import ValidatorSession


class ClickProgress:
    """ProgressReporter for stderr.

    On a terminal a single status line is rewritten in place; otherwise each
    update is written as a plain line.
    """

    def __init__(self) -> None:
        self._tty = click.get_text_stream("stderr").isatty()
        self._active = False

    def display(self, content: str, progress: float) -> None:
        if not self._tty:
            click.echo(f"{progress:>4.0%} {content}", err=True)
            return
        click.echo(f"\r{progress:>4.0%} {content}\033[K", nl=False, err=True)
        self._active = True

    def clear(self) -> None:
        if self._active:
            click.echo("\r\033[K", nl=False, err=True)
        self._active = False


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes through ``click.echo`` to the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("animation_validator")
    package_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    if not any(isinstance(h, ClickEchoHandler) for h in package_logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _load(scene_file: Path) -> LoadedScene:
    try:
        return SceneLoader().load(scene_file)
    except (SceneFormatError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc


def _open_session(scene: LoadedScene, progress: ClickProgress | None = None) -> ValidatorSession:
    session = ValidatorSession.open(scene.selection, assets=scene.assets, progress=progress)
    if session is None:
        raise click.ClickException(
            "Nothing to validate: the scene needs an animator with a controller"
        )
    return session


@click.group()
@click.version_option(version=__version__, prog_name="animation-validator")
@click.option("-v", "--verbose", is_flag=True, help="Log each path rewrite and saved file")
def main(verbose: bool) -> None:
    """Find and repair animation bindings whose object path no longer resolves."""
    _configure_logging(verbose)


@main.command()
@click.argument("scene_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(scene_file: Path) -> None:
    """Report lost bindings in every clip of SCENE_FILE's controller.

    Exits with status 1 when any clip has lost bindings.
    """
    session = _open_session(_load(scene_file))
    try:
        click.echo(format_report(session.reports))
        ok = session.has_no_error
    finally:
        session.close()
    sys.exit(0 if ok else 1)


@main.command()
@click.argument("scene_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--clip",
    "clip_names",
    multiple=True,
    help="Repair only the named clip (repeatable). Default: all clips.",
)
def fix(scene_file: Path, clip_names: tuple[str, ...]) -> None:
    """Repair lost bindings by unique object name and save the clip files.

    Exits with status 1 when bindings remain unresolved.
    """
    scene = _load(scene_file)
    session = _open_session(scene, progress=ClickProgress())
    try:
        if clip_names:
            known = {r.clip_name for r in session.reports}
            unknown = sorted(set(clip_names) - known)
            if unknown:
                raise click.BadParameter(
                    f"unknown clip(s): {', '.join(unknown)}", param_hint="--clip"
                )
            targets = [r for r in session.reports if r.clip_name in clip_names]
            for report in targets:
                if not report.has_no_error:
                    session.fix_clip(report)
            scene.assets.save_assets()
        else:
            targets = session.reports
            session.fix_all()

        click.echo(format_report(targets))
        ok = all(r.has_no_error for r in targets)
    finally:
        session.close()
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
