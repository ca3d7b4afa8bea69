"""Nox sessions for PlayDeck development tasks."""

from __future__ import annotations

from pathlib import Path

import sys
import nox


ROOT = Path(__file__).parent

nox.options.error_on_missing_interpreters = False


def _has_mypy_config() -> bool:
    if (ROOT / "mypy.ini").is_file():
        return True
    pyproject = ROOT / "pyproject.toml"
    if pyproject.is_file():
        return "[tool.mypy]" in pyproject.read_text(encoding="utf-8")
    return False


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff linting and formatting checks."""
    session.install("ruff")
    session.run("ruff", "check", ".")
    session.run("ruff", "format", "--check", ".")


@nox.session
def tests(session: nox.Session) -> None:
    """Run pytest in CI-friendly mode."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q")


@nox.session
def typecheck(session: nox.Session) -> None:
    """Run mypy when a config is present."""
    if not _has_mypy_config():
        session.skip("mypy config not found")
    session.install("-e", ".")
    session.install("mypy")
    session.run("mypy", "src/playdeck")


@nox.session
def build(session: nox.Session) -> None:
    """Build sdist and wheel artifacts."""
    session.install("build")
    session.run("python", "-m", "build")


@nox.session
def coverage(session: nox.Session) -> None:
    """Run coverage reporting."""
    session.install("-e", ".[dev]")
    session.install("coverage")
    session.run("coverage", "run", "--source=playdeck", "-m", "pytest")
    session.run("coverage", "report", "--fail-under=80", "-m")


# --------------------------------------------------
#                  LOCAL DEV TESTING
# --------------------------------------------------


@nox.session(name="tests-dev", venv_backend="none")
def tests_dev(session: nox.Session) -> None:
    """Fast local pytest using active venv."""
    session.run("python", "-m", "pytest", "-q", external=True)


@nox.session(name="local-dev", venv_backend="none")
def local_dev(session: nox.Session) -> None:
    """Run the fast local dev checks."""
    session.run(sys.executable, "-m", "nox", "-s", "lint", "tests-dev", external=True)
