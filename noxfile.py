"""Nox sessions for card-sort-visualizer development tasks."""

import nox


SOURCES = ["algorithms", "engine", "sequence", "errors.py", "logging_setup.py", "main.py"]

nox.options.error_on_missing_interpreters = False


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff linting checks."""
    session.install("ruff")
    session.run("ruff", "check", *SOURCES, "tests")


@nox.session
def tests(session: nox.Session) -> None:
    """Run pytest in CI-friendly mode."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q")


@nox.session
def coverage(session: nox.Session) -> None:
    """Run coverage reporting."""
    session.install("-e", ".[dev]")
    session.install("coverage")
    session.run(
        "coverage", "run",
        "--source=algorithms,engine,sequence,errors,logging_setup,main",
        "-m", "pytest",
    )
    session.run("coverage", "report", "--fail-under=80", "-m")


@nox.session(name="tests-dev", venv_backend="none")
def tests_dev(session: nox.Session) -> None:
    """Fast local pytest using active venv."""
    session.run("python", "-m", "pytest", "-q", external=True)
