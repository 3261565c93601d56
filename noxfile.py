import nox

nox.options.default_venv_backend = "uv"
nox.options.sessions = ["lint", "typecheck", "tests"]


@nox.session
def lint(session: nox.Session) -> None:
    """Check code style and imports."""
    session.install("ruff")
    session.run("ruff", "check", "creator_context", "tests")
    session.run("ruff", "format", "--check", "creator_context", "tests")


@nox.session
def format(session: nox.Session) -> None:
    """Auto-format code and fix lint issues."""
    session.install("ruff")
    session.run("ruff", "format", "creator_context", "tests")
    session.run("ruff", "check", "--fix", "creator_context", "tests")


@nox.session
def typecheck(session: nox.Session) -> None:
    """Run type checker."""
    session.install("ty", ".")
    session.run("ty", "check", "creator_context")


@nox.session(python=["3.11", "3.12"])
def tests(session: nox.Session) -> None:
    """Run the test suite."""
    session.install(".[test]")
    session.run("pytest", "--cov=creator_context", *session.posargs)
