import pathlib
import sys
from dataclasses import dataclass
from typing import Any, List

import pytest

# Ensure the project root (with the src package) is on the Python path for tests
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@dataclass
class FunctionalRun:
    feature: str
    details: str


class ExecutionLog:
    def __init__(self) -> None:
        self.entries: List[FunctionalRun] = []

    def record(self, feature: str, details: str) -> None:
        self.entries.append(FunctionalRun(feature=feature, details=details))


def pytest_configure(config: pytest.Config) -> None:
    config.execution_log = ExecutionLog()


@pytest.fixture(scope="session")
def execution_log(pytestconfig: pytest.Config) -> ExecutionLog:
    return pytestconfig.execution_log


@pytest.fixture
def sample_manuscript() -> str:
    return "\n".join(
        [
            r"\documentclass[11pt]{article}",
            r"\usepackage{graphicx}",
            r"\title{On Counting}",
            r"\author{A. Writer}",
            r"\begin{document}",
            r"\maketitle",
            r"\begin{abstract}",
            r"We count words. % not this",
            r"\end{abstract}",
            r"\section{Introduction}",
            r"Counting is \emph{hard} \cite{knuth,lamport}.",
            r"See Figure~\ref{fig:one}.",
            "",
            r"\begin{figure}",
            r"\includegraphics{plot}",
            r"\caption{A plot}",
            r"\label{fig:one}",
            r"\end{figure}",
            r"Inline math $x^2$ is skipped \cite{knuth}.",
            r"\begin{thebibliography}",
            r"\bibitem{knuth} Knuth.",
            r"\end{thebibliography}",
            r"\end{document}",
        ]
    )


def pytest_terminal_summary(
    terminalreporter: Any, exitstatus: int
) -> None:  # type: ignore[override]
    log: ExecutionLog | None = getattr(terminalreporter.config, "execution_log", None)
    if not log or not log.entries:
        return

    terminalreporter.write_sep("=", "Functional scenario highlights")
    for entry in log.entries:
        terminalreporter.write_line(f"- {entry.feature}: {entry.details}")
