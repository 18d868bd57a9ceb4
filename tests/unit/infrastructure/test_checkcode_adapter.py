import subprocess
from unittest.mock import MagicMock, patch

from matlab_style_linter.domain.entities import CheckerResult
from matlab_style_linter.infrastructure.adapters.checkcode_adapter import (
    CheckcodeAdapter,
    NullComplexityChecker,
)

RUN = "matlab_style_linter.infrastructure.adapters.checkcode_adapter.subprocess.run"

MLINT_OUTPUT = """========== demo.m ==========
L 1 (C 10-14): CABE: The McCabe cyclomatic complexity of 'demo' is 4.
L 7 (C 3): NOPRT: Terminate statement with semicolon to suppress output.
L 12 (C 10-17): CABE: The McCabe cyclomatic complexity of 'helper' is 3.
"""


def _completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_check_sums_mccabe_values() -> None:
    adapter = CheckcodeAdapter()
    with patch(RUN, return_value=_completed(stderr=MLINT_OUTPUT)) as mock_run:
        result = adapter.check("demo.m")

    assert result.score == 7
    assert result.advisories == (
        "L 1 (C 10-14): The McCabe cyclomatic complexity of 'demo' is 4.",
        "L 7 (C 3): Terminate statement with semicolon to suppress output.",
        "L 12 (C 10-17): The McCabe cyclomatic complexity of 'helper' is 3.",
    )
    args, kwargs = mock_run.call_args
    assert args[0] == ["mlint", "-cyc", "-id", "demo.m"]
    assert kwargs["check"] is False


def test_check_reads_stdout_too() -> None:
    adapter = CheckcodeAdapter(command=["checkcode-wrapper"])
    with patch(RUN, return_value=_completed(stdout=MLINT_OUTPUT)) as mock_run:
        result = adapter.check("demo.m")
    assert result.score == 7
    assert mock_run.call_args.args[0] == ["checkcode-wrapper", "demo.m"]


def test_nonzero_exit_still_parsed() -> None:
    adapter = CheckcodeAdapter()
    with patch(RUN, return_value=_completed(stderr=MLINT_OUTPUT, returncode=1)):
        assert adapter.check("demo.m").score == 7


def test_legacy_digit_sum_counts_every_number() -> None:
    adapter = CheckcodeAdapter(legacy_digit_sum=True)
    advisories = ["L 2 (C 1-3): Value 12 exceeds 3.", "L 4 (C 5): No digits here."]
    assert adapter.score(advisories) == 15


def test_no_advisories_scores_zero() -> None:
    adapter = CheckcodeAdapter()
    with patch(RUN, return_value=_completed()):
        assert adapter.check("clean.m") == CheckerResult()


def test_missing_checker_warns_once() -> None:
    telemetry = MagicMock()
    adapter = CheckcodeAdapter(telemetry=telemetry)
    with patch(RUN, side_effect=FileNotFoundError("mlint")):
        first = adapter.check("a.m")
        second = adapter.check("b.m")

    assert first == second == CheckerResult()
    telemetry.warning.assert_called_once()
    assert "mlint" in telemetry.warning.call_args.args[0]


def test_timeout_warns_and_scores_zero() -> None:
    telemetry = MagicMock()
    adapter = CheckcodeAdapter(telemetry=telemetry, timeout=5)
    with patch(RUN, side_effect=subprocess.TimeoutExpired(cmd="mlint", timeout=5)):
        assert adapter.check("slow.m").score == 0
    assert "timed out after 5s" in telemetry.warning.call_args.args[0]


def test_warning_falls_back_to_logging(caplog) -> None:
    adapter = CheckcodeAdapter()
    with patch(RUN, side_effect=PermissionError("denied")):
        with caplog.at_level("WARNING"):
            assert adapter.check("a.m").score == 0
    assert "Code checker failed on a.m" in caplog.text


def test_null_checker() -> None:
    assert NullComplexityChecker().check("anything.m") == CheckerResult()
