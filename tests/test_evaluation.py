import os
import sys
import json
from datetime import datetime

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
EVALUATION_DIR = os.path.join(REPO_ROOT, 'evaluation')
if EVALUATION_DIR not in sys.path:
	sys.path.insert(0, EVALUATION_DIR)

import evaluation


SAMPLE_OUTPUT = """
============================= test session starts ==============================
collected 4 items

tests/test_codec.py::test_abbccda_roundtrip PASSED                       [ 25%]
tests/test_codec.py::test_empty_input FAILED                             [ 50%]
tests/test_core.py::test_tree_depth SKIPPED (no reason)                  [ 75%]
tests/test_core.py::test_count_frequencies ERROR                         [100%]

=========================== short test summary info ============================
FAILED tests/test_codec.py::test_empty_input - AssertionError
"""


def test_parse_pytest_verbose_output():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	# the short summary line has no leading status column and is ignored
	assert [t["outcome"] for t in tests] == ["passed", "failed", "skipped", "error"]
	assert tests[0]["nodeid"] == "tests/test_codec.py::test_abbccda_roundtrip"
	assert tests[0]["name"] == "test_abbccda_roundtrip"


def test_summarize():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	assert evaluation.summarize(tests) == {
		"total": 4, "passed": 1, "failed": 1, "errors": 1, "skipped": 1,
	}


def test_generate_output_path():
	path = evaluation.generate_output_path(datetime(2024, 5, 6, 7, 8, 9))
	assert path.name == "report.json"
	assert path.parent.name == "07-08-09"
	assert path.parent.parent.name == "2024-05-06"


def test_build_report_failure_without_results():
	started = datetime(2024, 1, 1, 0, 0, 0)
	finished = datetime(2024, 1, 1, 0, 0, 2)
	report = evaluation.build_report("abcd1234", started, finished, None)
	assert report["success"] is False
	assert report["error"] == "Test suite failed"
	assert report["duration_seconds"] == 2.0
	assert "python_version" in report["environment"]


def test_main_writes_report(tmp_path, monkeypatch):
	fake = {
		"success": True,
		"exit_code": 0,
		"tests": [],
		"summary": {"total": 0, "passed": 0, "failed": 0, "errors": 0, "skipped": 0},
		"stdout": "",
		"stderr": "",
	}
	monkeypatch.setattr(evaluation, "run_pytest", lambda tests_dir, timeout=300: fake)
	output = tmp_path / "out" / "report.json"

	assert evaluation.main(["--output", str(output)]) == 0

	report = json.loads(output.read_text())
	assert report["success"] is True
	assert report["results"] == fake
	assert len(report["run_id"]) == 8
