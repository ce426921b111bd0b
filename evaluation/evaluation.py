#!/usr/bin/env python3
"""
Evaluation runner for the Huffman codec.

This evaluation script:
- Runs the pytest suite in tests/ in a subprocess
- Collects individual test results with pass/fail status
- Writes a JSON report with environment metadata

Run with:
    python evaluation/evaluation.py [--output PATH] [--tests DIR] [--timeout SECONDS]
"""
import argparse
import json
import os
import platform
import subprocess
import sys
import uuid
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
STATUS_WORDS = (" PASSED", " FAILED", " ERROR", " SKIPPED", " XFAIL", " XPASS")


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def _git(*args):
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    if result.returncode != 0:
        return "unknown"
    return result.stdout.strip()


def get_git_info():
    """Get git commit and branch information."""
    commit = _git("rev-parse", "HEAD")
    return {
        "git_commit": commit[:8] if commit != "unknown" else commit,
        "git_branch": _git("rev-parse", "--abbrev-ref", "HEAD"),
    }


def get_environment_info():
    """Collect environment information for the report."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "os_release": platform.release(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
        **get_git_info(),
    }


def parse_pytest_verbose_output(output):
    """Parse pytest verbose output to extract test results."""
    tests = []
    for line in output.splitlines():
        line = line.strip()
        # e.g. tests/test_codec.py::test_roundtrip_random_10kb PASSED [ 10%]
        if "::" not in line:
            continue
        for status_word in STATUS_WORDS:
            if status_word in line:
                nodeid = line.split(status_word)[0].strip()
                tests.append({
                    "nodeid": nodeid,
                    "name": nodeid.split("::")[-1],
                    "outcome": status_word.strip().lower(),
                })
                break
    return tests


def summarize(tests):
    outcomes = [t["outcome"] for t in tests]
    return {
        "total": len(tests),
        "passed": outcomes.count("passed"),
        "failed": outcomes.count("failed"),
        "errors": outcomes.count("error"),
        "skipped": outcomes.count("skipped"),
    }


def run_pytest(tests_dir, timeout=300):
    """
    Run pytest on tests_dir with the project root on PYTHONPATH.

    Returns:
        dict with success flag, exit code, per-test results and a summary
    """
    print(f"\n{'=' * 60}")
    print("RUNNING TESTS")
    print(f"{'=' * 60}")
    print(f"Tests directory: {tests_dir}")

    cmd = [sys.executable, "-m", "pytest", str(tests_dir), "-v", "--tb=short"]
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            env=env,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        print("❌ Test execution timed out")
        return {
            "success": False,
            "exit_code": -1,
            "tests": [],
            "summary": {"error": "Test execution timed out"},
            "stdout": "",
            "stderr": "",
        }

    tests = parse_pytest_verbose_output(result.stdout)
    summary = summarize(tests)
    print(
        f"\nResults: {summary['passed']} passed, {summary['failed']} failed, "
        f"{summary['errors']} errors, {summary['skipped']} skipped (total: {summary['total']})"
    )
    for test in tests:
        print(f"  {test['nodeid']}: {test['outcome']}")

    return {
        "success": result.returncode == 0,
        "exit_code": result.returncode,
        "tests": tests,
        "summary": summary,
        "stdout": result.stdout[-3000:],
        "stderr": result.stderr[-1000:],
    }


def generate_output_path(now=None):
    """Generate output path in format: evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    now = now or datetime.now()
    output_dir = PROJECT_ROOT / "evaluation" / now.strftime("%Y-%m-%d") / now.strftime("%H-%M-%S")
    return output_dir / "report.json"


def build_report(run_id, started_at, finished_at, results):
    success = bool(results and results.get("success"))
    return {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round((finished_at - started_at).total_seconds(), 6),
        "success": success,
        "error": None if success else "Test suite failed",
        "environment": get_environment_info(),
        "results": results,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the Huffman codec evaluation")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)",
    )
    parser.add_argument("--tests", type=str, default=str(PROJECT_ROOT / "tests"))
    parser.add_argument("--timeout", type=int, default=300)
    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()
    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = run_pytest(args.tests, timeout=args.timeout)
    report = build_report(run_id, started_at, datetime.now(), results)

    output_path = Path(args.output) if args.output else generate_output_path(started_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print("EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {report['duration_seconds']:.2f}s")
    print(f"Success: {'✅ YES' if report['success'] else '❌ NO'}")

    return 0 if report["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
