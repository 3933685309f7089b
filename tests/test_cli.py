from pathlib import Path

import pytest

from batch_scheduler.cli import main

TITLES = ["First-come, first-serve", "Shortest-job-first", "Priority", "Round-robin"]


def _workload(tmp_path: Path, content="1,5,0,2\n2,3,1,1\n3,8,2,3\n") -> str:
    p = tmp_path / "procs.csv"
    p.write_text(content)
    return str(p)


def test_prints_all_policies_in_order(tmp_path: Path, capsys):
    assert main([_workload(tmp_path)]) == 0
    out = capsys.readouterr().out

    banners = [line.strip() for line in out.splitlines() if line.strip() in TITLES]
    assert banners == TITLES
    assert out.count("Schedule table") == 3
    assert "Throughput" in out
    assert "Schedule table" not in out[out.index("Round-robin"):]


def test_plain_gantt(tmp_path: Path, capsys):
    assert main([_workload(tmp_path), "--plain", "-p", "fcfs"]) == 0
    out = capsys.readouterr().out
    assert "Gantt schedule" in out
    assert "Shortest-job-first" not in out


def test_parse_error_prints_nothing(tmp_path: Path, capsys):
    assert main([_workload(tmp_path, "1,5,0\n2,oops,1\n")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid burst duration" in captured.err


def test_missing_file(tmp_path: Path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "error opening" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["a.csv", "b.csv"]])
def test_argument_count(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_plain_gantt_is_not_wrapped(tmp_path: Path, capsys):
    content = "".join(f"{pid},1,0\n" for pid in range(1, 13))
    assert main([_workload(tmp_path, content), "--plain", "-p", "fcfs"]) == 0
    lines = capsys.readouterr().out.splitlines()

    cells = next(line for line in lines if line.startswith("|   1   |"))
    assert cells.count("|") == 13
    assert cells.endswith("|   12   |")
    marks = lines[lines.index(cells) + 1]
    assert marks == "\t".join(str(t) for t in range(12)) + "\t12"
