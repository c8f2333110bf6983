import os
import subprocess
import sys

import cli

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CLI = os.path.join(ROOT, "cli.py")


def run_cli(*args, inp=None):
    return subprocess.run(
        [sys.executable, CLI, *args],
        input=inp,
        text=True,
        capture_output=True,
        cwd=ROOT,
        timeout=10,
    )


def write_script(tmp_path, source, name="prog.faysal"):
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_run_file(tmp_path):
    path = write_script(
        tmp_path,
        'hayde x hiyye ong_no_cap\neza betshil x lakan\n   3mol highkey "x is fr ong no cap"\ndeal\n',
    )
    proc = run_cli(path)
    if proc.returncode != 0:
        raise AssertionError(f"exited with {proc.returncode}\nSTDERR:\n{proc.stderr}")
    assert proc.stdout == "x is fr ong no cap\n"


def test_missing_file_exits_non_zero(tmp_path):
    proc = run_cli(str(tmp_path / "nope.faysal"))
    assert proc.returncode == 1
    assert "Error: cannot read" in proc.stderr


def test_empty_file_is_usage_error(tmp_path):
    path = write_script(tmp_path, "  \n")
    proc = run_cli(path)
    assert proc.returncode == 1
    assert "is empty" in proc.stderr
    assert "Usage:" in proc.stdout


def test_debug_prints_tokens_and_ast(tmp_path):
    path = write_script(tmp_path, "3mol 1 + 2\n")
    proc = run_cli(path, "--debug")
    assert proc.returncode == 0
    assert "Tokens: [PRINT, NUMBER(1.0), PLUS, NUMBER(2.0), EOF]" in proc.stdout
    assert "type: 'Print'" in proc.stdout
    assert proc.stdout.endswith("3\n")


def test_max_steps_stops_infinite_loop(tmp_path):
    path = write_script(tmp_path, "tool_ma ong_no_cap lakan deal\n")
    proc = run_cli(path, "--max-steps", "1000")
    assert proc.returncode == 1
    assert "Step limit exceeded" in proc.stderr


def test_unknown_option():
    proc = run_cli("--fast")
    assert proc.returncode == 1
    assert "Unknown option: --fast" in proc.stdout


def test_repl_keeps_state_between_lines():
    proc = run_cli(inp="hayde x hiyye 2\n\nx hiyye x + 5\n3mol x\nexit\n3mol 99\n")
    assert proc.returncode == 0
    assert "Faysal Lang REPL" in proc.stdout
    assert "7" in proc.stdout
    assert "99" not in proc.stdout


def test_repl_reports_parse_errors_and_continues():
    proc = run_cli(inp='deal\n3mol "still here"\n')
    assert proc.returncode == 0
    assert "Parse error" in proc.stderr
    assert "still here" in proc.stdout


def test_repl_in_process(monkeypatch, capsys):
    lines = iter(['3mol "hi"', "lowkey 1 + 1", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    cli.main([])
    out, err = capsys.readouterr()
    assert "hi\n" in out
    assert "[debug] 2" in err


def test_ast_to_dict_shapes():
    from lexer import tokenize
    from parser import parse

    tree = cli.ast_to_dict(parse(tokenize("tool_ma i < 2 lakan i hiyye -i deal")))
    assert tree == [
        {
            "type": "While",
            "condition": {
                "type": "Binary",
                "op": "<",
                "left": {"type": "Var", "name": "i"},
                "right": {"type": "Number", "value": 2.0},
            },
            "body": [
                {
                    "type": "Assign",
                    "name": "i",
                    "value": {"type": "Unary", "op": "-", "expr": {"type": "Var", "name": "i"}},
                }
            ],
        }
    ]


def test_repl_break_stops_rest_of_line(monkeypatch, capsys):
    lines = iter(['3mol "a" khalas 3mol "b"', '3mol "c"', "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    cli.main([])
    out, _ = capsys.readouterr()
    assert "a\n" in out
    assert "b\n" not in out
    assert "c\n" in out
