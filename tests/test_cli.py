import io

from exprtree.cli import main


def write_input(tmp_path, text):
    path = tmp_path / "expr.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_main_evaluates_and_writes_graphs(tmp_path, capsys):
    source = write_input(tmp_path, "add(2;3)")
    out = tmp_path / "out"
    status = main([str(source), "--output-dir", str(out)])
    assert status == 0
    assert "result = 5" in capsys.readouterr().out
    names = sorted(p.name for p in out.iterdir())
    assert names == ["bata.dot", "bata2.dot", "bata3.dot"]


def test_main_graph_stages(tmp_path):
    source = write_input(tmp_path, "add(2;3)")
    out = tmp_path / "out"
    main([str(source), "--output-dir", str(out)])
    before = (out / "bata2.dot").read_text(encoding="utf-8")
    after = (out / "bata3.dot").read_text(encoding="utf-8")
    assert "Data add |" in before
    assert before.count("subgraph cluster_A_left") == 2
    assert "subgraph cluster_A_left" not in after


def test_main_reads_variables_from_stdin(tmp_path, capsys, monkeypatch):
    source = write_input(tmp_path, "mul(x;y)")
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n5\n"))
    status = main([str(source), "--output-dir", str(tmp_path / "out")])
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("enter value:") == 2
    assert "result = 20" in out


def test_main_retries_bad_number(tmp_path, capsys, monkeypatch):
    source = write_input(tmp_path, "add(x;1)")
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n1\n"))
    status = main([str(source), "--output-dir", str(tmp_path / "out")])
    out = capsys.readouterr().out
    assert status == 0
    assert "Input error. Try again" in out
    assert "result = 2" in out


def test_main_missing_input_fails(tmp_path, capsys):
    status = main([str(tmp_path / "absent.txt"), "--output-dir", str(tmp_path / "out")])
    assert status == 1
    assert "does not open" in capsys.readouterr().err


def test_main_malformed_expression_fails(tmp_path, capsys):
    source = write_input(tmp_path, "add(1);")
    status = main([str(source), "--output-dir", str(tmp_path / "out")])
    assert status == 1
    assert capsys.readouterr().err.startswith("error:")