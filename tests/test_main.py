import io

from sigma.__main__ import main, run


def test_run_prints_values_and_errors():
    out, err = io.StringIO(), io.StringIO()
    status = run(["(+ 1 2)", "", "(begin)", "y"], None, out, err)
    assert status == 1
    assert out.getvalue() == "3\nnil\n"
    assert err.getvalue() == "error: undefined variable: y\n"


def test_run_success_status():
    out, err = io.StringIO(), io.StringIO()
    assert run(["(ncr 5 2)"], None, out, err) == 0
    assert out.getvalue() == "10\n"
    assert err.getvalue() == ""


def test_main_with_arguments(capsys):
    assert main(["(* 6 7)"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_lax_arity(capsys):
    assert main(["--lax-arity", "((lambda (a) a) 1 2)"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 1 1)\n\n(mean 1 3)\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n2.0\n"
