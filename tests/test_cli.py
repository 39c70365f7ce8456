"""
Tests for the command line entry point.
"""

import io

import pytest


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        from termmath.cli import create_parser

        args = create_parser().parse_args(["x^2"])

        assert args.expression == "x^2"
        assert args.input_format == "latex"
        assert args.lines is False
        assert args.examples is None

    def test_input_format_choices(self):
        from termmath.cli import create_parser

        args = create_parser().parse_args(["-f", "expr", "x**2"])
        assert args.input_format == "expr"

        with pytest.raises(SystemExit):
            create_parser().parse_args(["-f", "asciimath", "x"])

    def test_version(self, capsys):
        from termmath import __version__
        from termmath.cli import main

        with pytest.raises(SystemExit):
            main(["--version"])

        assert __version__ in capsys.readouterr().out


class TestMain:
    """Test rendering from the command line."""

    def test_render_latex(self, capsys):
        from termmath.cli import main

        assert main([r"\frac{a}{b}"]) == 0
        assert capsys.readouterr().out == "a\n─\nb\n"

    def test_render_mathml(self, capsys):
        from termmath.cli import main

        assert main(["-f", "mathml", "<math><msub><mi>x</mi><mn>0</mn></msub></math>"]) == 0
        assert capsys.readouterr().out == "x₀\n"

    def test_render_expression(self, capsys):
        from termmath.cli import main

        assert main(["-f", "expr", "x**2"]) == 0
        assert capsys.readouterr().out == "x²\n"

    def test_no_unicode_scripts(self, capsys):
        from termmath.cli import main

        assert main(["--no-unicode-scripts", "x^2"]) == 0
        assert capsys.readouterr().out == " 2\nx\n"

    def test_fixed_width_lines(self, capsys):
        from termmath.cli import main

        assert main(["--lines", r"\frac{123}{x}"]) == 0
        assert capsys.readouterr().out.splitlines() == ["123", "───", " x "]

    def test_show_mathml(self, capsys):
        from termmath.cli import main

        assert main(["--show-mathml", "x"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<math")
        assert out.endswith("\nx\n")

    def test_stdin(self, capsys, monkeypatch):
        from termmath.cli import main

        monkeypatch.setattr("sys.stdin", io.StringIO("x^2\n"))

        assert main(["-"]) == 0
        assert capsys.readouterr().out == "x²\n"

    def test_conversion_error(self, capsys):
        from termmath.cli import main

        assert main([r"\frac{a}{b"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: LaTeX conversion error:")
        assert "Try:" in err
        assert err.count("\n") == 1

    def test_structure_error(self, capsys):
        from termmath.cli import main

        assert main(["-f", "mathml", "<math><mfrac><mi>a</mi></mfrac></math>"]) == 1
        assert "Invalid math structure" in capsys.readouterr().err

    def test_missing_expression(self, capsys):
        from termmath.cli import main

        assert main([]) == 1
        assert "No expression given" in capsys.readouterr().err

    def test_examples(self, capsys):
        from termmath.cli import main

        assert main(["--examples", "euler"]) == 0
        out = capsys.readouterr().out
        assert "═══ Euler's Identity ═══" in out
        assert "Total: 1 examples" in out

    def test_examples_no_match(self, capsys):
        from termmath.cli import main

        assert main(["--examples", "nothing-like-this"]) == 0
        assert "No examples found" in capsys.readouterr().out

    def test_clipboard_unavailable(self, capsys, monkeypatch):
        from termmath import cli

        monkeypatch.setattr(cli, "get_clipboard_text", lambda: None)

        assert cli.main(["--from-clipboard"]) == 1
        assert "clipboard" in capsys.readouterr().err

    def test_clipboard_text(self, capsys, monkeypatch):
        from termmath import cli

        monkeypatch.setattr(cli, "get_clipboard_text", lambda: " x_1 ")

        assert cli.main(["--from-clipboard"]) == 0
        assert capsys.readouterr().out == "x₁\n"

    def test_log_file(self, tmp_path, capsys):
        from termmath.cli import main

        log_file = tmp_path / "termmath.log"
        assert main(["--verbose", "--log-file", str(log_file), "x"]) == 0
        assert log_file.exists()
        assert "Rendered" in log_file.read_text()
