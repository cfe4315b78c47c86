"""Tests for the command line interface."""

import pytest

from fhgalaxy.cli import EXIT_CONFIGURATION_ERROR, EXIT_GENERATION_STALLED, build_parser, main
from fhgalaxy.engine import GenerationStalledError


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        """Test that the defaults describe the smallest galaxy."""
        args = build_parser().parse_args([])
        assert (args.radius, args.stars, args.species, args.seed) == (6, 12, 1, 0)
        assert not args.easier_mining
        assert not args.no_earth_like

    def test_flags(self):
        """Test the option flags."""
        args = build_parser().parse_args(
            ["--species", "15", "--derive-sizes", "--less-crowded", "--easier-mining", "--debug"]
        )
        assert args.species == 15
        assert args.derive_sizes and args.less_crowded and args.easier_mining and args.debug


class TestMain:
    """Test running the command."""

    def test_default_run(self, capsys):
        """Test creating the smallest galaxy."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "12 stars" in out
        assert "seed 1924085713" in out
        assert "1 potential home systems" in out
        assert out.count("\nstar ") == 12

    def test_suggest_values(self, capsys):
        """Test that suggested values are printed without creating a galaxy."""
        assert main(["--suggest-values", "--species", "15"]) == 0
        out = capsys.readouterr().out
        assert "90 stars are needed for a normal density galaxy" in out
        assert "a radius of 20 should be large enough" in out
        assert "galaxy:" not in out

    def test_suggest_values_less_crowded(self, capsys):
        """Test the less crowded suggestion."""
        assert main(["--suggest-values", "--species", "15", "--less-crowded"]) == 0
        out = capsys.readouterr().out
        assert "135 stars are needed for a less crowded galaxy" in out
        assert "a radius of 23" in out

    def test_derive_sizes(self, capsys):
        """Test creating a galaxy from the number of species alone."""
        assert main(["--derive-sizes", "--species", "2"]) == 0
        out = capsys.readouterr().out
        assert "galaxy: radius 11, 12 stars" in out

    @pytest.mark.parametrize(
        "argv",
        [
            ["--radius", "5"],
            ["--stars", "1001"],
            ["--species", "0"],
            ["--seed", "-1"],
            ["--radius", "50", "--stars", "12"],
            ["--suggest-values", "--species", "101"],
        ],
    )
    def test_configuration_errors(self, argv, capsys):
        """Test that invalid parameters exit with the configuration error status."""
        assert main(argv) == EXIT_CONFIGURATION_ERROR
        assert "error:" in capsys.readouterr().err

    def test_stalled(self, monkeypatch, capsys):
        """Test that a stalled run exits with its own status."""

        def stalled(*args, **kwargs):
            raise GenerationStalledError("star placement: no acceptable value after 1200 attempts")

        monkeypatch.setattr("fhgalaxy.cli.generate_galaxy", stalled)
        assert main([]) == EXIT_GENERATION_STALLED
        assert "try another seed" in capsys.readouterr().err
