from unittest.mock import patch

from typer.testing import CliRunner

from petgallery.cli.petgallery_cli import app

runner = CliRunner()


class TestStandaloneCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Pet Gallery version:" in result.output

    def test_serve_passes_options(self):
        with patch("petgallery.dash.app.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "-p", "8080"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(host="127.0.0.1", port=8080, debug=None)

    def test_serve_debug(self):
        with patch("petgallery.dash.app.run") as mock_run:
            result = runner.invoke(app, ["serve", "--debug"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(host=None, port=None, debug=True)

    def test_gallery_group_is_registered(self):
        result = runner.invoke(app, ["gallery", "--help"])

        assert result.exit_code == 0
        assert "breeds" in result.output
        assert "images" in result.output
