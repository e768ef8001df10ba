import pytest

import gitviz.__main__ as cli


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    monkeypatch.setenv("GITVIZ_LOG_DIR", str(tmp_path / "logs"))


class StubClient:
    configs = []

    def __init__(self, settings=None) -> None:
        self.settings = settings

    def visualize(self, config):
        StubClient.configs.append(config)
        return "<svg/>"


def test_render_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "GitvizClient", StubClient)
    output = tmp_path / "out.svg"

    code = cli.main(["render", "https://github.com/o/r", "--limit", "99", "--dark", "-o", str(output)])

    assert code == 0
    assert output.read_text(encoding="utf-8") == "<svg/>"
    config = StubClient.configs[-1]
    assert config.commit_limit == 50
    assert config.dark_mode is True
    assert config.branch == "main"


def test_render_reports_validation_errors(capsys):
    code = cli.main(["render", "https://bitbucket.org/a/b"])

    assert code == 1
    assert "Only GitHub and GitLab URLs are supported" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


class ExplodingClient(StubClient):
    def visualize(self, config):
        raise RuntimeError("renderer blew up")


def test_render_reports_unexpected_failures(monkeypatch, capsys):
    monkeypatch.setattr(cli, "GitvizClient", ExplodingClient)

    code = cli.main(["render", "https://github.com/o/r"])

    assert code == 1
    assert "renderer blew up" in capsys.readouterr().err
