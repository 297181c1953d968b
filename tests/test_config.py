import pytest

from pydantic import ValidationError

from ghboard.config import Settings, split_statuses


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("URL", "USER_SESSION", "GITHUB_SESSION", "STATUSES", "USER", "DAYS", "LOG_LEVEL"):
        monkeypatch.delenv(f"GH_BOARD_{name}", raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.url == ""
        assert settings.user is None
        assert settings.days == 14
        assert settings.status_list() == []
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_BOARD_URL", "https://github.com/orgs/acme/projects/1")
        monkeypatch.setenv("GH_BOARD_USER_SESSION", "abc")
        monkeypatch.setenv("GH_BOARD_GITHUB_SESSION", "xyz")
        monkeypatch.setenv("GH_BOARD_USER", "alice")
        monkeypatch.setenv("GH_BOARD_DAYS", "7")

        settings = Settings()

        assert settings.url == "https://github.com/orgs/acme/projects/1"
        assert settings.user_session == "abc"
        assert settings.github_session == "xyz"
        assert settings.user == "alice"
        assert settings.days == 7

    def test_status_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_BOARD_STATUSES", "todo, doing,,done ")

        assert Settings().status_list() == ["todo", "doing", "done"]

    def test_reads_dotenv(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("GH_BOARD_STATUSES=todo\n")

        assert Settings().statuses == "todo"

    def test_log_level_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_BOARD_LOG_LEVEL", " debug")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_BOARD_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError, match="log_level"):
            Settings()


class TestSplitStatuses:
    def test_strips_and_drops_blanks(self) -> None:
        assert split_statuses(" todo,doing , ,done,") == ["todo", "doing", "done"]

    def test_empty(self) -> None:
        assert split_statuses("") == []
        assert split_statuses(" , ") == []
