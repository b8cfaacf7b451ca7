"""Tests for configuration loading."""

from pathlib import Path

from gitpulse.config import DATA_DIR, Config, load_config


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.data_dir == DATA_DIR
        assert config.cache_ttl_seconds == 300
        assert config.graphql_url == "https://api.github.com/graphql"
        assert config.keyring_service == "gitpulse"
        assert config.keyring_user == "github_token"
        assert config.request_timeout is None

    def test_cache_dir_is_under_data_dir(self, tmp_path):
        assert Config(data_dir=tmp_path).cache_dir == tmp_path / "cache"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.conf") == Config()

    def test_parses_values(self, tmp_path):
        conf = tmp_path / "gitpulse.conf"
        conf.write_text(
            "\n".join(
                [
                    "# GitPulse settings",
                    f'DATA_DIR = "{tmp_path}/data"  # quoted with comment',
                    "CACHE_TTL_SECONDS = 60 # one minute",
                    "USER_AGENT = 'my-widget'",
                    "REQUEST_TIMEOUT = 2.5",
                    "not a setting",
                    "UNKNOWN_KEY = ignored",
                ]
            )
        )

        config = load_config(conf)

        assert config.data_dir == Path(f"{tmp_path}/data")
        assert config.cache_ttl_seconds == 60
        assert config.user_agent == "my-widget"
        assert config.request_timeout == 2.5

    def test_invalid_number_keeps_default(self, tmp_path):
        conf = tmp_path / "gitpulse.conf"
        conf.write_text("CACHE_TTL_SECONDS = soon\nREQUEST_TIMEOUT = never\n")

        config = load_config(conf)

        assert config.cache_ttl_seconds == 300
        assert config.request_timeout is None
