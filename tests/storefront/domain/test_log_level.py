import pytest
import structlog
from storefront.domain import storefront
from storefront.utils.logging import get_log_level


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, level",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
    )
    def test_level_follows_environment(self, clean_env, env, level):
        clean_env.setenv("PROTEAN_ENV", env)
        assert get_log_level() == level

    def test_defaults_to_development(self, clean_env):
        assert get_log_level() == "DEBUG"

    def test_unknown_environment(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "qa")
        assert get_log_level() == "INFO"

    def test_explicit_override(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "production")
        clean_env.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"


class TestDomainLogging:
    def test_importing_the_domain_configures_structlog(self):
        assert storefront.name == "storefront"
        assert structlog.is_configured()
