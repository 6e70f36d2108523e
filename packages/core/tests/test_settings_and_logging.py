import logging

import pytest

from dbiam_core.config import DbiamSettings, DeployStage
from dbiam_core.logging_config import build_logging_config, configure_logging


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DBIAM_DEPLOY_STAGE", "test")
    monkeypatch.setenv("DBIAM_LOG_LEVEL", "debug")
    monkeypatch.setenv("DBIAM_MODULE_LOG_LEVELS", '{"dbiam.domain.person": "warning"}')
    monkeypatch.setenv("DBIAM_DEFAULT_PAGE_LIMIT", "25")

    settings = DbiamSettings(_env_file=None)

    assert settings.deploy_stage is DeployStage.TEST
    assert settings.log_level == "DEBUG"
    assert settings.module_log_levels == {"dbiam.domain.person": "warning"}
    assert settings.default_page_limit == 25
    assert settings.max_page_limit == 1000


def test_logging_config_has_module_levels() -> None:
    settings = DbiamSettings(
        _env_file=None,
        log_level="info",
        module_log_levels={"dbiam.specifications": "debug"},
    )

    config = build_logging_config(settings)

    assert config["loggers"]["dbiam"]["level"] == "INFO"
    assert config["loggers"]["dbiam.specifications"]["level"] == "DEBUG"


@pytest.fixture
def restore_loggers():
    names = ("", "dbiam", "dbiam.persistence")
    levels = {name: logging.getLogger(name).level for name in names}
    root_handlers = list(logging.getLogger().handlers)
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
    logging.getLogger().handlers[:] = root_handlers


def test_configure_logging_applies_levels(restore_loggers) -> None:
    configure_logging(
        DbiamSettings(_env_file=None, module_log_levels={"dbiam.persistence": "ERROR"})
    )
    assert logging.getLogger("dbiam.persistence").level == logging.ERROR
