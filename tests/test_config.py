import logging

import pytest

from seqalgs import config as sa_config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "SEQALGS_BACKEND",
        "SEQALGS_LOG_LEVEL",
        "SEQALGS_RFIND_DEPTH",
        "SEQALGS_SEED",
        "SEQALGS_CROSS_CHECK",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_cache():
    sa_config.reset_runtime_config_cache()
    yield
    sa_config.reset_runtime_config_cache()


def test_runtime_config_defaults(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)

    runtime = sa_config.runtime_config()

    assert runtime.backend == "list"
    assert runtime.log_level == "INFO"
    assert runtime.rfind_depth == 256
    assert runtime.seed is None
    assert runtime.cross_check is True


def test_runtime_config_is_cached(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    first = sa_config.runtime_config()
    monkeypatch.setenv("SEQALGS_BACKEND", "numpy")

    assert sa_config.runtime_config() is first

    sa_config.reset_runtime_config_cache()
    assert sa_config.runtime_config().backend == "numpy"


def test_backend_override_is_normalised(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_BACKEND", "  NumPy ")

    assert sa_config.runtime_config().backend == "numpy"


def test_invalid_backend(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_BACKEND", "invalid-backend")

    with pytest.raises(ValueError, match="Unsupported backend"):
        sa_config.runtime_config()


def test_seed_parsing(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_SEED", "123")

    assert sa_config.runtime_config().seed == 123


def test_invalid_seed(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_SEED", "abc")

    with pytest.raises(ValueError, match="Invalid integer value 'abc'"):
        sa_config.runtime_config()


@pytest.mark.parametrize("raw", ["0", "-4"])
def test_rfind_depth_must_be_positive(monkeypatch: pytest.MonkeyPatch, raw: str):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_RFIND_DEPTH", raw)

    with pytest.raises(ValueError, match="must be positive"):
        sa_config.runtime_config()


@pytest.mark.parametrize(
    "raw, expected",
    [("0", False), ("off", False), ("yes", True), ("maybe", True)],
)
def test_cross_check_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_CROSS_CHECK", raw)

    assert sa_config.runtime_config().cross_check is expected


def test_log_level_applied_to_package_logger(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_LOG_LEVEL", "warning")

    runtime = sa_config.runtime_config()

    assert runtime.log_level == "WARNING"
    assert logging.getLogger("seqalgs").level == logging.WARNING


def test_describe_runtime_snapshot(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_RFIND_DEPTH", "32")

    snapshot = sa_config.describe_runtime()

    assert snapshot == {
        "backend": "list",
        "log_level": "INFO",
        "rfind_depth": 32,
        "seed": None,
        "cross_check": True,
    }


def test_rfind_depth_budget_reads_only_its_variable(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_BACKEND", "invalid-backend")
    monkeypatch.setenv("SEQALGS_RFIND_DEPTH", "12")

    assert sa_config.rfind_depth_budget() == 12


@pytest.mark.parametrize("raw", ["0", "deep"])
def test_rfind_depth_budget_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SEQALGS_RFIND_DEPTH", raw)

    assert sa_config.rfind_depth_budget() == 256
