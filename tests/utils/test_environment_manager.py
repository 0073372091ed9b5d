from unittest.mock import patch
from vdf_proofs.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs


def test_defaults(monkeypatch):
    monkeypatch.delenv("PARALLELISM_DIVISOR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEFAULT_BIT_LENGTH", raising=False)

    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "WARNING"
    assert EnvironmentManager.get_int(EnvironmentVariables.DEFAULT_BIT_LENGTH) == 2048


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_BIT_LENGTH", "1024")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert EnvironmentManager.get_int(EnvironmentVariables.DEFAULT_BIT_LENGTH) == 1024
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "debug"


def test_override_default(monkeypatch):
    monkeypatch.delenv("DEFAULT_BIT_LENGTH", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.DEFAULT_BIT_LENGTH, 512) == 512


def test_invalid_int_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PARALLELISM_DIVISOR", "many")
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2


def test_num_parallel_processes(monkeypatch):
    monkeypatch.setenv("PARALLELISM_DIVISOR", "4")
    with patch("multiprocessing.cpu_count", return_value=8):
        assert SystemSpecs.get_num_parallel_processes() == 2


def test_num_parallel_processes_at_least_one(monkeypatch):
    monkeypatch.setenv("PARALLELISM_DIVISOR", "0")
    with patch("multiprocessing.cpu_count", return_value=1):
        assert SystemSpecs.get_num_parallel_processes() == 1
