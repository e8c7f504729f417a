# tests/test_config.py
import pytest
from gradebook import config
from gradebook.config import Settings
from gradebook.errors import ConfigError

def test_defaults():
    settings = Settings.from_env({})
    assert settings.capacity == config.MAX_STUDENTS
    assert settings.data_file == "students.csv"
    assert settings.report_file == "report.txt"
    assert settings.log_level == "WARNING"

def test_env_overrides():
    settings = Settings.from_env({
        "GRADEBOOK_MAX_STUDENTS": "5",
        "GRADEBOOK_DATA_FILE": "data/s.csv",
        "GRADEBOOK_REPORT_FILE": "out.txt",
        "GRADEBOOK_LOG_LEVEL": "debug",
    })
    assert settings == Settings(capacity=5, data_file="data/s.csv", report_file="out.txt", log_level="DEBUG")

@pytest.mark.parametrize("value", ["many", "0", "-3"])
def test_bad_capacity(value):
    with pytest.raises(ConfigError):
        Settings.from_env({"GRADEBOOK_MAX_STUDENTS": value})

def test_bad_log_level():
    with pytest.raises(ConfigError):
        Settings.from_env({"GRADEBOOK_LOG_LEVEL": "loud"})
