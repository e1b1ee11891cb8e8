from __future__ import annotations

from evoviz.config import DEFAULT_CORS_ORIGINS, Settings, load_settings, normalize_settings


def test_defaults_without_environment() -> None:
    assert load_settings({}) == Settings()


def test_environment_overrides() -> None:
    s = load_settings(
        {
            "EVOVIZ_GENERATIONS": "25",
            "EVOVIZ_FITNESS_MAX": "1.5",
            "EVOVIZ_LOG_LEVEL": "debug",
            "EVOVIZ_CORS_ORIGINS": "http://a.test, http://b.test",
        }
    )
    assert s.generations == 25
    assert s.fitness_max == 1.5
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ["http://a.test", "http://b.test"]


def test_bad_values_fall_back() -> None:
    s = normalize_settings({"generations": "many", "fitness_max": "-3", "log_level": "loud", "cors_origins": " , "})
    assert s.generations == 10
    assert s.fitness_max == 100.0
    assert s.log_level == "INFO"
    assert s.cors_origins == DEFAULT_CORS_ORIGINS


def test_generation_count_is_clamped() -> None:
    assert normalize_settings({"generations": 0}).generations == 1
    assert normalize_settings({"generations": 10_000}).generations == 200


def test_log_file_from_environment() -> None:
    assert load_settings({"EVOVIZ_LOG_FILE": " /tmp/evoviz.log "}).log_file == "/tmp/evoviz.log"
    assert load_settings({"EVOVIZ_LOG_FILE": ""}).log_file is None
