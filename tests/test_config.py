from cv_enhancer.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.min_section_chars == 10
    assert settings.max_upload_bytes == 5 * 1024 * 1024


def test_cors_origins_parsed_from_comma_list():
    settings = Settings(cors_origins="http://a.test, http://b.test,")
    assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]


def test_env_override(monkeypatch):
    monkeypatch.setenv("MIN_SECTION_CHARS", "5")
    monkeypatch.setenv("UPLOAD_DIR", "/tmp/cv-uploads")
    settings = Settings()
    assert settings.min_section_chars == 5
    assert settings.upload_dir == "/tmp/cv-uploads"
