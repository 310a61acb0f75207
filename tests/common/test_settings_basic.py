from livehls.common.settings import get_settings


def test_settings_defaults(monkeypatch):
    for var in ("PORT", "HOST", "PROBE__BIN", "PROBE__TIMEOUT_SEC"):
        monkeypatch.delenv(var, raising=False)

    cfg = get_settings()
    assert cfg.port == 8000
    assert cfg.probe.bin == "yt-dlp"
    assert cfg.probe.format == "best"
    assert cfg.probe.timeout_sec > 0


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9123")
    monkeypatch.setenv("PROBE__TIMEOUT_SEC", "5")
    monkeypatch.setenv("PROBE__BIN", "/opt/bin/yt-dlp")

    cfg = get_settings()
    assert cfg.port == 9123
    assert cfg.probe.timeout_sec == 5
    assert cfg.probe.bin == "/opt/bin/yt-dlp"


def test_settings_cached():
    assert get_settings() is get_settings()
