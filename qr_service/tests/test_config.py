import pytest

from qr_overlay.config import Settings, load_settings


def test_defaults_from_empty_environment():
    assert load_settings({}) == Settings()
    assert Settings().white_level == 255
    assert Settings().decode_size == 1000


def test_values_from_environment():
    settings = load_settings(
        {
            "QR_OVERLAY_DECODE_SIZE": "640",
            "QR_OVERLAY_WHITE_LEVEL": "200",
            "QR_OVERLAY_MAX_UPLOAD_BYTES": "1024",
            "QR_OVERLAY_LOG_LEVEL": "debug",
        }
    )
    assert settings.decode_size == 640
    assert settings.white_level == 200
    assert settings.max_upload_bytes == 1024
    assert settings.log_level == "DEBUG"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("QR_OVERLAY_DECODE_SIZE", "800")
    assert load_settings().decode_size == 800


@pytest.mark.parametrize(
    "env",
    [
        {"QR_OVERLAY_DECODE_SIZE": "big"},
        {"QR_OVERLAY_DECODE_SIZE": "0"},
        {"QR_OVERLAY_WHITE_LEVEL": "0"},
        {"QR_OVERLAY_WHITE_LEVEL": "256"},
        {"QR_OVERLAY_MAX_UPLOAD_BYTES": "-1"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        load_settings(env)
