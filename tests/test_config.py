import pytest

from tokengate.core.config import DEV_ACCESS_SECRET_KEY, DEV_REFRESH_SECRET_KEY, Settings


def test_defaults():
    settings = Settings(_env_file=None, ACCESS_SECRET_KEY="a-key", REFRESH_SECRET_KEY="r-key")
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.REFRESH_TOKEN_EXPIRE_DAYS == 7
    assert settings.ALGORITHM == "HS256"


@pytest.mark.parametrize("missing", ["ACCESS_SECRET_KEY", "REFRESH_SECRET_KEY"])
def test_missing_key_fails_outside_debug(missing):
    keys = {"ACCESS_SECRET_KEY": "a-key", "REFRESH_SECRET_KEY": "r-key", missing: ""}
    with pytest.raises(ValueError, match=missing):
        Settings(_env_file=None, DEBUG=False, **keys)


def test_debug_falls_back_to_dev_keys(caplog):
    with caplog.at_level("WARNING", logger="tokengate.core.config"):
        settings = Settings(_env_file=None, DEBUG=True, ACCESS_SECRET_KEY="", REFRESH_SECRET_KEY="")
    assert settings.ACCESS_SECRET_KEY == DEV_ACCESS_SECRET_KEY
    assert settings.REFRESH_SECRET_KEY == DEV_REFRESH_SECRET_KEY
    assert "insecure development key" in caplog.text


def test_keys_must_differ():
    with pytest.raises(ValueError, match="must be different"):
        Settings(_env_file=None, ACCESS_SECRET_KEY="same", REFRESH_SECRET_KEY="same")
