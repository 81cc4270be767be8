import pytest

from twilio_rest.config import load_config

ENV_VARS = [
    "TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_API_KEY", "TWILIO_API_SECRET",
    "TWILIO_REGION", "TWILIO_EDGE", "USER_AGENT_EXTENSIONS", "MAX_RETRIES", "CONFIG_FILE",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    cfg = load_config()
    assert cfg.credentials() is None
    assert cfg.region is None
    assert cfg.max_retries == 3
    assert cfg.log_level == "INFO"


def test_env(clean_env):
    clean_env.setenv("TWILIO_ACCOUNT_SID", "AC1")
    clean_env.setenv("TWILIO_AUTH_TOKEN", "tok")
    clean_env.setenv("TWILIO_REGION", "")
    clean_env.setenv("USER_AGENT_EXTENSIONS", "my-app/1.0, cron")

    cfg = load_config()

    assert cfg.credentials() == ("AC1", "tok")
    assert cfg.region is None
    assert cfg.user_agent_extensions == ["my-app/1.0", "cron"]


def test_api_key_preferred(clean_env):
    clean_env.setenv("TWILIO_ACCOUNT_SID", "AC1")
    clean_env.setenv("TWILIO_AUTH_TOKEN", "tok")
    clean_env.setenv("TWILIO_API_KEY", "SK1")
    clean_env.setenv("TWILIO_API_SECRET", "secret")

    assert load_config().credentials() == ("SK1", "secret")


def test_yaml_file(clean_env, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "TWILIO_ACCOUNT_SID: AC9\nTWILIO_AUTH_TOKEN: tok9\nTWILIO_EDGE: sydney\nMAX_RETRIES: 0\n",
        encoding="utf-8",
    )
    clean_env.setenv("CONFIG_FILE", str(path))

    cfg = load_config()

    assert cfg.account_sid == "AC9"
    assert cfg.edge == "sydney"
    # at least one attempt is always made
    assert cfg.max_retries == 1
