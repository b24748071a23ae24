import pytest

from healthsync.cli import dashboard as cli
from healthsync.config import settings
from healthsync.data_access.json_store import JsonStore


def run(capsys, *argv):
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


def test_show_seeds_demo_data(capsys):
    code, out = run(capsys, "show")
    assert code == 0
    assert "Sleep: 6.2 hr   Water: 2 / 8   Steps: 3200" in out
    assert "Demo data loaded" in out
    assert JsonStore().get("hasDemo") is True


def test_log_steps_prints_insights(capsys):
    code, out = run(capsys, "log", "steps", "1200")
    assert code == 0
    assert "Try a 15-min walk" in out
    assert JsonStore().get("stepsToday") == 1200


def test_subscribe_twice(capsys):
    assert run(capsys, "subscribe", "sam@example.com") == (0, "Thanks for joining HealthSync+!\n")
    assert run(capsys, "subscribe", "sam@example.com") == (0, "Already subscribed.\n")
    assert run(capsys, "subscribe", "nope") == (1, "Enter a valid email.\n")
    assert JsonStore().get("subscribers") == ["sam@example.com"]


def test_bmi_command(capsys):
    code, out = run(capsys, "bmi", "--height", "175", "--weight", "70", "--activity", "1.2")
    assert code == 0
    assert "BMI: 22.9 — Normal" in out
    assert "2009 kcal" in out

    code, out = run(capsys, "bmi", "--height", "0", "--weight", "70")
    assert code == 1
    assert out.strip() == "Enter height and weight."


def test_glass_and_logs(capsys):
    run(capsys, "glass")
    code, out = run(capsys, "logs")
    assert code == 0
    assert "Logged a glass of water" in out.splitlines()[0]


def test_remind_uses_console_notifier(capsys):
    code, out = run(capsys, "remind", "--seconds", "0.05", "--interval", "0.02")
    assert code == 0
    assert "HealthSync+: Time to drink water" in out


def test_unknown_mood_is_rejected_by_parser(capsys):
    with pytest.raises(SystemExit):
        cli.main(["mood", "Ecstatic"])


def test_build_store_falls_back_to_json(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DATABASE_URL", "postgresql://nobody@127.0.0.1:1/none")

    class Boom:
        def __init__(self):
            raise RuntimeError("no database")

    import healthsync.data_access.postgres_store as postgres_store
    monkeypatch.setattr(postgres_store, "PostgresStore", Boom)

    assert isinstance(cli.build_store(), JsonStore)
    assert "Falling back to JSON" in settings.log_path.read_text()


@pytest.mark.parametrize("kind, value", [("steps", "nan"), ("water", "inf"), ("sleep", "-2"), ("steps", "lots")])
def test_log_rejects_non_finite_or_negative_values(capsys, kind, value):
    with pytest.raises(SystemExit) as exc:
        cli.main(["log", kind, value])
    assert exc.value.code == 2
    assert JsonStore().get("stepsToday") is None
