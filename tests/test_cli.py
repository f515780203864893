import pytest

from gridcrawl.__main__ import main


def test_headless_run_prints_map_with_player(capsys):
    code = main(["--headless", "--seed", "7", "--tick-rate", "0", "--script", "right:0.3,down:0.3"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("@") == 1
    assert "rooms=" in out


def test_headless_bad_script_exit_code(capsys):
    assert main(["--headless", "--script", "sideways:1"]) == 2


def test_gui_falls_back_when_arcade_missing(monkeypatch, capsys):
    import gridcrawl.app as app

    monkeypatch.setattr(app, "_arcade_available", lambda: False)
    assert main(["--gui", "--seed", "1", "--max-steps", "3"]) == 0
    assert "steps=3" in capsys.readouterr().out


def test_auto_honours_headless_env(monkeypatch, capsys):
    monkeypatch.setenv("GRIDCRAWL_HEADLESS", "1")
    assert main(["--seed", "1", "--max-steps", "2"]) == 0
    assert "steps=2" in capsys.readouterr().out


def test_tick_rate_flag_drives_headless_engine(monkeypatch, capsys):
    import gridcrawl.app as app

    configs = []
    real_engine = app.GameEngine

    def capture(session, provider, config):
        configs.append(config)
        return real_engine(session, provider, config)

    monkeypatch.setattr(app, "GameEngine", capture)
    assert main(["--headless", "--seed", "1", "--max-steps", "2", "--tick-rate", "30"]) == 0
    assert "steps=2" in capsys.readouterr().out
    assert configs[0].tick_rate == 30.0
    assert configs[0].fixed_dt == pytest.approx(1 / 30)


def test_tick_rate_from_settings_file(tmp_path, monkeypatch, capsys):
    import gridcrawl.app as app

    path = tmp_path / "settings.toml"
    path.write_text("[window]\ntick_rate = 0\n", encoding="utf-8")
    configs = []
    real_engine = app.GameEngine
    monkeypatch.setattr(app, "GameEngine", lambda *a: configs.append(a[2]) or real_engine(*a))
    assert main(["--headless", "--seed", "1", "--max-steps", "2", "--settings", str(path)]) == 0
    assert configs[0].tick_rate == 0.0
    assert configs[0].fixed_dt == pytest.approx(app.HEADLESS_DT)
