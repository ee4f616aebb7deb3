import pytest

from blackhole import main as entry
from blackhole.config.settings import Settings, get_settings
from blackhole.core.state import State


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        high_score_path=tmp_path / "highscore.json",
        log_file=tmp_path / "blackhole.log",
    )


def test_parse_args():
    args = entry.parse_args(["--variant", "classic", "--seed", "5", "--debug"])
    assert args.variant == "classic"
    assert args.seed == 5
    assert args.debug
    assert not args.list_variants


def test_list_variants(capsys):
    assert entry.main(["--list-variants"]) == 0
    out = capsys.readouterr().out.split()
    assert "classic" in out
    assert "shielded" in out


def test_build_session(settings):
    (settings.high_score_path).write_text('{"BlackholeJumperHighScore": "8.5"}')
    session = entry.build_session(settings, "classic", seed=3)

    assert session.config.name == "classic"
    assert session.best == 8.5
    assert session.state == State.LOADING
    assert session.canvas.width == 400


def test_unknown_variant_exits_with_error(monkeypatch, tmp_path):
    monkeypatch.setenv("BLACKHOLE_LOG_FILE", str(tmp_path / "blackhole.log"))
    monkeypatch.setenv("BLACKHOLE_HIGH_SCORE_PATH", str(tmp_path / "highscore.json"))
    get_settings.cache_clear()
    try:
        assert entry.main(["--variant", "nope"]) == 2
    finally:
        get_settings.cache_clear()
