import pytest

from trexrunner.app import main
from trexrunner.core.audio import AudioError
from trexrunner.core.events import get_events
from trexrunner.core.resource_manager import clear_spritesheets


@pytest.fixture(autouse=True)
def clean():
    get_events().clear()
    clear_spritesheets()
    yield
    get_events().clear()
    clear_spritesheets()


def test_unknown_option_exits_with_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--assets" in capsys.readouterr().out


def test_missing_assets_raise_audio_error(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    with pytest.raises(AudioError):
        main(["--assets", str(tmp_path)])