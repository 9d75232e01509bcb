from unittest import mock

import pygame
import pytest

from ecosim.main import main


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.quit()


def test_main_runs_until_quit(capsys):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        status = main([])
    out = capsys.readouterr().out
    assert status == 0
    assert "=== CONTRÔLES ===" in out
    assert "Simulation terminée" in out


def test_main_closes_display_on_exit():
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        status = main([])
    assert status == 0
    assert pygame.display.get_init() is False


def test_main_reports_initialisation_failure(capsys):
    with mock.patch("pygame.display.set_mode", side_effect=pygame.error("boom")):
        status = main([])
    captured = capsys.readouterr()
    assert status == -1
    assert "Impossible d'initialiser le moteur de jeu" in captured.err
    assert "Moteur initialisé avec succès" not in captured.out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2