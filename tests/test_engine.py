import logging
from unittest import mock

import pygame
import pytest

from ecosim.engine import GameEngine
from ecosim.structs import Vector2D


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def engine():
    game = GameEngine("Test", 1200.0, 600.0)
    game.initialize()
    yield game
    game.shutdown()


def test_new_engine_is_not_running():
    game = GameEngine("Test", 100.0, 100.0)
    assert game.is_running is False
    assert game.is_paused is False
    assert game.time_scale == 1.0


def test_initialize_populates_world(engine):
    assert engine.is_running is True
    assert engine.window.is_initialized is True
    assert engine.ecosystem.entity_count == 20 + 5 + 30
    assert engine.ecosystem.food_count == 20


def test_space_toggles_pause(engine):
    engine.handle_input(pygame.K_SPACE)
    assert engine.is_paused is True
    engine.handle_input(pygame.K_SPACE)
    assert engine.is_paused is False


def test_speed_keys(engine):
    engine.handle_input(pygame.K_UP)
    assert engine.time_scale == pytest.approx(1.5)
    engine.handle_input(pygame.K_DOWN)
    engine.handle_input(pygame.K_DOWN)
    assert engine.time_scale == pytest.approx(1.0 / 1.5)


def test_food_key_adds_food(engine):
    before = engine.ecosystem.food_count
    engine.handle_input(pygame.K_f)
    assert engine.ecosystem.food_count == before + 10


def test_reset_key_restores_initial_world(engine):
    engine.handle_input(pygame.K_f)
    engine.handle_input(pygame.K_r)
    assert engine.ecosystem.food_count == 20
    assert engine.ecosystem.entity_count == 20 + 5 + 30


def test_escape_stops(engine):
    engine.handle_input(pygame.K_ESCAPE)
    assert engine.is_running is False


def test_unknown_key_changes_nothing(engine):
    engine.handle_input(pygame.K_a)
    assert engine.is_running is True
    assert engine.is_paused is False
    assert engine.time_scale == 1.0


def test_update_advances_world(engine):
    engine.update(0.01)
    assert engine.ecosystem.day_cycle == 1


def test_update_reports_statistics(engine, caplog):
    with caplog.at_level(logging.INFO, logger="ecosim.engine"):
        engine.update(2.0)
    assert any("Herbivores" in record.getMessage() for record in caplog.records)


def test_render_draws_food(engine):
    engine.ecosystem.initialize(0, 0, 0)
    engine.ecosystem.add_food(Vector2D(600.0, 300.0))
    engine.render()
    assert tuple(engine.window.surface.get_at((600, 300))) == (0, 255, 0, 255)


def test_handle_events_quit(engine):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        engine.handle_events()
    assert engine.is_running is False


def test_handle_events_keydown(engine):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    with mock.patch("pygame.event.get", return_value=[event]):
        engine.handle_events()
    assert engine.is_paused is True


def test_run_stops_after_quit(engine):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        engine.run()
    assert engine.is_running is False
    assert engine.ecosystem.day_cycle == 1


def test_run_paused_does_not_step(engine):
    engine.handle_input(pygame.K_SPACE)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        engine.run()
    assert engine.ecosystem.day_cycle == 0


def test_shutdown_closes_window():
    game = GameEngine("Test", 100.0, 100.0)
    game.initialize()
    game.shutdown()
    assert game.is_running is False
    assert game.window.is_initialized is False