# tests/test_driver.py
from src.gridsnake.driver import TickDriver


def test_steps_only_when_interval_elapsed(playing):
    engine = playing()
    driver = TickDriver(engine, now_ms=0)
    assert not driver.poll(199)
    assert driver.poll(200)
    assert engine.head == (11, 10)
    assert not driver.poll(399)
    assert driver.poll(400)
    assert engine.tick == 2

def test_one_step_per_poll_when_late(playing):
    engine = playing()
    driver = TickDriver(engine, now_ms=0)
    assert driver.poll(10_000)
    assert engine.tick == 1

def test_new_speed_applies_to_next_tick(playing):
    engine = playing(food=[(11, 10), (0, 0)])
    driver = TickDriver(engine, now_ms=0)
    driver.poll(200)
    assert engine.speed_ms == 198
    assert not driver.poll(397)
    assert driver.poll(398)

def test_paused_engine_holds_the_clock(playing):
    engine = playing()
    driver = TickDriver(engine, now_ms=0)
    engine.toggle_pause()
    assert not driver.poll(5_000)
    engine.toggle_pause()
    assert not driver.poll(5_100)
    assert driver.poll(5_200)
    assert engine.tick == 1
