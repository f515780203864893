from gridcrawl.engine.loop import EngineConfig, GameEngine
from gridcrawl.engine.session import DungeonSession
from gridcrawl.input import ScriptedInput
from gridcrawl.movement.direction import Direction


def make_engine(segments, **config):
    session = DungeonSession(seed=11)
    session.new_dungeon()
    return GameEngine(session, ScriptedInput(segments), EngineConfig(**config))


def test_engine_runs_exact_steps():
    engine = make_engine([], tick_rate=0, max_steps=5)
    engine.run()
    assert engine.step == 5
    assert engine.running is False


def test_engine_update_and_stop():
    engine = make_engine([], tick_rate=0, max_steps=2)
    engine.start()
    engine.update(0.016)
    engine.update(0.016)
    assert engine.step == 2
    assert engine.running is False
    # Updates after stop are ignored
    engine.update(0.016)
    assert engine.step == 2


def test_engine_feeds_input_into_session():
    engine = make_engine([(Direction.NONE, 1.0)], tick_rate=0, max_steps=3, fixed_dt=0.02)
    session = engine.session
    x, y = session.player.grid_pos
    # Walk toward whichever neighbour is open
    for direction in (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP):
        tx, ty = session.player.target_for(direction)
        if session.grid.is_walkable(tx, ty):
            engine.input_provider = ScriptedInput([(direction, 1.0)])
            break
    engine.run()
    assert session.player.is_moving
    assert session.player.progress > 0.0
    assert session.player.grid_pos == (x, y)
