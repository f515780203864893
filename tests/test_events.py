from gridcrawl.engine.events import GameEvent
from gridcrawl.movement.direction import Direction


def test_move_events_in_order(one_room_session):
    session = one_room_session
    events = []
    session.add_listener(lambda e, s: events.append((e, s.player.grid_pos)))

    session.tick(Direction.DOWN, 0.02)
    for _ in range(10):
        session.tick(Direction.NONE, 0.02)

    assert events == [
        (GameEvent.MOVE_STARTED, (13, 12)),
        (GameEvent.MOVE_FINISHED, (13, 13)),
    ]


def test_failing_listener_does_not_break_tick(one_room_session):
    session = one_room_session

    def boom(event, s):
        raise RuntimeError("listener failure")

    session.add_listener(boom)
    session.tick(Direction.DOWN, 0.02)
    assert session.player.is_moving
