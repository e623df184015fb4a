from falling_blocks.events import EventBus
from falling_blocks.events import names as ev
from falling_blocks.game import TetrominoType
from tests.helpers import make_game


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("test", handler)
    bus.unsubscribe("test", handler)
    bus.emit("test", value=1)
    assert calls == []


def test_emit_without_subscribers_is_silent():
    EventBus().emit("nobody_listens", value=1)


def test_hard_drop_publishes_lock_spawn_and_state():
    bus = EventBus()
    game = make_game(TetrominoType.O, TetrominoType.T, bus=bus)
    seen = []
    for name in (ev.EVENT_PIECE_LOCKED, ev.EVENT_PIECE_SPAWNED, ev.EVENT_STATE_CHANGED):
        bus.subscribe(name, lambda sender, _name=name, **kw: seen.append((_name, kw)))

    game.hard_drop()

    names = [name for name, _ in seen]
    assert names == [ev.EVENT_PIECE_LOCKED, ev.EVENT_PIECE_SPAWNED, ev.EVENT_STATE_CHANGED]
    locked = seen[0][1]
    assert locked["kind"] == TetrominoType.O
    assert sorted(locked["cells"]) == [(4, 18), (4, 19), (5, 18), (5, 19)]
    assert seen[1][1]["kind"] == TetrominoType.T
    snapshot = seen[2][1]["snapshot"]
    assert snapshot.piece_kind == TetrominoType.T
    assert snapshot.board[19, 4] == int(TetrominoType.O)


def test_rejected_intent_publishes_nothing():
    bus = EventBus()
    game = make_game(TetrominoType.O, bus=bus)
    for _ in range(4):
        game.move_left()
    changes = []
    bus.subscribe(ev.EVENT_STATE_CHANGED, lambda sender, **kw: changes.append(kw))
    assert not game.move_left()
    assert changes == []


def test_line_clear_level_up_and_game_over_events():
    bus = EventBus()
    game = make_game(TetrominoType.O, bus=bus)
    cleared, levels, over = [], [], []
    bus.subscribe(ev.EVENT_LINES_CLEARED, lambda sender, **kw: cleared.append(kw))
    bus.subscribe(ev.EVENT_LEVEL_UP, lambda sender, **kw: levels.append(kw["level"]))
    bus.subscribe(ev.EVENT_GAME_OVER, lambda sender, **kw: over.append(kw["score"]))

    game.score = 900
    for x in range(10):
        if x not in (4, 5):
            game.grid.grid[19, x] = 1
    game.hard_drop()
    assert cleared == [{"count": 1, "score": 1000, "level": 2}]
    assert levels == [2]

    # Stack O pieces in the centre until the spawn is blocked.
    while not game.game_over:
        game.hard_drop()
    assert over == [1000]
