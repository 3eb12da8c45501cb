import pytest

from glade.core.builder import WorldBuilder
from glade.core.game import Game, GameState, SessionTerminated
from glade.core.location import Location, LocationExit
from glade.core.player import Player
from glade.core.turn_outcome import TurnOutcome
from glade.core.world import UnknownLocationError, World
from glade.messages import InventoryMessage, LocationMessage
from glade.terminal import ScriptedIO


def arena_world(handler):
    """One location whose attack handler is ``handler``."""
    builder = WorldBuilder("Arena")
    builder.location("arena").name("Arena").attack(handler)
    builder.start("arena")
    return builder.build()


@pytest.mark.asyncio
async def test_each_turn_renders_location_with_items(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["help"])

    await game.play_turn()

    assert isinstance(io.sent[0], LocationMessage)
    rendered = io.output[0]
    assert rendered.startswith("== Hall ==")
    assert "A bare hall." in rendered
    assert "Exits: east" in rendered
    assert "There is a crate here.\nThere is a lamp here." in rendered


@pytest.mark.asyncio
async def test_go_without_matching_exit_stays_put(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["go north"])

    outcome = await game.play_turn()

    assert outcome is TurnOutcome.CONTINUE
    assert game.current_location.id == "hall"
    assert io.output[-1] == "There is nothing in that direction."


@pytest.mark.asyncio
async def test_blocked_exit_opens_once_obstacle_is_gone(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["go east", "take crate", "e"])

    await game.play_turn()
    assert game.current_location.id == "hall"
    assert io.output[-1] == "You can't go that way."

    await game.play_turn()
    assert game.player.inventory.has_item("crate")

    await game.play_turn()
    assert game.current_location.id == "study"


@pytest.mark.asyncio
async def test_go_without_direction_aborts_turn_only(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["go", "inv"])

    assert await game.play_turn() is TurnOutcome.ABORT
    assert io.output[-1] == "Go where?"
    assert game.state is GameState.IDLE

    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert isinstance(io.sent[-1], InventoryMessage)


@pytest.mark.asyncio
async def test_take_and_drop_move_items(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["take lamp"])
    hall = game.current_location

    await game.play_turn()
    assert io.output[-1] == "You take the lamp."
    assert hall.items.items == ["crate"]
    assert game.player.inventory.items == ["lamp"]

    assert await game.drop("lamp") is TurnOutcome.CONTINUE
    assert io.output[-1] == "You drop the lamp."
    assert hall.items.items == ["crate", "lamp"]
    assert game.player.inventory.items == []


@pytest.mark.asyncio
async def test_take_and_drop_report_absent_items(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["take ghost", "drop lamp"])

    await game.play_turn()
    assert io.output[-1] == "You don't see a ghost here."
    await game.play_turn()
    assert io.output[-1] == "You don't have a lamp."
    assert game.current_location.items.items == ["crate", "lamp"]


@pytest.mark.asyncio
async def test_take_and_drop_without_item_abort(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["take", "drop"])

    assert await game.play_turn() is TurnOutcome.ABORT
    assert io.output[-1] == "Take what?"
    assert await game.play_turn() is TurnOutcome.ABORT
    assert io.output[-1] == "Drop what?"


@pytest.mark.asyncio
async def test_empty_inventory(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["inv"])

    await game.play_turn()

    assert io.output[-1] == "You are carrying:\n(None)"


@pytest.mark.asyncio
async def test_unknown_verb(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["dance wildly", ""])

    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert io.output[-1] == "I don't know how to do that."
    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert io.output[-1] == "I don't know how to do that."


@pytest.mark.asyncio
async def test_quit_ends_session_without_reading_more(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["quit", "inv"])

    await game.run()

    assert game.state is GameState.TERMINATED
    assert io.output[-1] == "Goodbye."
    assert io.inputs == ["quit"]
    assert io.remaining == 1
    with pytest.raises(SessionTerminated):
        await game.play_turn()


@pytest.mark.asyncio
async def test_end_of_input_quits(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, [])

    await game.run()

    assert game.state is GameState.TERMINATED
    assert game.turns == 1
    assert len(io.sent) == 1


@pytest.mark.asyncio
async def test_attack_handler_receives_target_and_instrument(make_game) -> None:
    calls = []

    async def handler(game, target, instrument):
        calls.append((target, instrument))

    game, io = make_game(arena_world(handler), ["attack troll", "attack troll with sword"])
    game.player.inventory.add_item("sword")

    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert calls == [("troll", None), ("troll", "sword")]


@pytest.mark.asyncio
async def test_attack_aborts_before_handler_on_bad_arguments(make_game) -> None:
    calls = []

    async def handler(game, target, instrument):
        calls.append(target)

    lines = ["attack", "attack troll with", "attack troll with sword", "attack troll using sword"]
    game, io = make_game(arena_world(handler), lines)

    replies = []
    for _ in lines:
        assert await game.play_turn() is TurnOutcome.ABORT
        replies.append(io.output[-1])

    assert calls == []
    assert replies == [
        "Attack what?",
        "Attack the troll with what?",
        "You don't have a sword.",
        "Try: attack troll with <item>",
    ]


@pytest.mark.asyncio
async def test_abort_inside_attack_handler_keeps_session(make_game) -> None:
    async def handler(game, target, instrument):
        await game.tell("You miss.")
        return TurnOutcome.ABORT

    game, io = make_game(arena_world(handler), ["attack troll", "inv"])

    await game.run()

    assert io.remaining == 0
    assert "You miss." in io.output
    assert isinstance(io.sent[3], InventoryMessage)
    assert game.turns == 3


@pytest.mark.asyncio
async def test_quit_inside_attack_handler_ends_session(make_game) -> None:
    async def handler(game, target, instrument):
        await game.tell("The dragon eats you.")
        return TurnOutcome.QUIT

    game, io = make_game(arena_world(handler), ["attack dragon", "inv"])

    await game.run()

    assert game.state is GameState.TERMINATED
    assert io.output[-1] == "The dragon eats you."
    assert io.remaining == 1


@pytest.mark.asyncio
async def test_default_attack_handler(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["attack crate"])

    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert io.output[-1] == "Violence isn't the answer here."


@pytest.mark.asyncio
async def test_help_lists_commands(two_room_world, make_game) -> None:
    game, io = make_game(two_room_world, ["help"])

    await game.play_turn()

    for verb in ("go", "take", "drop", "inv", "attack", "help", "quit"):
        assert verb in io.output[-1]


@pytest.mark.asyncio
async def test_mixed_case_items_can_be_taken_and_dropped(make_game) -> None:
    builder = WorldBuilder("Case")
    builder.location("hall").item("Lamp")
    builder.start("hall")
    game, io = make_game(builder.build(), ["take Lamp", "drop LAMP"])

    await game.play_turn()
    assert io.output[-1] == "You take the lamp."
    assert game.player.inventory.items == ["lamp"]
    assert game.current_location.items.items == []

    await game.play_turn()
    assert io.output[-1] == "You drop the lamp."
    assert game.current_location.items.items == ["lamp"]


@pytest.mark.asyncio
async def test_fixed_items_cannot_be_taken(make_game) -> None:
    builder = WorldBuilder("Fixed")
    builder.location("hall").fixed("Statue").item("lamp")
    builder.start("hall")
    game, io = make_game(builder.build(), ["take statue", "take lamp"])

    assert await game.play_turn() is TurnOutcome.CONTINUE
    assert io.output[-1] == "You can't take the statue."
    assert game.current_location.items.items == ["statue", "lamp"]
    assert game.player.inventory.items == []

    await game.play_turn()
    assert game.player.inventory.items == ["lamp"]


@pytest.mark.asyncio
async def test_raising_handler_leaves_game_idle(make_game) -> None:
    async def handler(game, target, instrument):
        raise RuntimeError("broken world content")

    game, io = make_game(arena_world(handler), ["attack troll", "inv"])

    with pytest.raises(RuntimeError, match="broken world content"):
        await game.play_turn()

    assert game.state is GameState.IDLE
    assert game.turns == 1
    assert await game.play_turn() is TurnOutcome.CONTINUE


def test_game_rejects_world_with_dangling_exit() -> None:
    hall = Location(id="hall", exits=[LocationExit(direction="north", destination_id="attic")])
    world = World(locations={"hall": hall}, starting_location_id="hall")

    with pytest.raises(UnknownLocationError, match="attic"):
        Game(world, Player(), ScriptedIO([]))
