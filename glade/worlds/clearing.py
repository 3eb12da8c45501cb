"""A three-location demo: a clearing, a forest, and a ravine behind a boulder."""

from ..core.builder import WorldBuilder
from ..core.turn_outcome import TurnOutcome
from ..core.world import World


async def attack_in_forest(game, target: str, instrument: str | None) -> TurnOutcome:
    forest = game.current_location
    if target != "boulder" or not forest.items.has_item("boulder"):
        await game.tell(f"There is no {target} worth attacking here.")
        return TurnOutcome.CONTINUE
    if instrument != "hammer":
        await game.tell("You bruise your hands on the boulder. It does not budge.")
        return TurnOutcome.ABORT

    forest.items.remove_item("boulder")
    forest.items.add_item("gravel")
    await game.tell("The boulder cracks apart. The way east is clear.", "success")
    return TurnOutcome.CONTINUE


def build() -> World:
    builder = WorldBuilder("the Clearing")

    clearing = builder.location("clearing")
    clearing.name("Clearing").description(
        "Sunlight falls into a grassy clearing. A path leads north into the trees."
    )
    clearing.item("hammer")
    # The forest is declared below
    clearing.exit("north").to("forest")

    forest = builder.location("forest")
    forest.name("Forest").description(
        "Old trees crowd around you. A boulder sits against a gap in the rocks to the east."
    )
    forest.item("twig").fixed("boulder")
    forest.exit("east").to("ravine").when(lambda here: not here.items.has_item("boulder"))
    forest.exit("west").to(clearing)
    forest.attack(attack_in_forest)

    ravine = builder.location("ravine")
    ravine.name("Ravine").description("A narrow ravine. Water trickles somewhere below.")
    ravine.item("gem")
    ravine.exit("west").to(forest)

    builder.start(clearing)
    return builder.build()
