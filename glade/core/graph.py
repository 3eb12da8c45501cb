import networkx as nx

from .world import World


def build_graph(world: World) -> nx.DiGraph:
    """Build a directed graph of the world, one edge per declared exit.

    Exit conditions are ignored: an edge means the exit exists, not that it
    is currently open.
    """
    G = nx.DiGraph()
    G.add_nodes_from(world.locations)
    for location in world.locations.values():
        for exit in location.exits:
            if exit.destination_id in world.locations:
                G.add_edge(location.id, exit.destination_id, direction=exit.direction)
    return G


def unreachable_locations(world: World) -> set[str]:
    """Get the ids of locations that cannot be reached from the start.

    Args:
        world: The world to analyse

    Returns:
        Set of location ids with no path from the starting location
    """
    if world.starting_location_id is None:
        return set(world.locations)
    G = build_graph(world)
    reachable = nx.descendants(G, world.starting_location_id) | {
        world.starting_location_id
    }
    return set(world.locations) - reachable
