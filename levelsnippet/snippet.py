from .classes import World
from .maps import RENDERERS, MapLinks
from .markup import Node, a, div, if_not_none, span, t, tag


def row(label: str, value) -> Node:
    return div(span(t(label)), span(t(value)))


def world_fragment(world: World, links: MapLinks) -> Node:
    """
    builds the <li> describing a world

    the world name links to the preferred map, and every map that exists
    also gets a link of its own, even when it is the same one
    """
    default_href = links.default_href
    if default_href is None:
        title = span(t(world.name))
    else:
        title = a(default_href, t(world.name))
    return tag(
        "li",
        div(title),
        row("Seed", world.seed),
        row("Type", world.game_type),
        row("Difficulty", world.difficulty),
        row("Last Played", world.last_played),
        *(
            if_not_none(
                links.get(directory), div(a(links.href(directory), t(label)))
            )
            for directory, label in RENDERERS
        ),
    )

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
