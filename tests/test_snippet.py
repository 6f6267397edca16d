from __future__ import annotations

from pathlib import Path

from levelsnippet.classes import World
from levelsnippet.maps import MapLinks
from levelsnippet.snippet import world_fragment

from conftest import achievements_world


def render(found: tuple[str, ...], tmp_path: Path) -> str:
    world = World(achievements_world(), base_path=tmp_path)
    return world_fragment(world, MapLinks(world.path, found)).to_string()


def test_fragment_without_maps(tmp_path: Path) -> None:
    html = render((), tmp_path)

    assert html.startswith("<li><div><span>acheivements world</span></div>")
    assert "<div><span>Seed</span><span>-1234567890123</span></div>" in html
    assert "<div><span>Type</span><span>Creative</span></div>" in html
    assert "<div><span>Difficulty</span><span>Normal</span></div>" in html
    assert "<div><span>Last Played</span><span>Sep 1" in html
    assert html.endswith("</span></div></li>")
    assert "Map" not in html


def test_fragment_rows_are_in_order(tmp_path: Path) -> None:
    html = render(("map", "index"), tmp_path)

    labels = ["Seed", "Type", "Difficulty", "Last Played", "Papyrus Map", "Bedrock-viz Map"]
    positions = [html.index(label) for label in labels]
    assert positions == sorted(positions)


def test_fragment_links_every_map(tmp_path: Path) -> None:
    html = render(("map", "index"), tmp_path)

    assert '<div><a href="acheivementsworld/map/">acheivements world</a></div>' in html
    assert html.endswith(
        '<div><a href="acheivementsworld/map/">Papyrus Map</a></div>'
        '<div><a href="acheivementsworld/index/">Bedrock-viz Map</a></div></li>'
    )
