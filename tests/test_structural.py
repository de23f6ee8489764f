from __future__ import annotations

import pytest

from pattern_catalog import run
from pattern_catalog.structural.adapter import AudioPlayer
from pattern_catalog.structural.composite import CompositeGraphic, Ellipse, Square
from pattern_catalog.structural.decorator import BananaMilkShake, ConcreteMilkShake, PeanutButterMilkShake
from pattern_catalog.structural.flyweight import CoffeeFlavorFactory
from pattern_catalog.structural.proxy import InternetProxy


def _lines(name: str) -> list[str]:
    return [event.text for event in run(name)]


def test_adapter_rejects_unknown_media(capsys: pytest.CaptureFixture[str]) -> None:
    player = AudioPlayer()
    assert player.play("VLC", "movie.vlc") is True
    assert player.play("avi", "clip.avi") is False
    assert capsys.readouterr().out.splitlines() == [
        "Playing vlc file. Name: movie.vlc",
        "Invalid media. avi format not supported",
    ]


def test_bridge_scenario() -> None:
    assert _lines("bridge") == ["TV turned on", "VacuumCleaner turned on"]


def test_composite_draws_depth_first(capsys: pytest.CaptureFixture[str]) -> None:
    inner = CompositeGraphic([Square(), Ellipse()])
    root = CompositeGraphic([Ellipse(), inner])
    root.draw()
    assert capsys.readouterr().out.splitlines() == ["Ellipse", "Square", "Ellipse"]

    root.remove(inner)
    assert len(root) == 1
    assert _lines("composite") == ["Ellipse", "Ellipse", "Square", "Ellipse", "Ellipse", "Square", "Square", "Square"]


def test_decorators_delegate_to_base_first(capsys: pytest.CaptureFixture[str]) -> None:
    BananaMilkShake(PeanutButterMilkShake(ConcreteMilkShake())).get_taste()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "It’s milk !"
    assert lines[1] == " Adding Peanut butter flavor to the milk shake !"
    assert lines[-1] == " It’s Banana milk shake !"


def test_facade_boot_sequence() -> None:
    assert _lines("facade") == [
        "Freezing.",
        "Loading from memory position: 0",
        "Jump to 0.",
        "Executing.",
    ]


def test_flyweight_shares_instances() -> None:
    factory = CoffeeFlavorFactory()
    espresso = factory.get_coffee_flavor("Espresso")
    assert factory.get_coffee_flavor("Espresso") is espresso
    assert factory.total_flavors_made == 1

    factory.get_coffee_flavor("Latte")
    assert factory.total_flavors_made == 2
    factory.get_coffee_flavor("Mocha")
    assert factory.total_flavors_made == 3


def test_flyweight_scenario_counts_flavors() -> None:
    lines = _lines("flyweight")
    assert lines[0] == "Serving Espresso coffee to table number 1"
    assert lines[-1] == "Total coffee flavors made: 3"


class _RecordingInternet:
    def __init__(self) -> None:
        self.visited: list[str] = []

    def connect_to(self, url: str) -> None:
        self.visited.append(url)


def test_proxy_blocks_banned_sites(capsys: pytest.CaptureFixture[str]) -> None:
    real = _RecordingInternet()
    proxy = InternetProxy(real)
    for url in ("open.com", "blocked.org"):
        proxy.connect_to(url)
    assert real.visited == ["open.com"]
    assert capsys.readouterr().out == "Access to blocked.org is restricted.\n"
