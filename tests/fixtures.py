"""Astronomical node subtypes and relationship kinds shared by the tests."""

from api.traversal_api.model import Node

IS_ORBITED_BY = "isOrbitedBy"
HAS_MOON = "hasMoon"


class AstronomicalObject(Node):
    def __init__(self, name: str):
        super().__init__(name, label=name)
        self.name = name


class CentreOfUniverse(AstronomicalObject):
    pass


class Star(AstronomicalObject):
    pass


class Planet(AstronomicalObject):
    pass


class Moon(AstronomicalObject):
    pass
