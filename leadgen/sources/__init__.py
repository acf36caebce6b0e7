from leadgen.sources.fixtures import FixtureSource

__all__ = [
    "FixtureSource",
]
