from __future__ import annotations


class UnitType:
    """The "no useful value" result of write and of top-level statements."""
    __slots__ = ()

    def __repr__(self): return "Unit"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()
