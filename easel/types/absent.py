from __future__ import annotations


class AbsentType:
    """The value of a call that finishes without returning anything."""

    def __repr__(self): return "none"
    def __bool__(self): return False

    # Equal only to itself
    def __eq__(self, other):
        return isinstance(other, AbsentType)

    def __hash__(self):
        return hash(AbsentType)


Absent = AbsentType()
