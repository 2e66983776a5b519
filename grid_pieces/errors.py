"""Engine exceptions."""


class CollisionError(Exception):
    """A step would leave the grid or land on an occupied cell.

    Deliberately carries no detail about which step or cell failed.
    """

    def __init__(self) -> None:
        super().__init__("collision")
