"""Power points: the player's vitality."""

STARTING_POWER = 100
MOVE_COST = 3


class PowerPool:
    """
    A non-negative pool of power points.

    Deductions are floored at zero and additions are uncapped. An empty pool
    means the player is dead.
    """

    def __init__(self, points: int = STARTING_POWER) -> None:
        if points < 0:
            raise ValueError(f"Power points cannot be negative: {points}")
        self.points: int = points

    def add(self, amount: int) -> int:
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        self.points += amount
        return self.points

    def deduct(self, amount: int) -> int:
        if amount < 0:
            raise ValueError(f"Cannot deduct a negative amount: {amount}")
        self.points = max(0, self.points - amount)
        return self.points

    def drain(self) -> None:
        self.points = 0

    def is_alive(self) -> bool:
        return self.points > 0

    def __repr__(self) -> str:
        return f"PowerPool({self.points})"
