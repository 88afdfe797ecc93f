from theater_booking.core.exceptions import SeatAlreadyBookedError, SeatOutOfBoundsError


class SeatingGrid:
    """Booked/free matrix for one room. Cells only ever go from free to booked."""

    def __init__(self, cells: list[list[bool]]):
        self._cells = cells

    @classmethod
    def allocate(cls, rows: int, columns: int) -> "SeatingGrid":
        if rows <= 0 or columns <= 0:
            raise ValueError("Seating grid needs at least one row and one column")
        return cls([[False] * columns for _ in range(rows)])

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return len(self._cells[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def is_free(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            raise SeatOutOfBoundsError(row, col)
        return not self._cells[row][col]

    def book(self, row: int, col: int) -> None:
        if not self.is_free(row, col):
            raise SeatAlreadyBookedError(row, col)
        self._cells[row][col] = True

    def booked_count(self) -> int:
        return sum(sum(row) for row in self._cells)

    def to_rows(self) -> list[list[int]]:
        return [[int(cell) for cell in row] for row in self._cells]
