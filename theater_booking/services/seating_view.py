from theater_booking.models import Room


def seating_projection(room: Room) -> list[dict]:
    """Row-major flat list of cells, as consumed by the seat graph renderer."""
    return [
        {"x": col, "y": row, "value": value}
        for row, cells in enumerate(room.seating.to_rows())
        for col, value in enumerate(cells)
    ]


def seating_visualization(room: Room) -> str:
    visual = "Seating Arrangement:\n"
    for row_index, cells in enumerate(room.seating.to_rows()):
        seats = " ".join("X" if value else "O" for value in cells)
        visual += f"{seats}  Row {row_index + 1}\n"
    return visual
