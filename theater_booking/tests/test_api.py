import pytest
from fastapi.testclient import TestClient

from theater_booking.app import create_app

SHOWTIME = "2024-01-01T10:00"


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    theater = client.post("/api/v1/theaters", json={
        "name": "Grand",
        "location": "Main Street",
        "rooms": [
            {"name": "Blue", "capacity": {"rows": 2, "columns": 2}, "showtimes": [SHOWTIME]},
            {"name": "Red", "capacity": {"rows": 1, "columns": 3}, "showtimes": []},
        ],
    })
    assert theater.status_code == 201
    movie = client.post("/api/v1/movies", json={
        "title": "Arrival", "actor": "Jeremy", "actress": "Amy",
        "duration": 116, "theaterId": 1, "roomId": 1, "popularity": 7,
    })
    assert movie.status_code == 201
    return client


def book(client, seats, **overrides):
    payload = {"movieId": 1, "theaterId": 1, "roomId": 1, "showtime": SHOWTIME,
               "seats": [{"row": row, "col": col} for row, col in seats]}
    payload.update(overrides)
    return client.post("/api/v1/book-ticket", json=payload)


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_register_theater(seeded_client):
    theaters = seeded_client.get("/api/v1/theaters").json()
    assert len(theaters) == 1
    theater = theaters[0]
    assert theater["id"] == 1
    assert [room["id"] for room in theater["rooms"]] == [1, 2]
    assert theater["rooms"][0]["seating"] == [[0, 0], [0, 0]]
    assert theater["rooms"][1]["capacity"] == {"rows": 1, "columns": 3}


def test_register_theater_rejects_bad_room(client):
    response = client.post("/api/v1/theaters", json={
        "name": "Grand", "location": "Main Street",
        "rooms": [{"name": "Blue", "capacity": {"rows": 2, "columns": 2}}],
    })
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidInput"
    assert "showtimes" in response.json()["message"]
    assert client.get("/api/v1/theaters").json() == []


def test_unknown_theater(client):
    response = client.get("/api/v1/theaters/4")
    assert response.status_code == 404
    assert response.json()["error"] == "TheaterNotFound"


def test_register_movie(seeded_client):
    movie = seeded_client.get("/api/v1/movies").json()[0]
    assert movie["status"] == "pending"
    assert movie["bookedTickets"] == 0
    assert movie["theater"] == "Grand"
    assert movie["room"] == "Blue"
    assert movie["showtimes"] == [SHOWTIME]


def test_register_movie_in_missing_room(seeded_client):
    response = seeded_client.post("/api/v1/movies", json={
        "title": "Heat", "actor": "Al", "actress": "Amy",
        "duration": 170, "theaterId": 1, "roomId": 5,
    })
    assert response.status_code == 404
    assert response.json() == {"error": "RoomNotFound", "message": "Room not found in the selected theater"}


def test_booking_flow(seeded_client):
    response = book(seeded_client, [(0, 0), (0, 1)])
    assert response.status_code == 200
    assert response.json() == {
        "message": "Tickets booked successfully",
        "bookedSeats": [{"row": 0, "col": 0}, {"row": 0, "col": 1}],
    }

    response = book(seeded_client, [(0, 0)])
    assert response.status_code == 400
    assert response.json() == {
        "error": "SeatAlreadyBooked",
        "message": "Seat at row 0 and col 0 is already booked",
        "row": 0,
        "col": 0,
    }

    tickets = seeded_client.get("/api/v1/movies/tickets", params={"title": "arrival"}).json()
    assert tickets == {"title": "Arrival", "bookedTickets": 2}


def test_booking_out_of_bounds(seeded_client):
    response = book(seeded_client, [(5, 0)])
    assert response.status_code == 400
    assert response.json()["error"] == "SeatOutOfBounds"
    assert response.json()["row"] == 5


def test_booking_invalid_showtime(seeded_client):
    response = book(seeded_client, [(0, 0)], showtime="2030-01-01T10:00")
    assert response.status_code == 404
    assert response.json()["message"] == "Invalid showtime"


def test_booking_requires_seats(seeded_client):
    response = book(seeded_client, [])
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidInput"


def test_malformed_booking_uses_error_shape(seeded_client):
    payload = {"movieId": 1, "theaterId": 1, "roomId": 1, "showtime": SHOWTIME}
    response = seeded_client.post("/api/v1/book-ticket", json=payload)
    assert response.status_code == 422
    assert response.json() == {"error": "InvalidInput", "message": "Invalid input data: seats: Field required"}

    response = book(seeded_client, [(0, 0), (0, 0)])
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidInput"
    assert seeded_client.get("/api/v1/movies/tickets", params={"title": "Arrival"}).json()["bookedTickets"] == 0


def test_seating_projection(seeded_client):
    book(seeded_client, [(1, 0)])
    first = seeded_client.get("/api/v1/theaters/1/rooms/1/seating").json()
    second = seeded_client.get("/api/v1/theaters/1/rooms/1/seating").json()

    assert first == second
    assert first == [
        {"x": 0, "y": 0, "value": 0},
        {"x": 1, "y": 0, "value": 0},
        {"x": 0, "y": 1, "value": 1},
        {"x": 1, "y": 1, "value": 0},
    ]


def test_seating_visual(seeded_client):
    book(seeded_client, [(0, 1)])
    response = seeded_client.get("/api/v1/theaters/1/rooms/1/seating/visual")
    assert response.status_code == 200
    assert response.text == "Seating Arrangement:\nO X  Row 1\nO O  Row 2\n"


def test_seating_unknown_room(seeded_client):
    response = seeded_client.get("/api/v1/theaters/1/rooms/3/seating")
    assert response.status_code == 404


def test_movie_queries(seeded_client):
    seeded_client.post("/api/v1/movies", json={
        "title": "Arrival Redux", "actor": "J", "actress": "A",
        "duration": 100, "theaterId": 1, "roomId": 2, "popularity": 9,
    })

    by_title = seeded_client.get("/api/v1/movies", params={"title": "REDUX"}).json()
    assert [m["title"] for m in by_title] == ["Arrival Redux"]

    sorted_movies = seeded_client.get("/api/v1/movies", params={"sortBy": "popularity"}).json()
    assert [m["title"] for m in sorted_movies] == ["Arrival Redux", "Arrival"]

    popular = seeded_client.get("/api/v1/movies/popular").json()
    assert [m["id"] for m in popular] == [2, 1]


def test_tickets_lookup_errors(seeded_client):
    assert seeded_client.get("/api/v1/movies/tickets").status_code == 400
    assert seeded_client.get("/api/v1/movies/tickets", params={"title": "Nope"}).status_code == 404
