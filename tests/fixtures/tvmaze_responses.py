"""
Mock TVMaze API responses for testing.

Realistic (trimmed) responses of GET /search/shows?q=...
These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /search/shows?q=great series
TVMAZE_SEARCH_RESPONSE = [
    {
        "score": 0.9081,
        "show": {
            "id": 1871,
            "url": "https://www.tvmaze.com/shows/1871/great-series",
            "name": "Great Series",
            "type": "Scripted",
            "language": "English",
            "genres": ["Drama"],
            "status": "Ended",
            "premiered": "2005-09-22",
            "network": {"id": 2, "name": "CBS"},
        },
    },
    {
        "score": 0.6512,
        "show": {
            "id": 40210,
            "url": "https://www.tvmaze.com/shows/40210/the-great-series-revisited",
            "name": "The Great Series Revisited",
            "type": "Documentary",
            "language": "English",
            "genres": [],
            "status": "Ended",
            "premiered": None,
            "network": None,
        },
    },
]

# Aucun resultat
TVMAZE_SEARCH_EMPTY_RESPONSE: list = []

# Reponse inattendue (objet au lieu d'une liste)
TVMAZE_UNEXPECTED_RESPONSE = {"name": "Not Found", "message": "", "code": 0, "status": 404}
