GENRES = ("Action", "RPG", "Simulation", "Strategy", "Casual", "Other")

RATINGS = (
    "Overwhelmingly Negative",
    "Very Negative",
    "Mostly Negative",
    "Mixed",
    "Mostly Positive",
    "Very Positive",
    "Overwhelmingly Positive",
)

# category10 palette, assigned in GENRES order
GENRE_COLORS = {
    "Action": "#1f77b4",
    "RPG": "#ff7f0e",
    "Simulation": "#2ca02c",
    "Strategy": "#d62728",
    "Casual": "#9467bd",
    "Other": "#8c564b",
}

RELEASES_TITLE = "Game Releases Per Year"
GENRES_TITLE = "Genre Distribution"


def ratings_title(year) -> str:
    return f"{year} Ratings Distribution"
