import os

DATA_PATH = os.getenv("STEAMVIZ_DATA_PATH", os.path.join("data", "data.csv"))
LOG_LEVEL = os.getenv("STEAMVIZ_LOG_LEVEL", "INFO").upper()

# column names in the releases file
DATE_COLUMN = "release_date"
GENRE_COLUMN = "genres"
RATING_COLUMN = "overall_player_rating"
