import os


ELASTICSEARCH_HOST = os.getenv('ELASTICSEARCH_HOST', 'http://localhost:9200')
ELASTICSEARCH_USER = os.getenv('ELASTICSEARCH_USER', 'elastic')
ELASTICSEARCH_PASSWORD = os.getenv('ELASTICSEARCH_PASSWORD', 'ChangeMe')

DEFAULT_INDEX_PREFIX = "tetraflow"

# Index suffix per discipline, e.g. "tetraflow-rides"
DISCIPLINE_INDEX_SUFFIXES = {
    "riding": "rides",
    "running": "runs",
    "swimming": "swims",
    "shooting": "shoots",
}

# Documents per scroll page when reading a whole discipline index
DEFAULT_SCAN_BATCH_SIZE = 1000

DEFAULT_WEEKLY_TREND_WEEKS = 8

# Points per arrow by target face
TARGET_MAX_SCORES = {
    "olympic": 10,
    "compound": 10,
    "barebow": 10,
    "field": 6,
    "nfaa": 5,
}
