import os

# Configuration du Jeu - Fish Clicker
GAME_CONFIG = {
    # Triés par seuil croissant, le premier palier commence à 0
    "tiers": [
        {"image": "fish1", "price": 5, "threshold": 0},
        {"image": "fish2", "price": 10, "threshold": 5},
        {"image": "fish4", "price": 15, "threshold": 20},
        {"image": "fish5", "price": 30, "threshold": 50},
        {"image": "turtle", "price": 40, "threshold": 100},
        {"image": "star", "price": 50, "threshold": 200},
        {"image": "kit", "price": 60, "threshold": 500}
    ],
    # Constante d'équilibrage : chaque tap vend 2 poissons
    "tap_increment": 2,
    "snapshot_keys": {
        "revenue": "revenue",
        "units_sold": "units_sold",
        "elapsed_seconds": "elapsed_seconds"
    },
    "share_text": "J'ai vendu {units_sold} poissons pour un total de {revenue}$ #FishClicker",
    "sharing_not_available": "Partage non disponible sur cet appareil"
}

SECRET_KEY = os.environ.get('SECRET_KEY', 'fishclicker_dev_secret')
PORT = int(os.environ.get('PORT', 5000))

# 'eventlet' en production, 'threading' pour les tests
ASYNC_MODE = os.environ.get('ASYNC_MODE', 'eventlet')

TICK_INTERVAL = float(os.environ.get('TICK_INTERVAL', 1))
LOG_TICKS_EVERY = int(os.environ.get('LOG_TICKS_EVERY', 60))
