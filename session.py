from config import GAME_CONFIG

KEYS = GAME_CONFIG["snapshot_keys"]


class SessionState:
    """État d'une partie : compteurs en mémoire + palier affiché"""

    def __init__(self, units_sold, revenue, elapsed_seconds, current_tier):
        self.units_sold = units_sold
        self.revenue = revenue
        self.elapsed_seconds = elapsed_seconds
        self.current_tier = current_tier

    def __repr__(self):
        return (f"SessionState(units_sold={self.units_sold}, revenue={self.revenue}, "
                f"elapsed_seconds={self.elapsed_seconds}, tier={self.current_tier.image_id})")


def new_session(table):
    return SessionState(0, 0, 0, table.first)


def sell(state, table):
    """
    Gestion d'un tap : vend des unités au prix du palier courant,
    puis recalcule le palier. Renvoie True si le palier a changé.
    """
    increment = GAME_CONFIG["tap_increment"]

    # Le revenu utilise le prix du palier AVANT la mise à jour
    state.revenue += increment * state.current_tier.price
    state.units_sold += increment

    new_tier = table.lookup(state.units_sold)
    if new_tier is not state.current_tier:
        state.current_tier = new_tier
        return True
    return False


def save_snapshot(state):
    # Le palier n'est pas sauvegardé, il est recalculé à la restauration
    return {
        KEYS["revenue"]: state.revenue,
        KEYS["units_sold"]: state.units_sold,
        KEYS["elapsed_seconds"]: state.elapsed_seconds
    }


def restore_snapshot(snapshot, table):
    # Pas de sauvegarde = démarrage à zéro
    if snapshot is None:
        return new_session(table)

    units_sold = snapshot.get(KEYS["units_sold"], 0)
    return SessionState(
        units_sold=units_sold,
        revenue=snapshot.get(KEYS["revenue"], 0),
        elapsed_seconds=snapshot.get(KEYS["elapsed_seconds"], 0),
        current_tier=table.lookup(units_sold)
    )
